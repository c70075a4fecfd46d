"""Version API endpoint."""

from fastapi import APIRouter, Depends

from user_service.api.dependencies import service
from user_service.settings import Settings
from user_service.utils.version import VersionInfo, get_version

router = APIRouter(tags=["System"])

settings_dependency = Depends(service(Settings))


@router.get("/version", response_model=VersionInfo)
async def get_version_endpoint(settings: Settings = settings_dependency) -> VersionInfo:
    """Get the build metadata of the running service.

    Returns:
        VersionInfo: version, buildTime and gitCommit.
    """
    return get_version(settings)
