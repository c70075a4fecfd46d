"""Version utility module for the user service."""

from user_service.models.base_model import CamelModel
from user_service.settings import Settings


class VersionInfo(CamelModel):
    """Build metadata of the running service."""

    version: str
    build_time: str
    git_commit: str


def get_version(settings: Settings) -> VersionInfo:
    """Get the version information from the build metadata in settings.

    Args:
        settings: Application settings carrying ``APP_VERSION``, ``BUILD_TIME`` and ``GIT_COMMIT``

    Returns:
        VersionInfo with the configured values (or their defaults)
    """
    return VersionInfo(
        version=settings.app_version,
        build_time=settings.build_time,
        git_commit=settings.git_commit,
    )
