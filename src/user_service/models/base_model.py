from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class User(CamelModel):
    """A user record held by the store.

    ``updated_at`` stays ``None`` until the first update and is left out of
    responses while unset.
    """

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime | None = None
