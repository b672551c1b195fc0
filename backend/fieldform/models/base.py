"""Shared base classes for records and API schemas."""

from datetime import datetime, timezone

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat(value: datetime) -> str:
    """Render a timestamp as ISO-8601 with millisecond precision and a Z suffix."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    """Model whose attributes are snake_case in Python and camelCase on the wire."""
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class Record(CamelModel):
    """Base class for every record held in an in-memory store."""
