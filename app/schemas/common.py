"""
Field types shared by the request and response schemas.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator

# Upper bound of the INTEGER primary key columns
MAX_ID = 2_147_483_647


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive timestamps; they are stored in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]
