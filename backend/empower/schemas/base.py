"""Shared schema base and field helpers."""

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base model using camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def to_calendar_date(value: Any) -> Any:
    """Normalize an ISO-8601 date or datetime to a calendar date.

    Aware datetimes are converted to UTC first, so "2025-03-22T00:00:00.000Z"
    and "2025-03-22" both become 2025-03-22. Anything else is passed through
    for pydantic to validate.
    """
    if isinstance(value, str) and "T" in value:
        value = dt.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(dt.UTC)
        return value.date()
    return value
