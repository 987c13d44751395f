"""Calendar marker and task schemas."""

import datetime as dt

from pydantic import Field

from empower.schemas.base import APIModel


class Task(APIModel):
    """An ad hoc learning task added by the user."""

    id: str
    text: str
    date: dt.date
    completed: bool = False


class CalendarDot(APIModel):
    key: str
    color: str


class ContainerStyle(APIModel):
    background_color: str


class TextStyle(APIModel):
    color: str
    font_weight: str = "bold"


class MarkStyle(APIModel):
    container: ContainerStyle
    text: TextStyle


class CalendarMark(APIModel):
    """Display metadata for one calendar date."""

    selected: bool = False
    marked: bool = False
    dot_color: str | None = None
    custom_styles: MarkStyle | None = None
    dots: list[CalendarDot] = Field(default_factory=list)


# ISO date string -> mark
CalendarMarkIndex = dict[str, CalendarMark]
