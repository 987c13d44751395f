"""Roadmap session state and request schemas."""

import datetime as dt
from enum import Enum

from pydantic import Field

from empower.schemas.base import APIModel
from empower.schemas.calendar import CalendarMark, Task
from empower.schemas.roadmap import Roadmap, SkillProficiency, SkillRecord


class RoadmapStatus(str, Enum):
    """Roadmap lifecycle state."""

    EMPTY = "empty"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


def _now() -> dt.datetime:
    return dt.datetime.now(dt.UTC)


class RoadmapSession(APIModel):
    """All roadmap state owned by one active user session.

    The roadmap, tasks and calendar index live here and nowhere else; core
    functions take the session explicitly and mutate it in place.
    """

    id: str
    user_name: str
    status: RoadmapStatus = RoadmapStatus.EMPTY
    roadmap: Roadmap | None = None
    skills: list[SkillProficiency] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    calendar: dict[str, CalendarMark] = Field(default_factory=dict)
    notice: str | None = None  # one-time, cleared once shown
    error: str | None = None
    created_at: dt.datetime = Field(default_factory=_now)
    updated_at: dt.datetime = Field(default_factory=_now)

    def touch(self) -> None:
        self.updated_at = _now()


class SessionCreate(APIModel):
    """Create roadmap session request."""

    user_name: str | None = None


class SkillRoadmapRequest(APIModel):
    """Build a roadmap directly from skill records."""

    user_name: str | None = None
    skills: list[SkillRecord]


class GenerateRoadmapRequest(APIModel):
    """Ask the AI collaborator for a roadmap."""

    skills: list[SkillRecord] = Field(default_factory=list)
    user_context: str = ""
    start_date: dt.date | None = None


class TaskCreate(APIModel):
    """Add a task, optionally pinned to a calendar date."""

    text: str
    date: dt.date | None = None
