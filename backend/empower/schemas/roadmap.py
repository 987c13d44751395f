"""Roadmap schemas: skill input, milestones, checkpoints and resources."""

import datetime as dt
from enum import Enum

from pydantic import Field, field_validator, model_validator

from empower.schemas.base import APIModel, to_calendar_date

CHECKPOINTS_PER_MILESTONE = 3


class ResourceType(str, Enum):
    """Kind of learning resource."""

    VIDEO = "video"
    ARTICLE = "article"
    PRACTICE = "practice"
    PROJECT = "project"
    COMMUNITY = "community"


class Resource(APIModel):
    """A learning resource attached to a milestone."""

    type: ResourceType
    title: str
    url: str | None = None
    thumbnail_url: str | None = None
    description: str | None = None


class SkillRecord(APIModel):
    """One skill to develop, as returned by the profile analysis service."""

    skill: str = Field(min_length=1)
    description: str = ""
    start_date: dt.date
    end_date: dt.date
    priority: int = 0
    score: float = Field(ge=0, le=100)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _normalize_date(cls, value):
        return to_calendar_date(value)

    @model_validator(mode="after")
    def _check_date_range(self) -> "SkillRecord":
        if self.end_date < self.start_date:
            raise ValueError(
                f"endDate {self.end_date} is before startDate {self.start_date} for {self.skill!r}"
            )
        return self


class Checkpoint(APIModel):
    """A dated sub-goal within a milestone."""

    id: str
    milestone_id: int
    title: str
    date: dt.date
    completed: bool = False


class Milestone(APIModel):
    """A time-boxed unit of the roadmap tied to one skill."""

    id: int
    title: str
    description: str = ""
    start_date: dt.date
    end_date: dt.date
    progress: int = Field(default=0, ge=0, le=100)
    checkpoints: list[Checkpoint] = Field(
        min_length=CHECKPOINTS_PER_MILESTONE, max_length=CHECKPOINTS_PER_MILESTONE
    )
    resources: list[Resource] = Field(default_factory=list)


class Roadmap(APIModel):
    """The full ordered set of milestones for one generation cycle."""

    title: str
    overview: str
    milestones: list[Milestone]

    def get_milestone(self, milestone_id: int) -> Milestone | None:
        for milestone in self.milestones:
            if milestone.id == milestone_id:
                return milestone
        return None

    def all_checkpoints(self) -> list[Checkpoint]:
        """Flatten checkpoints across milestones, in roadmap order."""
        return [cp for milestone in self.milestones for cp in milestone.checkpoints]


# ============================================================================
# AI-generated roadmap shape
# ============================================================================


class GeneratedMilestone(APIModel):
    """A milestone as returned by the AI text-generation collaborator."""

    title: str = Field(min_length=1)
    description: str = ""
    duration: str | int | None = None
    resources: list[Resource] = Field(default_factory=list)
    completion_date: str | None = None


class GeneratedRoadmap(APIModel):
    """Roadmap JSON returned by the AI collaborator."""

    title: str = Field(min_length=1)
    overview: str = ""
    milestones: list[GeneratedMilestone] = Field(min_length=1)


# ============================================================================
# Profile analysis
# ============================================================================


class SkillProficiency(APIModel):
    """A user's self-reported or parsed skill level."""

    skill: str | None = None
    proficiency_level: float | None = None


class UserProfile(APIModel):
    """User details carried by the analysis response."""

    name: str
    email: str | None = None
    skills: list[SkillProficiency] = Field(default_factory=list)


class ResumeAnalysis(APIModel):
    """Profile analysis response: the user plus their skill roadmap."""

    user: UserProfile
    roadmap: list[SkillRecord]
