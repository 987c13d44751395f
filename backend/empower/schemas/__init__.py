"""Pydantic schemas."""

from empower.schemas.calendar import CalendarDot, CalendarMark, CalendarMarkIndex, Task
from empower.schemas.roadmap import (
    CHECKPOINTS_PER_MILESTONE,
    Checkpoint,
    GeneratedMilestone,
    GeneratedRoadmap,
    Milestone,
    Resource,
    ResourceType,
    ResumeAnalysis,
    Roadmap,
    SkillProficiency,
    SkillRecord,
    UserProfile,
)
from empower.schemas.session import (
    GenerateRoadmapRequest,
    RoadmapSession,
    RoadmapStatus,
    SessionCreate,
    SkillRoadmapRequest,
    TaskCreate,
)

__all__ = [
    "CHECKPOINTS_PER_MILESTONE",
    "CalendarDot",
    "CalendarMark",
    "CalendarMarkIndex",
    "Checkpoint",
    "GenerateRoadmapRequest",
    "GeneratedMilestone",
    "GeneratedRoadmap",
    "Milestone",
    "Resource",
    "ResourceType",
    "ResumeAnalysis",
    "Roadmap",
    "RoadmapSession",
    "RoadmapStatus",
    "SessionCreate",
    "SkillProficiency",
    "SkillRecord",
    "SkillRoadmapRequest",
    "Task",
    "TaskCreate",
    "UserProfile",
]
