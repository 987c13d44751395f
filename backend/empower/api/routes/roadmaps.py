"""Roadmap generation, checkpoint and calendar routes."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException, status

from empower.api.deps import GenerationLLMDep, RoadmapSessionDep
from empower.core.logging import get_logger
from empower.schemas import (
    CalendarMark,
    Checkpoint,
    GenerateRoadmapRequest,
    RoadmapSession,
    RoadmapStatus,
    SkillRoadmapRequest,
)
from empower.services import analytics_service, session_service

logger = get_logger(__name__)
router = APIRouter(prefix="/sessions/{session_id}", tags=["roadmaps"])


def _ensure_idle(session: RoadmapSession) -> None:
    if session.status == RoadmapStatus.GENERATING:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A roadmap is already being generated for this session",
        )


@router.post("/roadmap", response_model=RoadmapSession)
async def load_analysis(
    session: RoadmapSessionDep,
    payload: Any = Body(...),
) -> RoadmapSession:
    """Build the roadmap from a profile analysis response.

    The payload is taken as-is; a malformed one yields the sample roadmap and
    a notice instead of an error.
    """
    _ensure_idle(session)
    session_service.load_analysis(session, payload)
    return session_service.snapshot(session)


@router.post("/roadmap/skills", response_model=RoadmapSession)
async def build_from_skills(
    data: SkillRoadmapRequest,
    session: RoadmapSessionDep,
) -> RoadmapSession:
    """Build the roadmap directly from skill records."""
    _ensure_idle(session)
    session_service.build_from_skills(session, data.skills, data.user_name)
    return session_service.snapshot(session)


@router.post("/roadmap/generate", response_model=RoadmapSession)
async def generate_roadmap(
    data: GenerateRoadmapRequest,
    session: RoadmapSessionDep,
    llm: GenerationLLMDep,
) -> RoadmapSession:
    """Generate the roadmap with the AI collaborator, falling back on failure."""
    _ensure_idle(session)
    await session_service.generate_with_ai(
        session,
        data.skills,
        user_context=data.user_context,
        start_date=data.start_date,
        llm=llm,
    )
    return session_service.snapshot(session)


@router.post("/checkpoints/{checkpoint_id}/toggle", response_model=RoadmapSession)
async def toggle_checkpoint(checkpoint_id: str, session: RoadmapSessionDep) -> RoadmapSession:
    """Flip a checkpoint. Unknown checkpoint ids leave the session unchanged."""
    checkpoint: Checkpoint | None = session_service.toggle_checkpoint(session, checkpoint_id)
    if checkpoint is None:
        logger.debug("Toggle ignored", session_id=session.id, checkpoint_id=checkpoint_id)
    return session_service.snapshot(session)


@router.get("/calendar", response_model=dict[str, CalendarMark])
async def get_calendar(session: RoadmapSessionDep) -> dict[str, CalendarMark]:
    """Get the date-keyed calendar marks."""
    return session.calendar


@router.get("/upcoming")
async def get_upcoming(session: RoadmapSessionDep) -> list[dict]:
    """Get the next incomplete checkpoints."""
    return analytics_service.upcoming_checkpoints(session.roadmap)


@router.get("/analytics")
async def get_analytics(session: RoadmapSessionDep) -> dict:
    """Get skill proficiency chart data and roadmap progress."""
    return {
        "skills": analytics_service.build_skills_chart(session.skills),
        "progress": analytics_service.roadmap_progress(session.roadmap),
    }
