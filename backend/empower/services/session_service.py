"""Roadmap session lifecycle: generation, fallback and derived state."""

import datetime as dt
import uuid
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from empower.agent.roadmap_generator import generate_roadmap
from empower.core.config import get_settings
from empower.core.logging import get_logger
from empower.schemas.roadmap import Checkpoint, Roadmap, ResumeAnalysis, SkillRecord
from empower.schemas.session import RoadmapSession, RoadmapStatus
from empower.services import roadmap_service
from empower.services.calendar_service import build_calendar_marks
from empower.services.sample_data import FALLBACK_NOTICE, sample_analysis

logger = get_logger(__name__)


# ============================================================================
# Derived State
# ============================================================================


def refresh_calendar(session: RoadmapSession) -> None:
    """Rebuild the calendar index from every checkpoint and task."""
    checkpoints = session.roadmap.all_checkpoints() if session.roadmap else []
    session.calendar = build_calendar_marks(checkpoints, session.tasks)
    session.touch()


def toggle_checkpoint(session: RoadmapSession, checkpoint_id: str) -> Checkpoint | None:
    """Toggle a checkpoint and keep progress and calendar in step."""
    if session.roadmap is None:
        return None
    checkpoint = roadmap_service.toggle_checkpoint(session.roadmap, checkpoint_id)
    if checkpoint is not None:
        refresh_calendar(session)
    return checkpoint


# ============================================================================
# Lifecycle
# ============================================================================


def create_session(user_name: str | None = None) -> RoadmapSession:
    return RoadmapSession(
        id=str(uuid.uuid4()),
        user_name=user_name or get_settings().DEFAULT_USER_NAME,
    )


def begin_generation(session: RoadmapSession) -> None:
    """Enter the generating state. The current roadmap stays visible until replaced."""
    session.status = RoadmapStatus.GENERATING
    session.error = None
    session.touch()
    logger.info("Roadmap generation started", session_id=session.id)


def complete_generation(session: RoadmapSession, roadmap: Roadmap) -> RoadmapSession:
    """Install a new roadmap, discarding the previous one entirely."""
    session.roadmap = roadmap
    session.status = RoadmapStatus.READY
    refresh_calendar(session)
    logger.info(
        "Roadmap ready",
        session_id=session.id,
        title=roadmap.title,
        milestones=len(roadmap.milestones),
    )
    return session


def fail_generation(session: RoadmapSession, error: str) -> RoadmapSession:
    """Record the failure and fall back to the sample roadmap.

    The session ends up ready with a one-time notice for the user.
    """
    session.status = RoadmapStatus.FAILED
    session.error = error
    logger.warning("Roadmap generation failed, using sample roadmap", session_id=session.id, error=error)

    sample = sample_analysis()
    if not session.skills:
        session.skills = sample.user.skills
    roadmap = roadmap_service.assemble_roadmap(sample.roadmap, session.user_name)
    session.notice = FALLBACK_NOTICE
    return complete_generation(session, roadmap)


def build_from_skills(
    session: RoadmapSession,
    records: list[SkillRecord],
    user_name: str | None = None,
) -> RoadmapSession:
    """Build a roadmap from skill records already in hand."""
    if user_name:
        session.user_name = user_name
    begin_generation(session)
    roadmap = roadmap_service.assemble_roadmap(records, session.user_name)
    return complete_generation(session, roadmap)


def load_analysis(session: RoadmapSession, payload: Any) -> RoadmapSession:
    """Build the roadmap from a profile analysis response.

    A payload that does not validate falls back to the sample roadmap.
    """
    begin_generation(session)
    try:
        analysis = ResumeAnalysis.model_validate(payload)
    except ValidationError as e:
        return fail_generation(session, f"Invalid analysis response: {e.error_count()} error(s)")

    session.user_name = analysis.user.name
    session.skills = analysis.user.skills
    roadmap = roadmap_service.assemble_roadmap(analysis.roadmap, session.user_name)
    return complete_generation(session, roadmap)


async def generate_with_ai(
    session: RoadmapSession,
    skills: list[SkillRecord],
    user_context: str = "",
    start_date: dt.date | None = None,
    llm=None,
) -> RoadmapSession:
    """Ask the AI collaborator for a roadmap, falling back on any failure."""
    begin_generation(session)
    result = await generate_roadmap(skills, user_context, llm=llm)
    if result.roadmap is None:
        return fail_generation(session, result.error or "Roadmap generation failed")

    start = start_date or (skills[0].start_date if skills else dt.date.today())
    try:
        roadmap = roadmap_service.roadmap_from_generated(result.roadmap, start)
    except (OverflowError, ValueError) as e:
        # Replies that validate but cannot be scheduled
        return fail_generation(session, f"Unusable roadmap response: {e}")
    return complete_generation(session, roadmap)


def snapshot(session: RoadmapSession) -> RoadmapSession:
    """Copy the session for a response and clear its one-time notice."""
    view = session.model_copy(deep=True)
    session.notice = None
    return view


# ============================================================================
# In-memory Store
# ============================================================================


class SessionStore:
    """Holds live roadmap sessions. Nothing survives a restart."""

    def __init__(self) -> None:
        self._sessions: dict[str, RoadmapSession] = {}

    def create(self, user_name: str | None = None) -> RoadmapSession:
        session = create_session(user_name)
        self._sessions[session.id] = session
        logger.info("Roadmap session created", session_id=session.id, user_name=session.user_name)
        return session

    def get(self, session_id: str) -> RoadmapSession | None:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info("Roadmap session discarded", session_id=session_id)
        return removed is not None

    def __len__(self) -> int:
        return len(self._sessions)


@lru_cache
def get_session_store() -> SessionStore:
    """Get the process-wide session store."""
    return SessionStore()
