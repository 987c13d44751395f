"""Roadmap session routes."""

from fastapi import APIRouter, HTTPException, status

from empower.api.deps import RoadmapSessionDep, StoreDep
from empower.core.logging import get_logger
from empower.schemas import RoadmapSession, SessionCreate
from empower.services import session_service

logger = get_logger(__name__)
router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=RoadmapSession, status_code=status.HTTP_201_CREATED)
async def create_session(data: SessionCreate, store: StoreDep) -> RoadmapSession:
    """Open a new roadmap session (state starts empty)."""
    return store.create(data.user_name)


@router.get("/{session_id}", response_model=RoadmapSession)
async def get_session(session: RoadmapSessionDep) -> RoadmapSession:
    """Get the full session state. Any pending notice is returned once."""
    return session_service.snapshot(session)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, store: StoreDep) -> None:
    """Discard a session and all of its roadmap state."""
    if not store.delete(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        )
