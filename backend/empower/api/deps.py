"""API dependencies."""

from typing import Annotated, Any

from fastapi import Depends, HTTPException, status

from empower.schemas.session import RoadmapSession
from empower.services.session_service import SessionStore, get_session_store


def get_store() -> SessionStore:
    """Get the session store dependency."""
    return get_session_store()


StoreDep = Annotated[SessionStore, Depends(get_store)]


def get_roadmap_session(session_id: str, store: StoreDep) -> RoadmapSession:
    """Resolve the session from the path or answer 404."""
    session = store.get(session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        )
    return session


def get_generation_llm() -> Any | None:
    """Chat model for roadmap generation; None uses the configured provider."""
    return None


RoadmapSessionDep = Annotated[RoadmapSession, Depends(get_roadmap_session)]
GenerationLLMDep = Annotated[Any | None, Depends(get_generation_llm)]
