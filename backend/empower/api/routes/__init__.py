"""API routes."""

from empower.api.routes import roadmaps, sessions, tasks

__all__ = ["sessions", "roadmaps", "tasks"]
