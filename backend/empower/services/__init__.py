"""Service layer modules."""

from empower.services import (
    analytics_service,
    calendar_service,
    resource_catalog,
    roadmap_service,
    session_service,
    task_service,
)

__all__ = [
    "analytics_service",
    "calendar_service",
    "resource_catalog",
    "roadmap_service",
    "session_service",
    "task_service",
]
