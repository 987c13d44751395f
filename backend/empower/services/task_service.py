"""Ad hoc learning tasks pinned to calendar dates."""

import datetime as dt
import uuid

from empower.core.logging import get_logger
from empower.schemas.calendar import Task
from empower.schemas.session import RoadmapSession
from empower.services.session_service import refresh_calendar

logger = get_logger(__name__)


def add_date_task(session: RoadmapSession, date: dt.date, text: str) -> Task | None:
    """Add a task on a specific date and mark it on the calendar.

    Blank text is ignored and returns None.
    """
    text = text.strip()
    if not text:
        return None

    task = Task(id=uuid.uuid4().hex, text=text, date=date)
    session.tasks.append(task)
    refresh_calendar(session)
    logger.info("Task added", session_id=session.id, task_id=task.id, date=date.isoformat())
    return task


def add_task(session: RoadmapSession, text: str, today: dt.date | None = None) -> Task | None:
    """Add a task dated today."""
    return add_date_task(session, today or dt.date.today(), text)


def toggle_task(session: RoadmapSession, task_id: str) -> Task | None:
    for task in session.tasks:
        if task.id == task_id:
            task.completed = not task.completed
            session.touch()
            return task
    return None
