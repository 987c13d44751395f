"""Calendar marker index derived from checkpoints and tasks."""

from collections.abc import Iterable

from empower.schemas.calendar import (
    CalendarDot,
    CalendarMark,
    CalendarMarkIndex,
    ContainerStyle,
    MarkStyle,
    Task,
    TextStyle,
)
from empower.schemas.roadmap import Checkpoint

COMPLETED_DOT_COLOR = "#4CAF50"
COMPLETED_BACKGROUND = "#E8F5E9"
COMPLETED_TEXT_COLOR = "#2E7D32"

PENDING_DOT_COLOR = "#FF5722"
PENDING_BACKGROUND = "#FFF3E0"
PENDING_TEXT_COLOR = "#E64A19"

TASK_DOT_KEY = "task"
TASK_DOT_COLOR = "#3F51B5"


def _checkpoint_mark(completed: bool) -> CalendarMark:
    if completed:
        dot, background, text = COMPLETED_DOT_COLOR, COMPLETED_BACKGROUND, COMPLETED_TEXT_COLOR
    else:
        dot, background, text = PENDING_DOT_COLOR, PENDING_BACKGROUND, PENDING_TEXT_COLOR
    return CalendarMark(
        selected=True,
        marked=True,
        dot_color=dot,
        custom_styles=MarkStyle(
            container=ContainerStyle(background_color=background),
            text=TextStyle(color=text),
        ),
    )


def build_calendar_marks(
    checkpoints: Iterable[Checkpoint],
    tasks: Iterable[Task] = (),
) -> CalendarMarkIndex:
    """Rebuild the full date -> mark index.

    A date shared by several checkpoints shows as completed only when all of
    them are completed. Tasks add a dot to their date and never overwrite the
    checkpoint fields. Output is fully determined by the inputs.
    """
    completed_by_date: dict[str, bool] = {}
    for checkpoint in checkpoints:
        key = checkpoint.date.isoformat()
        completed_by_date[key] = completed_by_date.get(key, True) and checkpoint.completed

    marks: CalendarMarkIndex = {
        key: _checkpoint_mark(completed) for key, completed in completed_by_date.items()
    }

    for task in tasks:
        key = task.date.isoformat()
        mark = marks.setdefault(key, CalendarMark())
        mark.marked = True
        mark.dots.append(CalendarDot(key=TASK_DOT_KEY, color=TASK_DOT_COLOR))

    return marks
