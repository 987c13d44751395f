"""Roadmap assembly, checkpoint generation and progress tracking."""

import datetime as dt
import math
import re
from collections.abc import Sequence

from empower.core.logging import get_logger
from empower.schemas.base import to_calendar_date
from empower.schemas.roadmap import (
    CHECKPOINTS_PER_MILESTONE,
    Checkpoint,
    GeneratedRoadmap,
    Milestone,
    Roadmap,
    SkillRecord,
)
from empower.services.resource_catalog import get_resources_for_skill

logger = get_logger(__name__)

# Score above which the first checkpoint starts out completed
SEED_COMPLETION_SCORE = 50
DEFAULT_MILESTONE_DAYS = 14
MAX_MILESTONE_DAYS = 365

_DURATION_PATTERN = re.compile(r"(\d+)\s*(day|week|month)s?\b", re.IGNORECASE)
_UNIT_DAYS = {"day": 1, "week": 7, "month": 30}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (37.5 -> 38)."""
    return int(math.floor(value + 0.5))


# ============================================================================
# Checkpoints and Milestones
# ============================================================================


def generate_checkpoints(
    key: str,
    start_date: dt.date,
    end_date: dt.date,
    score: float,
    milestone_id: int,
) -> list[Checkpoint]:
    """Generate evenly spaced checkpoints across a milestone window.

    Checkpoint i falls on start + i * floor(days / 3). A zero-length window
    puts every checkpoint on the start date. Only the first checkpoint can be
    seeded as completed, and only when the score is above 50.
    """
    interval = (end_date - start_date).days // CHECKPOINTS_PER_MILESTONE
    checkpoints = []
    for index in range(CHECKPOINTS_PER_MILESTONE):
        number = index + 1
        checkpoints.append(
            Checkpoint(
                id=f"{key}-{number}",
                milestone_id=milestone_id,
                title=f"{key} Checkpoint {number}",
                date=start_date + dt.timedelta(days=index * interval),
                completed=index == 0 and score > SEED_COMPLETION_SCORE,
            )
        )
    return checkpoints


def build_milestone(record: SkillRecord, milestone_id: int) -> Milestone:
    """Build one milestone from a skill record.

    The seeded progress is half the skill score. It is an estimate only and is
    replaced by the checkpoint-derived value on the first checkpoint toggle.
    """
    return Milestone(
        id=milestone_id,
        title=f"{record.skill} Development",
        description=record.description,
        start_date=record.start_date,
        end_date=record.end_date,
        progress=round_half_up(record.score * 0.5),
        checkpoints=generate_checkpoints(
            record.skill,
            record.start_date,
            record.end_date,
            record.score,
            milestone_id,
        ),
        resources=get_resources_for_skill(record.skill),
    )


def format_overview(skills: Sequence[str]) -> str:
    return f"This roadmap enhances your skills in {', '.join(skills)}."


def assemble_roadmap(records: Sequence[SkillRecord], user_name: str) -> Roadmap:
    """Assemble a roadmap with one milestone per skill record, in input order."""
    milestones = [build_milestone(record, index) for index, record in enumerate(records, start=1)]
    roadmap = Roadmap(
        title=f"Empowerment Learning Journey for {user_name}",
        overview=format_overview([record.skill for record in records]),
        milestones=milestones,
    )
    logger.info("Roadmap assembled", user_name=user_name, milestones=len(milestones))
    return roadmap


# ============================================================================
# AI-generated roadmaps
# ============================================================================


def parse_duration_days(duration: str | int | None) -> int:
    """Parse a free-form duration such as "2 weeks" into days.

    Falls back to DEFAULT_MILESTONE_DAYS for anything unreadable and caps
    the result at MAX_MILESTONE_DAYS.
    """
    if isinstance(duration, int) and not isinstance(duration, bool):
        return min(duration, MAX_MILESTONE_DAYS) if duration > 0 else DEFAULT_MILESTONE_DAYS
    if isinstance(duration, str):
        text = duration.strip()
        if text.isdigit() and int(text) > 0:
            return min(int(text), MAX_MILESTONE_DAYS)
        match = _DURATION_PATTERN.search(text)
        if match:
            days = int(match.group(1)) * _UNIT_DAYS[match.group(2).lower()]
            if days > 0:
                return min(days, MAX_MILESTONE_DAYS)
    return DEFAULT_MILESTONE_DAYS


def _parse_completion_date(value: str | None) -> dt.date | None:
    if not value:
        return None
    try:
        parsed = to_calendar_date(value)
        if isinstance(parsed, str):
            parsed = dt.date.fromisoformat(parsed.strip())
    except ValueError:
        return None
    return parsed


def roadmap_from_generated(generated: GeneratedRoadmap, start: dt.date) -> Roadmap:
    """Convert an AI-generated roadmap into a trackable roadmap.

    Milestones are placed back to back from ``start``. A milestone ends on its
    completion date when that falls within MAX_MILESTONE_DAYS of its start,
    otherwise after its duration. Repeated titles get the milestone id
    appended to their checkpoint key so checkpoint ids stay unique.

    Raises:
        OverflowError: If the schedule runs past the last representable date
    """
    milestones = []
    seen_titles: set[str] = set()
    cursor = start
    for index, item in enumerate(generated.milestones, start=1):
        end = _parse_completion_date(item.completion_date)
        if end is None or end < cursor or (end - cursor).days > MAX_MILESTONE_DAYS:
            end = cursor + dt.timedelta(days=parse_duration_days(item.duration))

        key = item.title if item.title not in seen_titles else f"{item.title} {index}"
        seen_titles.add(item.title)

        resources = [resource.model_copy() for resource in item.resources]
        milestones.append(
            Milestone(
                id=index,
                title=item.title,
                description=item.description,
                start_date=cursor,
                end_date=end,
                progress=0,
                checkpoints=generate_checkpoints(key, cursor, end, 0, index),
                resources=resources or get_resources_for_skill(item.title),
            )
        )
        cursor = end

    return Roadmap(title=generated.title, overview=generated.overview, milestones=milestones)


# ============================================================================
# Progress Tracking
# ============================================================================


def calc_milestone_progress(milestone: Milestone) -> int:
    """Percentage of the milestone's checkpoints that are completed."""
    total = len(milestone.checkpoints)
    if total == 0:
        return 0
    completed = sum(1 for cp in milestone.checkpoints if cp.completed)
    return round_half_up(100 * completed / total)


def calc_overall_progress(roadmap: Roadmap) -> int:
    """Mean milestone progress across the roadmap."""
    if not roadmap.milestones:
        return 0
    total = sum(milestone.progress for milestone in roadmap.milestones)
    return round_half_up(total / len(roadmap.milestones))


def find_checkpoint(roadmap: Roadmap, checkpoint_id: str) -> Checkpoint | None:
    for milestone in roadmap.milestones:
        for checkpoint in milestone.checkpoints:
            if checkpoint.id == checkpoint_id:
                return checkpoint
    return None


def toggle_checkpoint(roadmap: Roadmap, checkpoint_id: str) -> Checkpoint | None:
    """Flip a checkpoint's completion and recompute milestone progress.

    Every milestone's progress is recomputed from its full checkpoint list, so
    after a toggle all progress values are checkpoint-derived. Unknown ids
    leave the roadmap untouched and return None.
    """
    checkpoint = find_checkpoint(roadmap, checkpoint_id)
    if checkpoint is None:
        logger.debug("Checkpoint not found, nothing to toggle", checkpoint_id=checkpoint_id)
        return None

    checkpoint.completed = not checkpoint.completed
    for milestone in roadmap.milestones:
        milestone.progress = calc_milestone_progress(milestone)

    owner = roadmap.get_milestone(checkpoint.milestone_id)
    logger.info(
        "Checkpoint toggled",
        checkpoint_id=checkpoint_id,
        milestone_id=checkpoint.milestone_id,
        completed=checkpoint.completed,
        progress=owner.progress if owner else None,
    )
    return checkpoint
