"""Read-only summaries for the calendar and analytics views."""

from collections.abc import Sequence

from empower.schemas.roadmap import Roadmap, SkillProficiency
from empower.services.roadmap_service import calc_overall_progress

SKILLS_CHART_LIMIT = 6
UPCOMING_LIMIT = 5


def build_skills_chart(
    skills: Sequence[SkillProficiency],
    limit: int = SKILLS_CHART_LIMIT,
) -> dict:
    """Top skills by proficiency, skipping entries without a positive level."""
    valid = [
        s
        for s in skills
        if isinstance(s.proficiency_level, int | float) and s.proficiency_level > 0
    ]
    valid.sort(key=lambda s: s.proficiency_level, reverse=True)
    top = valid[:limit]
    return {
        "labels": [s.skill or "Unknown" for s in top],
        "data": [s.proficiency_level for s in top],
    }


def upcoming_checkpoints(roadmap: Roadmap | None, limit: int = UPCOMING_LIMIT) -> list[dict]:
    """First incomplete checkpoints in roadmap order, with their milestone title."""
    if roadmap is None:
        return []

    upcoming = []
    for milestone in roadmap.milestones:
        for checkpoint in milestone.checkpoints:
            if checkpoint.completed:
                continue
            upcoming.append(
                {
                    "checkpoint": checkpoint.model_dump(mode="json", by_alias=True),
                    "milestoneTitle": milestone.title,
                }
            )
            if len(upcoming) >= limit:
                return upcoming
    return upcoming


def roadmap_progress(roadmap: Roadmap | None) -> dict:
    """Overall and per-milestone progress.

    Returns:
        {"overallProgress": int, "milestones": [{"id", "title", "progress",
        "completedCheckpoints", "totalCheckpoints"}, ...]}
    """
    if roadmap is None:
        return {"overallProgress": 0, "milestones": []}

    milestones = [
        {
            "id": m.id,
            "title": m.title,
            "progress": m.progress,
            "completedCheckpoints": sum(1 for cp in m.checkpoints if cp.completed),
            "totalCheckpoints": len(m.checkpoints),
        }
        for m in roadmap.milestones
    ]
    return {"overallProgress": calc_overall_progress(roadmap), "milestones": milestones}
