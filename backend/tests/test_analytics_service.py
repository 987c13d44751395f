"""Tests for analytics summaries."""

from empower.schemas import SkillProficiency
from empower.services import analytics_service, roadmap_service
from empower.services.sample_data import sample_analysis


def test_skills_chart_top_six_sorted():
    chart = analytics_service.build_skills_chart(sample_analysis().user.skills)
    assert chart["labels"] == [
        "Communication",
        "Tailoring",
        "Leadership",
        "Entrepreneurship",
        "Digital Skills",
        "Financial Literacy",
    ]
    assert chart["data"] == [85, 75, 70, 60, 55, 45]


def test_skills_chart_skips_invalid():
    skills = [
        SkillProficiency(skill="Sewing", proficiency_level=0),
        SkillProficiency(skill="Baking", proficiency_level=None),
        SkillProficiency(skill=None, proficiency_level=20),
        SkillProficiency(skill="Weaving", proficiency_level=40),
    ]
    chart = analytics_service.build_skills_chart(skills)
    assert chart == {"labels": ["Weaving", "Unknown"], "data": [40, 20]}


def test_skills_chart_empty():
    assert analytics_service.build_skills_chart([]) == {"labels": [], "data": []}


def test_upcoming_checkpoints(sample_roadmap):
    upcoming = analytics_service.upcoming_checkpoints(sample_roadmap)
    assert len(upcoming) == 5
    assert [u["checkpoint"]["id"] for u in upcoming] == [
        "Tailoring-2",
        "Tailoring-3",
        "Entrepreneurship-2",
        "Entrepreneurship-3",
        "Leadership-2",
    ]
    assert upcoming[0]["milestoneTitle"] == "Tailoring Development"

    roadmap_service.toggle_checkpoint(sample_roadmap, "Tailoring-2")
    upcoming = analytics_service.upcoming_checkpoints(sample_roadmap, limit=2)
    assert [u["checkpoint"]["id"] for u in upcoming] == ["Tailoring-3", "Entrepreneurship-2"]


def test_upcoming_without_roadmap():
    assert analytics_service.upcoming_checkpoints(None) == []


def test_roadmap_progress(sample_roadmap):
    summary = analytics_service.roadmap_progress(sample_roadmap)
    assert summary["overallProgress"] == 34
    assert summary["milestones"][0] == {
        "id": 1,
        "title": "Tailoring Development",
        "progress": 38,
        "completedCheckpoints": 1,
        "totalCheckpoints": 3,
    }
    assert analytics_service.roadmap_progress(None) == {"overallProgress": 0, "milestones": []}
