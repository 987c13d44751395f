"""Canned analysis used when the upstream roadmap source fails."""

from empower.schemas.roadmap import ResumeAnalysis

FALLBACK_NOTICE = "We couldn't reach the roadmap service, so a sample roadmap is shown."

SAMPLE_ANALYSIS = {
    "user": {
        "name": "Test User",
        "email": "test@example.com",
        "skills": [
            {"skill": "Tailoring", "proficiencyLevel": 75},
            {"skill": "Entrepreneurship", "proficiencyLevel": 60},
            {"skill": "Communication", "proficiencyLevel": 85},
            {"skill": "Financial Literacy", "proficiencyLevel": 45},
            {"skill": "Leadership", "proficiencyLevel": 70},
            {"skill": "Digital Skills", "proficiencyLevel": 55},
        ],
    },
    "roadmap": [
        {
            "skill": "Tailoring",
            "description": "Master sewing techniques",
            "startDate": "2025-03-22T00:00:00.000Z",
            "endDate": "2025-04-05T00:00:00.000Z",
            "priority": 3,
            "score": 75,
        },
        {
            "skill": "Entrepreneurship",
            "description": "Learn business basics",
            "startDate": "2025-04-05T00:00:00.000Z",
            "endDate": "2025-04-19T00:00:00.000Z",
            "priority": 2,
            "score": 60,
        },
        {
            "skill": "Leadership",
            "description": "Develop leadership skills",
            "startDate": "2025-04-19T00:00:00.000Z",
            "endDate": "2025-05-03T00:00:00.000Z",
            "priority": 1,
            "score": 70,
        },
    ],
}


def sample_analysis() -> ResumeAnalysis:
    """Return a freshly validated copy of the sample analysis."""
    return ResumeAnalysis.model_validate(SAMPLE_ANALYSIS)
