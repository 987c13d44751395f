"""Static catalog of learning resources per skill."""

from empower.schemas.roadmap import Resource, ResourceType

PLACEHOLDER_VIDEO_URL = "https://www.youtube.com/embed/dQw4w9WgXcQ"
PLACEHOLDER_THUMBNAIL_URL = "https://i.imgur.com/placeholder.png"
GENERIC_GUIDE_URL = "https://example.com/generic-guide"


def _video(title: str) -> Resource:
    return Resource(
        type=ResourceType.VIDEO,
        title=title,
        url=PLACEHOLDER_VIDEO_URL,
        thumbnail_url=PLACEHOLDER_THUMBNAIL_URL,
    )


def _article(title: str, url: str) -> Resource:
    return Resource(type=ResourceType.ARTICLE, title=title, url=url)


def _practice(title: str, description: str) -> Resource:
    return Resource(type=ResourceType.PRACTICE, title=title, description=description)


RESOURCE_CATALOG: dict[str, tuple[Resource, ...]] = {
    "Web Development": (
        _video("HTML & CSS Basics"),
        _article("JavaScript Guide", "https://example.com/js-guide"),
    ),
    "Machine Learning": (
        _video("ML Fundamentals"),
        _article("ML Algorithms", "https://example.com/ml-algorithms"),
    ),
    "Project Management": (
        _video("Agile Basics"),
        _practice("Plan a Project", "Draft a project timeline"),
    ),
    "Tailoring": (
        _video("Sewing Basics"),
        _article("Tailoring Guide", "https://example.com/tailoring"),
    ),
    "Entrepreneurship": (
        _video("Entrepreneurship 101"),
        _practice("Business Plan", "Draft your first business plan"),
    ),
    "Leadership": (
        _video("Leadership Skills"),
        _article("Leadership Guide", "https://example.com/leadership"),
    ),
}


def generic_resources(skill: str) -> list[Resource]:
    """Fallback pair of resources for a skill the catalog does not know."""
    return [
        _video(f"Introduction to {skill}"),
        _article(f"{skill} Guide", GENERIC_GUIDE_URL),
    ]


def get_resources_for_skill(skill: str) -> list[Resource]:
    """Look up resources by exact skill name.

    Returns fresh copies so callers may attach them to a milestone without
    sharing state with the catalog.
    """
    entries = RESOURCE_CATALOG.get(skill)
    if entries is None:
        return generic_resources(skill)
    return [resource.model_copy() for resource in entries]
