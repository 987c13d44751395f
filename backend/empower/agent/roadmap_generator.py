"""AI collaborator that drafts a learning roadmap from a skill list."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

from langchain_core.messages import HumanMessage, SystemMessage

from empower.agent.llm import get_llm
from empower.agent.llm_utils import parse_llm_json_object
from empower.core.config import get_settings
from empower.core.logging import get_logger
from empower.schemas.roadmap import GeneratedRoadmap, SkillRecord

logger = get_logger(__name__)


ROADMAP_SYSTEM_PROMPT = """
You are a mentor helping women build practical skills for work and
entrepreneurship. Design a learning roadmap from the skills the user gives you.

Rules:
1. One milestone per skill, in the order given, unless the user context asks otherwise
2. Keep each milestone achievable in 1-4 weeks
3. Suggest 1-3 resources per milestone; resource type is one of
   video, article, practice, project, community

Return ONLY JSON in exactly this shape:
{
  "title": "roadmap title",
  "overview": "one or two sentence summary",
  "milestones": [
    {
      "title": "milestone title",
      "description": "what will be learned",
      "duration": "2 weeks",
      "completionDate": "YYYY-MM-DD",
      "resources": [{"type": "video", "title": "...", "url": "..."}]
    }
  ]
}
"""


@dataclass
class GenerationResult:
    """Outcome of one generation attempt: a roadmap or an error, never both."""

    roadmap: GeneratedRoadmap | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.roadmap is not None


def build_user_prompt(skills: Sequence[SkillRecord], user_context: str = "") -> str:
    lines = ["Create a learning roadmap for these skills:"]
    for record in skills:
        lines.append(
            f"- {record.skill} (current score {record.score:g}/100, "
            f"{record.start_date.isoformat()} to {record.end_date.isoformat()}): {record.description}"
        )
    if not skills:
        lines.append("- No skills listed; suggest foundational skills for a new entrepreneur.")
    if user_context:
        lines.append(f"About the learner: {user_context}")
    return "\n".join(lines)


def _message_text(content) -> str:
    if isinstance(content, str):
        return content
    # Content blocks: keep the text parts
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


async def generate_roadmap(
    skills: Sequence[SkillRecord],
    user_context: str = "",
    llm=None,
    timeout: float | None = None,
) -> GenerationResult:
    """Request a roadmap from the LLM and validate its shape.

    Never raises: timeouts, provider errors, unparsable replies and replies
    that do not match GeneratedRoadmap all come back as GenerationResult.error.
    """
    if timeout is None:
        timeout = get_settings().ROADMAP_GENERATION_TIMEOUT

    messages = [
        SystemMessage(content=ROADMAP_SYSTEM_PROMPT),
        HumanMessage(content=build_user_prompt(skills, user_context)),
    ]

    try:
        model = llm or get_llm()
        resp = await asyncio.wait_for(model.ainvoke(messages), timeout=timeout)
        data = parse_llm_json_object(_message_text(resp.content))
        roadmap = GeneratedRoadmap.model_validate(data)
    except TimeoutError:
        logger.warning("Roadmap generation timed out", timeout=timeout)
        return GenerationResult(error=f"Roadmap generation timed out after {timeout:g}s")
    except ValueError as e:
        # Covers unparsable JSON and pydantic ValidationError
        logger.warning("Roadmap response rejected", error=str(e))
        return GenerationResult(error=f"Invalid roadmap response: {e}")
    except Exception as e:
        logger.error("Roadmap generation failed", error=str(e), exc_info=True)
        return GenerationResult(error=str(e))

    logger.info(
        "Roadmap generated successfully",
        title=roadmap.title,
        milestones=len(roadmap.milestones),
    )
    return GenerationResult(roadmap=roadmap)
