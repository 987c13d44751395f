"""Shared fixtures."""

import asyncio
import datetime as dt

import pytest
from langchain_core.messages import AIMessage

from empower.schemas import SkillRecord
from empower.services import roadmap_service
from empower.services.sample_data import sample_analysis


class FakeChatModel:
    """Stands in for a LangChain chat model in generator tests."""

    def __init__(self, content="", error: Exception | None = None, delay: float = 0.0):
        self.content = content
        self.error = error
        self.delay = delay
        self.calls: list[list] = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return AIMessage(content=self.content)


def make_record(
    skill: str = "Tailoring",
    score: float = 75,
    start: dt.date = dt.date(2025, 3, 22),
    days: int = 14,
    description: str = "",
) -> SkillRecord:
    return SkillRecord(
        skill=skill,
        description=description,
        start_date=start,
        end_date=start + dt.timedelta(days=days),
        score=score,
    )


@pytest.fixture
def sample_records() -> list[SkillRecord]:
    return sample_analysis().roadmap


@pytest.fixture
def sample_roadmap(sample_records):
    return roadmap_service.assemble_roadmap(sample_records, "Asha")
