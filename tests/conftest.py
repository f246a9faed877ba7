"""Test configuration and fixtures."""

from datetime import date, datetime
from uuid import uuid4

import logfire
import pytest

from alumni.domain.model import Alumnus, Thread
from alumni.domain.repository import AlumnusRepository
from alumni.domain.value import AlumniId, TagName, ThreadId


@pytest.fixture(scope="session", autouse=True)
def configure_logfire():
    """Keep Logfire local and quiet during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_thread(
    upvotes: int = 0,
    downvotes: int = 0,
    thread_id: ThreadId | None = None,
    tags: list[str] | None = None,
) -> Thread:
    """Build a thread with the given counters."""
    now = datetime.now()
    return Thread(
        id=thread_id or ThreadId(uuid4()),
        title="Class of 2019 reunion",
        description="Planning thread for the five-year reunion",
        author_id=AlumniId(uuid4()),
        tag_names=[TagName(name) for name in tags or []],
        upvotes=upvotes,
        downvotes=downvotes,
        created_at=now,
        updated_at=now,
    )


def make_alumnus(first_name: str = "Ada", last_name: str = "Lovelace") -> Alumnus:
    """Build an alumnus with a unique email."""
    alumni_id = AlumniId(uuid4())
    return Alumnus(
        id=alumni_id,
        email=f"{first_name.lower()}.{alumni_id.hex[:8]}@alumni.example.org",
        first_name=first_name,
        last_name=last_name,
    )


async def add_alumnus(container, first_name: str = "Ada") -> AlumniId:
    """Register an alumnus in the container's directory and return their ID."""
    alumnus_repo = await container.get(AlumnusRepository)
    alumnus = await alumnus_repo.save(make_alumnus(first_name))
    return alumnus.id


SURVEY_DATES = {"start_date": date(2026, 1, 1), "end_date": date(2026, 12, 31)}
