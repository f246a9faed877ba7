"""Test harness for unit and integration tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import httpx
import pytest_asyncio

from alumni.interface.api.app import create_app
from alumni.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        async def test_cast_vote(unit_env):
            service = await unit_env.get(VoteService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_api_fixtures(unmock: set[Component] | None = None):
    """Factory for end-to-end fixtures serving the FastAPI app in-process.

    Returns a ``(container, client)`` pair of fixtures. ``container`` is the
    app-scoped test container (use it to seed repositories); ``client`` is an
    httpx client routed to the app through ASGI.

    Usage:
        api_container, api_client = create_api_fixtures()

        async def test_get_thread(api_container, api_client):
            repo = await api_container.get(ThreadRepository)
            ...
    """

    @pytest_asyncio.fixture
    async def _container():
        container = build_test_container(unmock=unmock or set())
        yield container
        await container.close()

    @pytest_asyncio.fixture
    async def _client(api_container):
        app = create_app(api_container)
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as client:
            yield client

    return _container, _client
