from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from api.dependencies import summary
from main import app
from tests.fakes import ScriptedGenerator


@pytest_asyncio.fixture(scope="function")
async def test_generator() -> ScriptedGenerator:
    return ScriptedGenerator()


@pytest_asyncio.fixture(scope="function")
async def test_client(
    test_generator: ScriptedGenerator,
) -> AsyncGenerator[AsyncClient, None]:
    def override_get_generator() -> ScriptedGenerator:
        return test_generator

    app.dependency_overrides[summary.get_generator] = override_get_generator

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
