"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

# Add src directory to path so imports work without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vehicleshop.database import create_engine_from_url, create_session_factory, create_tables
from vehicleshop.graphql.schema import schema
from vehicleshop.jokes import JokeClient

JOKE_API_URL = "https://jokes.test/random_joke"

SAMPLE_JOKE = {
    "id": 42,
    "type": "general",
    "setup": "Why did the car get a flat tire?",
    "punchline": "Because there was a fork in the road.",
}


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """Plain SQLite URL for a throwaway database file."""
    return f"sqlite:///{tmp_path / 'vehicleshop.db'}"


@pytest_asyncio.fixture(scope="function")
async def db_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Provide an async engine with the vehicles and parts tables created."""
    engine = create_engine_from_url(database_url)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(db_engine)


@pytest_asyncio.fixture(scope="function")
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a bare session for seeding and inspecting the store."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def joke_requests() -> list[httpx.Request]:
    """Requests received by the fake joke API."""
    return []


@pytest_asyncio.fixture(scope="function")
async def joke_client(joke_requests: list[httpx.Request]) -> AsyncGenerator[JokeClient, None]:
    """Joke client backed by an in-process transport returning SAMPLE_JOKE."""

    def handler(request: httpx.Request) -> httpx.Response:
        joke_requests.append(request)
        return httpx.Response(200, json=SAMPLE_JOKE)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        yield JokeClient(client, JOKE_API_URL)


@pytest.fixture
def graphql_context(
    session_factory: async_sessionmaker[AsyncSession], joke_client: JokeClient
) -> dict[str, Any]:
    return {"session_factory": session_factory, "joke_client": joke_client}


@pytest.fixture
def execute(graphql_context: dict[str, Any]):
    """Run a GraphQL document against the schema with the test context."""

    async def _execute(query: str, **variables: Any):
        return await schema.execute(
            query,
            variable_values=variables or None,
            context_value=graphql_context,
        )

    return _execute


@pytest.fixture
def sample_joke() -> dict[str, Any]:
    return dict(SAMPLE_JOKE)


@pytest.fixture
def add_vehicle(execute):
    """Create a vehicle through the API and return its wire representation."""

    async def _add_vehicle(name: str, manufacturer: str, year: int) -> dict[str, Any]:
        result = await execute(
            """
            mutation AddVehicle($name: String!, $manufacturer: String!, $year: Int!) {
              addVehicle(name: $name, manufacturer: $manufacturer, year: $year) {
                id name manufacturer year
              }
            }
            """,
            name=name,
            manufacturer=manufacturer,
            year=year,
        )
        assert result.errors is None, result.errors
        return result.data["addVehicle"]

    return _add_vehicle


@pytest.fixture
def add_part(execute):
    """Create a part through the API and return its wire representation."""

    async def _add_part(name: str, price: int, vehicle_id: str) -> dict[str, Any]:
        result = await execute(
            """
            mutation AddPart($name: String!, $price: Int!, $vehicleId: ID!) {
              addPart(name: $name, price: $price, vehicleId: $vehicleId) { id name price }
            }
            """,
            name=name,
            price=price,
            vehicleId=vehicle_id,
        )
        assert result.errors is None, result.errors
        return result.data["addPart"]

    return _add_part


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
