"""
GraphQL request context

Every request gets a plain dict context carrying the handles resolvers need:

- ``request``: the incoming FastAPI request (absent when executing directly)
- ``session_factory``: async SQLAlchemy session factory for the document store
- ``joke_client``: :class:`~vehicleshop.jokes.JokeClient` used by ``addVehicle``
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any
from uuid import UUID

import strawberry
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import session_scope
from ..jokes import JokeClient


async def get_context(request: Request) -> dict[str, Any]:
    """Build the context for GraphQL resolvers from application state."""
    return {
        "request": request,
        "session_factory": request.app.state.session_factory,
        "joke_client": request.app.state.joke_client,
    }


@asynccontextmanager
async def get_session(info: strawberry.Info) -> AsyncGenerator[AsyncSession, None]:
    """Open a database session for the current request."""
    async with session_scope(info.context["session_factory"]) as session:
        yield session


def get_joke_client(info: strawberry.Info) -> JokeClient:
    return info.context["joke_client"]


def parse_id(value: str) -> UUID:
    """Convert a wire ID into a store identifier.

    Raises:
        RuntimeError: If the value is not a valid identifier
    """
    try:
        return UUID(str(value))
    except ValueError:
        raise RuntimeError(f"Invalid id: {value}") from None
