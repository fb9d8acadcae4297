"""
Joke GraphQL type definitions
"""

from typing import Any

import strawberry


@strawberry.type
class Joke:
    """Joke snapshot embedded in a vehicle."""

    id: int
    type: str
    setup: str
    punchline: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Joke":
        return cls(
            id=document["id"],
            type=document["type"],
            setup=document["setup"],
            punchline=document["punchline"],
        )
