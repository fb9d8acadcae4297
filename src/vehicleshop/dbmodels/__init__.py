"""
Database models for the Vehicle Shop (authoritative ORM definitions).

Both tables are stored document-style: a vehicle embeds its joke snapshot
and the ordered list of its part ids, and a part only keeps a plain
back-reference to its vehicle (no foreign key constraint).
"""

from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Integer, MetaData, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# JSONB on PostgreSQL, generic JSON elsewhere (SQLite in tests)
DocumentJSON = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Vehicles(Base):
    __tablename__ = "vehicles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    manufacturer: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    joke: Mapped[dict[str, Any]] = mapped_column(DocumentJSON, nullable=False)
    # Ordered part ids as strings; duplicates are allowed
    part_ids: Mapped[list[str]] = mapped_column("parts", DocumentJSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Vehicles id={self.id} name={self.name!r} year={self.year}>"


class Parts(Base):
    __tablename__ = "parts"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    vehicle_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Parts id={self.id} name={self.name!r} vehicle_id={self.vehicle_id}>"


__all__ = ["Base", "Parts", "Vehicles"]
