"""
Database module for the Vehicle Shop backend
"""

from .connection import (
    check_database_connection,
    create_engine_from_url,
    create_session_factory,
    create_tables,
    session_scope,
)

__all__ = [
    "check_database_connection",
    "create_engine_from_url",
    "create_session_factory",
    "create_tables",
    "session_scope",
]
