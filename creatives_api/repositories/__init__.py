"""
Persistence adapters.

Services depend on ``SQLRepository`` rather than opening sessions
themselves; the repository hands back ORM entities detached from their
session.
"""

from .sql_repository import SQLRepository

__all__ = ["SQLRepository"]
