"""User mood catalog stored in the ``user_mood`` table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bubbme.cms.ledger_repository import (
    _assignments,
    _delete,
    _execute,
    _fetch_all,
    _fetch_count,
    _update,
)
from bubbme.storage import page_params, search_clause


@dataclass
class Mood:
    """One row of the ``user_mood`` table."""

    id: int | None = None
    name: str | None = None
    created_at: Any = None
    updated_at: Any = None
    created_by: int | None = None
    updated_by: int | None = None


class MoodRepository:
    """Paged listing and editing of moods."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def list(self, page: int, limit: int, search: str = "") -> list[Mood]:
        """Return one page of moods whose name contains ``search``."""
        where, params = search_clause(["name"], search)
        query = (
            "SELECT id, name, created_at, updated_at, created_by, updated_by"
            f" from user_mood{where} LIMIT ?  OFFSET ?"
        )
        params.extend(page_params(page, limit))
        return [Mood(*row) for row in _fetch_all(self.connection, query, params)]

    def count(self) -> int:
        """Return the number of moods."""
        return _fetch_count(self.connection, "SELECT count(id) as total from user_mood")

    def create(self, mood: Mood) -> int:
        """Insert ``mood`` and return its new id."""
        query = "INSERT INTO user_mood(name, created_at, created_by) VALUES(?,NOW(), ?)"
        return _execute(self.connection, query, (mood.name, mood.created_by))

    def update(self, mood: Mood, mood_id: int) -> None:
        """Update the set fields of ``mood`` on row ``mood_id``; stamp updated_at."""
        columns, params = _assignments(
            (("name", mood.name), ("updated_by", mood.updated_by))
        )
        _update(self.connection, "user_mood", "id", columns, params, mood_id)

    def delete(self, mood_id: int) -> None:
        """Remove mood ``mood_id``."""
        _delete(self.connection, "user_mood", "id", mood_id)