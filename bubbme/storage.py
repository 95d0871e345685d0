"""Shared database helpers and the administrator authorization store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Sequence

log = logging.getLogger(__name__)


class NoRowsError(LookupError):
    """Raised when a query that must return a row returns none."""

    def __init__(self, message: str = "no rows in result set") -> None:
        super().__init__(message)


@contextmanager
def transaction(connection: Any) -> Iterator[Any]:
    """Yield a cursor; commit when the block succeeds, roll back when it raises."""
    cursor = connection.cursor()
    try:
        yield cursor
    except BaseException:
        connection.rollback()
        raise
    else:
        connection.commit()
    finally:
        cursor.close()


def search_clause(columns: Sequence[str], search: str) -> tuple[str, list[str]]:
    """Build a WHERE clause matching ``search`` against any of ``columns``.

    Returns the SQL fragment and its parameters; both are empty when
    ``search`` is empty.
    """
    if not search:
        return "", []
    pattern = f"%{search}%"
    conditions = " OR ".join(f"{column} LIKE ?" for column in columns)
    return f" WHERE ({conditions})", [pattern] * len(columns)


def page_params(page: int, limit: int) -> tuple[int, int]:
    """Return the ``(limit, offset)`` pair for a one-based page number."""
    return limit, (page - 1) * limit


@dataclass
class AdminCredentials:
    """An administrator row as needed to check a login."""

    id: int
    email: str
    username: str
    password: str
    name: str
    created_at: Any = None
    updated_at: Any = None


class AuthorizationRepository:
    """Reads administrator credentials and records their login state."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def get_user(self, email: str) -> AdminCredentials:
        """Return the administrator with ``email``; raise NoRowsError if absent."""
        query = (
            "SELECT id, email, username, password, name, created_at, updated_at "
            "from user_admin where email = ?"
        )
        cursor = self.connection.cursor()
        try:
            cursor.execute(query, (email,))
            row = cursor.fetchone()
        finally:
            cursor.close()
        if row is None:
            error = NoRowsError()
            log.error(str(error))
            raise error
        return AdminCredentials(*row)

    def update_is_login(self, email: str, is_login: int) -> None:
        """Set the login flag of the administrator with ``email``."""
        with transaction(self.connection) as cursor:
            cursor.execute(
                "UPDATE user_admin set is_login = ? where email = ?",
                (is_login, email),
            )