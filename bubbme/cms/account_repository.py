"""Application users and administrator accounts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from bubbme.cms.ledger_repository import (
    _assignments,
    _delete,
    _execute,
    _fetch_all,
    _fetch_count,
    _fetch_one,
    _update,
)
from bubbme.storage import NoRowsError, page_params, search_clause

log = logging.getLogger(__name__)


@dataclass
class AppUser:
    """One row of the ``user`` table."""

    id: int | None = None
    name: str | None = None
    phone: str | None = None
    is_verify: int | None = None
    otp: int | None = None
    created_at: Any = None
    created_by: int | None = None
    updated_at: Any = None
    updated_by: int | None = None


class AppUserRepository:
    """Paged listing and editing of application users."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def list(self, page: int, limit: int, search: str = "") -> list[AppUser]:
        """Return one page of users whose name or phone contains ``search``."""
        where, params = search_clause(["user_name", "user_phone"], search)
        query = (
            "SELECT user_id, user_name, user_phone, user_is_verify, user_otp,"
            " updated_at, created_at, created_by, updated_by from user"
            f"{where} LIMIT ?  OFFSET ?"
        )
        params.extend(page_params(page, limit))
        return [
            AppUser(user_id, name, phone, is_verify, otp,
                    created_at, created_by, updated_at, updated_by)
            for (user_id, name, phone, is_verify, otp,
                 updated_at, created_at, created_by, updated_by)
            in _fetch_all(self.connection, query, params)
        ]

    def count(self) -> int:
        """Return the number of application users."""
        return _fetch_count(self.connection, "SELECT count(user_id) as total from user")

    def create(self, user: AppUser) -> int:
        """Insert ``user`` and return its new id."""
        query = (
            "INSERT INTO user(user_name, user_phone, user_is_verify, created_by,"
            " created_at) VALUES(?,?,?,?,NOW())"
        )
        params = (
            user.name or "",
            user.phone or "",
            user.is_verify or 0,
            user.created_by or 0,
        )
        return _execute(self.connection, query, params)

    def update(self, user: AppUser, user_id: int) -> None:
        """Update ``user_id`` from ``user``; verification flag and editor are always set."""
        columns, params = _assignments(
            (("user_name", user.name), ("user_phone", user.phone))
        )
        columns += [" user_is_verify = ?", " updated_by = ?"]
        params += [user.is_verify or 0, user.updated_by or 0]
        _update(self.connection, "user", "user_id", columns, params, user_id)

    def delete(self, user_id: int) -> None:
        """Remove user ``user_id``."""
        _delete(self.connection, "user", "user_id", user_id)

    def get_by_phone(self, phone: str) -> AppUser:
        """Return the user with ``phone``; raise NoRowsError if there is none.

        An empty ``phone`` applies no filter and yields the first user.
        """
        query = (
            "SELECT user_id, user_name, user_phone, user_is_verify, user_otp,"
            " created_at, created_by, updated_at, updated_by from user WHERE 1=1 "
        )
        params: list[Any] = []
        if phone:
            query += " AND user_phone = ? "
            params.append(phone)
        row = _fetch_one(self.connection, query, params)
        if row is None:
            error = NoRowsError()
            log.error(str(error))
            raise error
        return AppUser(*row)


@dataclass
class AdminUser:
    """One row of the ``user_admin`` table."""

    id: int | None = None
    email: str = ""
    username: str = ""
    password: str = ""
    name: str = ""
    created_at: Any = None
    updated_at: Any = None
    is_login: int = 0
    created_by: int = 0


_ADMIN_COLUMNS = "id, email, username, password, name, created_at, updated_at, is_login"


class AdminUserRepository:
    """Paged listing and editing of administrator accounts."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def list(self, page: int, limit: int, search: str = "") -> list[AdminUser]:
        """Return one page of administrators matching ``search``."""
        where, params = search_clause(["email", "username", "name"], search)
        query = f"SELECT {_ADMIN_COLUMNS} from user_admin{where} LIMIT ?  OFFSET ?"
        params.extend(page_params(page, limit))
        return [AdminUser(*row) for row in _fetch_all(self.connection, query, params)]

    def count(self) -> int:
        """Return the number of administrators."""
        return _fetch_count(self.connection, "SELECT count(id) as total from user_admin")

    def create(self, user: AdminUser) -> int:
        """Insert ``user`` and return its new id."""
        query = (
            "INSERT INTO user_admin(email, username, name, password, is_login,"
            " created_at, created_by) VALUES(?,?,?,?,?,NOW(), ?)"
        )
        params = (
            user.email,
            user.username,
            user.name,
            user.password,
            user.is_login,
            user.created_by,
        )
        return _execute(self.connection, query, params, logged=False)

    def update(self, user: AdminUser, user_id: int) -> None:
        """Update the non-empty email, username and name of ``user_id``."""
        columns, params = _assignments(
            (("email", user.email), ("username", user.username), ("name", user.name))
        )
        _update(self.connection, "user_admin", "id", columns, params, user_id, logged=False)

    def delete(self, user_id: int) -> None:
        """Remove administrator ``user_id``."""
        _delete(self.connection, "user_admin", "id", user_id, logged=False)

    def get_by_email(self, email: str) -> AdminUser:
        """Return the administrator with ``email``; raise NoRowsError if there is none.

        An empty ``email`` applies no filter and yields the first administrator.
        """
        query = f"SELECT {_ADMIN_COLUMNS} from user_admin WHERE 1=1 "
        params: list[Any] = []
        if email:
            query += " AND email = ? "
            params.append(email)
        row = _fetch_one(self.connection, query, params)
        if row is None:
            raise NoRowsError()
        return AdminUser(*row)