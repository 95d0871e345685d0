"""Administrative use cases for application users and administrator accounts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from bubbme.cms.account_repository import (
    AdminUser,
    AdminUserRepository,
    AppUser,
    AppUserRepository,
)
from bubbme.cms.catalog_usecase import Response, logged, parse_actor_id
from bubbme.storage import NoRowsError

log = logging.getLogger(__name__)


class PhoneExistsError(ValueError):
    """Raised when an application user with the phone number already exists."""

    def __init__(self, message: str = "phone number already exist") -> None:
        super().__init__(message)


class EmailRegisteredError(ValueError):
    """Raised when an administrator with the e-mail address already exists."""

    def __init__(self, message: str = "email already registered") -> None:
        super().__init__(message)


@dataclass
class AppUserRequest:
    """Fields submitted to create or edit an application user."""

    username: str = ""
    phone: str = ""
    is_verify: int = 0


@dataclass
class AdminUserRequest:
    """Fields submitted to create or edit an administrator."""

    email: str = ""
    username: str = ""
    name: str = ""
    password: str = ""


class AppUserUsecase:
    """Lists and edits application users."""

    def __init__(self, repository: AppUserRepository) -> None:
        self.repository = repository

    def list(self, page: int, limit: int, search: str = "") -> Response:
        """Return one page of users with the total number of users."""
        try:
            users = self.repository.list(page, limit, search)
            total = self.repository.count()
        except Exception as error:
            log.info(str(error))
            raise
        return Response(total=total, data=users)

    def create(self, request: AppUserRequest, actor_id: Any) -> Response:
        """Register the user in ``request``; raise PhoneExistsError on a taken phone."""
        created_by = parse_actor_id(actor_id)
        try:
            existing = self.repository.get_by_phone(request.phone)
        except NoRowsError:
            existing = None
        except Exception as error:
            log.error(str(error))
            raise
        if existing is not None and existing.phone:
            raise PhoneExistsError()
        log.debug("creating application user on behalf of %d", created_by)
        user = AppUser(
            name=request.username,
            phone=request.phone,
            is_verify=request.is_verify,
            created_by=created_by,
        )
        logged(lambda: self.repository.create(user))
        return Response()

    def update(self, request: AppUserRequest, user_id: int, actor_id: Any) -> Response:
        """Apply ``request`` to user ``user_id`` on behalf of ``actor_id``."""
        user = AppUser(
            name=request.username,
            phone=request.phone,
            is_verify=request.is_verify,
            updated_by=parse_actor_id(actor_id),
        )
        logged(lambda: self.repository.update(user, user_id))
        return Response()

    def delete(self, user_id: int) -> Response:
        """Remove user ``user_id``."""
        self.repository.delete(user_id)
        return Response()


class AdminUserUsecase:
    """Lists and edits administrator accounts."""

    def __init__(self, repository: AdminUserRepository, hash_password: Callable[[str], str]) -> None:
        self.repository = repository
        self.hash_password = hash_password

    def list(self, page: int, limit: int, search: str = "") -> Response:
        """Return one page of administrators with the total number of them."""
        users = self.repository.list(page, limit, search)
        total = self.repository.count()
        return Response(total=total, data=users)

    def create(self, request: AdminUserRequest, actor_id: Any) -> Response:
        """Register the administrator in ``request``; raise EmailRegisteredError on a taken e-mail."""
        hashed = self.hash_password(request.password)
        user = AdminUser(
            email=request.email,
            name=request.name,
            is_login=0,
            username=request.username,
            password=hashed,
            created_by=parse_actor_id(actor_id),
        )
        try:
            existing = self.repository.get_by_email(request.email)
        except NoRowsError:
            existing = None
        if existing is not None and existing.email:
            raise EmailRegisteredError()
        self.repository.create(user)
        return Response()

    def update(self, request: AdminUserRequest, user_id: int) -> Response:
        """Apply the e-mail, username and name in ``request`` to ``user_id``."""
        user = AdminUser(
            email=request.email,
            name=request.name,
            is_login=0,
            username=request.username,
        )
        self.repository.update(user, user_id)
        return Response()

    def delete(self, user_id: int) -> Response:
        """Remove administrator ``user_id``."""
        self.repository.delete(user_id)
        return Response()