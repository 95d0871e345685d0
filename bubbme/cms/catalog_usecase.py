"""Administrative use cases over the named catalog tables."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, TypeVar

from bubbme.cms.catalog_repository import CatalogEntry, CatalogRepository

log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

T = TypeVar("T")


def parse_actor_id(value: Any) -> int:
    """Return the acting administrator's id from a request value.

    Decimal strings, with an optional sign, are converted and clamped to the
    64-bit range. Anything unparsable yields 0.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, str) or not _INTEGER.fullmatch(value):
        return 0
    return max(_INT64_MIN, min(int(value), _INT64_MAX))


def logged(operation: Callable[[], T]) -> T:
    """Run ``operation``, logging any failure before it propagates."""
    try:
        return operation()
    except Exception as error:
        log.error(str(error))
        raise


@dataclass
class Response:
    """Result envelope returned to the administration screens."""

    message: str = "success"
    total: int = 0
    data: list = field(default_factory=list)


class CatalogUsecase:
    """Lists and edits entries of one catalog table."""

    def __init__(self, repository: CatalogRepository) -> None:
        self.repository = repository

    def list(self, page: int, limit: int, search: str = "") -> Response:
        """Return one page of entries with the number of matching entries."""
        entries = logged(lambda: self.repository.list(page, limit, search))
        total = logged(lambda: self.repository.count(search))
        return Response(total=total, data=entries)

    def create(self, name: str, actor_id: Any) -> Response:
        """Add an entry called ``name`` on behalf of ``actor_id``."""
        entry = CatalogEntry(name=name, created_by=parse_actor_id(actor_id))
        logged(lambda: self.repository.create(entry))
        return Response()

    def update(self, name: str, entry_id: int, actor_id: Any) -> Response:
        """Rename entry ``entry_id`` on behalf of ``actor_id``."""
        entry = CatalogEntry(
            name=name,
            updated_at=datetime.now(),
            updated_by=parse_actor_id(actor_id),
        )
        logged(lambda: self.repository.update(entry, entry_id))
        return Response()

    def delete(self, entry_id: int) -> Response:
        """Remove entry ``entry_id``."""
        self.repository.delete(entry_id)
        return Response()