"""Named catalog tables: coin sources, item types, pet statuses and point sources."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from bubbme.storage import page_params, search_clause, transaction

log = logging.getLogger(__name__)


@dataclass
class CatalogEntry:
    """One row of a catalog table."""

    id: int | None = None
    name: str | None = None
    created_at: Any = None
    updated_at: Any = None
    created_by: int | None = None
    updated_by: int | None = None


class CatalogRepository:
    """Paged listing and editing of a table holding named entries."""

    def __init__(self, connection: Any, table: str, id_column: str, name_column: str) -> None:
        self.connection = connection
        self.table = table
        self.id_column = id_column
        self.name_column = name_column

    def list(self, page: int, limit: int, search: str = "") -> list[CatalogEntry]:
        """Return one page of entries whose name contains ``search``."""
        where, params = search_clause([self.name_column], search)
        query = (
            f"SELECT {self.id_column}, {self.name_column}, created_at, updated_at,"
            f" created_by, updated_by FROM {self.table}{where} LIMIT ?  OFFSET ?"
        )
        params.extend(page_params(page, limit))
        cursor = self.connection.cursor()
        try:
            cursor.execute(query, params)
            return [CatalogEntry(*row) for row in cursor.fetchall()]
        finally:
            cursor.close()

    def count(self, search: str = "") -> int:
        """Return how many entries have a name containing ``search``."""
        where, params = search_clause([self.name_column], search)
        query = f"SELECT count({self.id_column}) as total from {self.table}{where}"
        cursor = self.connection.cursor()
        try:
            cursor.execute(query, params)
            (total,) = cursor.fetchone()
        finally:
            cursor.close()
        return int(total)

    def create(self, entry: CatalogEntry) -> int:
        """Insert ``entry`` and return its new id."""
        query = (
            f"INSERT INTO {self.table}({self.name_column}, created_at, created_by)"
            " VALUES(?, NOW(), ?)"
        )
        try:
            with transaction(self.connection) as cursor:
                cursor.execute(query, (entry.name, entry.created_by))
                return cursor.lastrowid
        except Exception as error:
            log.error(str(error))
            raise

    def update(self, entry: CatalogEntry, entry_id: int) -> None:
        """Update the set fields of ``entry`` on row ``entry_id``; stamp updated_at."""
        columns: list[str] = []
        params: list[Any] = []
        if entry.name:
            columns.append(f" {self.name_column} = ?")
            params.append(entry.name)
        if entry.updated_by:
            columns.append(" updated_by = ?")
            params.append(entry.updated_by)
        query = (
            f"UPDATE {self.table} set  {','.join(columns)}, updated_at = NOW()"
            f" WHERE {self.id_column} = ?"
        )
        params.append(entry_id)
        try:
            with transaction(self.connection) as cursor:
                cursor.execute(query, params)
        except Exception as error:
            log.error(str(error))
            raise

    def delete(self, entry_id: int) -> None:
        """Remove row ``entry_id``."""
        query = f"DELETE FROM {self.table} WHERE {self.id_column} = ?"
        try:
            with transaction(self.connection) as cursor:
                cursor.execute(query, (entry_id,))
        except Exception as error:
            log.error(str(error))
            raise


def coin_source_repository(connection: Any) -> CatalogRepository:
    """Repository over the ``coin_source`` table."""
    return CatalogRepository(connection, "coin_source", "coin_source_id", "coin_source_name")


def item_type_repository(connection: Any) -> CatalogRepository:
    """Repository over the ``game_item_type`` table."""
    return CatalogRepository(connection, "game_item_type", "item_type_id", "item_type_name")


def pet_status_repository(connection: Any) -> CatalogRepository:
    """Repository over the ``game_pet_status`` table."""
    return CatalogRepository(connection, "game_pet_status", "pet_status_id", "pet_status_name")


def point_source_repository(connection: Any) -> CatalogRepository:
    """Repository over the ``point_source`` table."""
    return CatalogRepository(connection, "point_source", "point_source_id", "point_source_name")