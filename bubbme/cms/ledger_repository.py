"""Game items and per-user coin and point balances."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from bubbme.storage import page_params, search_clause, transaction

log = logging.getLogger(__name__)


def _fetch_all(connection: Any, query: str, params: Sequence[Any] = ()) -> list[tuple]:
    """Run a read query and return every row."""
    cursor = connection.cursor()
    try:
        cursor.execute(query, list(params))
        return cursor.fetchall()
    finally:
        cursor.close()


def _fetch_one(connection: Any, query: str, params: Sequence[Any] = ()) -> tuple | None:
    """Run a read query and return its first row, or None."""
    cursor = connection.cursor()
    try:
        cursor.execute(query, list(params))
        return cursor.fetchone()
    finally:
        cursor.close()


def _fetch_count(connection: Any, query: str, params: Sequence[Any] = ()) -> int:
    """Run a single-value count query."""
    (total,) = _fetch_one(connection, query, params)
    return int(total)


def _execute(
    connection: Any, query: str, params: Sequence[Any], *, logged: bool = True
) -> Any:
    """Execute ``query`` in a transaction and return the last row id."""
    try:
        with transaction(connection) as cursor:
            cursor.execute(query, list(params))
            return cursor.lastrowid
    except Exception as error:
        if logged:
            log.error(str(error))
        raise


def _assignments(pairs: Iterable[tuple[str, Any]]) -> tuple[list[str], list[Any]]:
    """Return SET fragments and parameters for the pairs whose value is set."""
    chosen = [(column, value) for column, value in pairs if value]
    return [f" {column} = ?" for column, _ in chosen], [value for _, value in chosen]


def _update(
    connection: Any,
    table: str,
    id_column: str,
    columns: Sequence[str],
    params: Sequence[Any],
    row_id: Any,
    *,
    logged: bool = True,
) -> None:
    """Apply ``columns`` to row ``row_id`` of ``table`` and stamp updated_at."""
    query = (
        f"UPDATE {table} set  {','.join(columns)}, updated_at = NOW()"
        f" WHERE {id_column} = ?"
    )
    _execute(connection, query, [*params, row_id], logged=logged)


def _delete(
    connection: Any, table: str, id_column: str, row_id: Any, *, logged: bool = True
) -> None:
    """Remove row ``row_id`` of ``table``."""
    _execute(
        connection, f"DELETE FROM {table} WHERE {id_column} = ?", (row_id,), logged=logged
    )


@dataclass
class Item:
    """One row of the ``game_item`` table."""

    id: int | None = None
    name: str | None = None
    description: str | None = None
    value: int | None = None
    type_id: int | None = None
    created_at: Any = None
    updated_at: Any = None
    created_by: int | None = None
    updated_by: int | None = None


_ITEM_SEARCH_COLUMNS = ("item_name", "item_desc", "item_value", "item_type_id")


class ItemRepository:
    """Paged listing and editing of game items."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def list(self, page: int, limit: int, search: str = "") -> list[Item]:
        """Return one page of items matching ``search`` in any searchable column."""
        where, params = search_clause(_ITEM_SEARCH_COLUMNS, search)
        query = (
            "SELECT item_id, item_name, item_desc, item_value, item_type_id,"
            " created_at, updated_at, created_by, updated_by FROM game_item"
            f"{where} LIMIT ?  OFFSET ?"
        )
        params.extend(page_params(page, limit))
        return [Item(*row) for row in _fetch_all(self.connection, query, params)]

    def count(self, search: str = "") -> int:
        """Return how many items match ``search``."""
        where, params = search_clause(_ITEM_SEARCH_COLUMNS, search)
        return _fetch_count(
            self.connection, f"SELECT count(item_id) as total from game_item{where}", params
        )

    def create(self, item: Item) -> int:
        """Insert ``item`` and return its new id."""
        query = (
            "INSERT INTO game_item(item_name, item_desc, item_value, item_type_id,"
            " created_at, created_by) VALUES(?,?,?,?,NOW(), ?)"
        )
        return _execute(
            self.connection,
            query,
            (item.name, item.description, item.value, item.type_id, item.created_by),
        )

    def update(self, item: Item, item_id: int) -> None:
        """Update the set fields of ``item`` on row ``item_id``; stamp updated_at."""
        columns, params = _assignments(
            (
                ("item_name", item.name),
                ("item_desc", item.description),
                ("item_value", item.value),
                ("item_type_id", item.type_id),
                ("updated_by", item.updated_by),
            )
        )
        _update(self.connection, "game_item", "item_id", columns, params, item_id)

    def delete(self, item_id: int) -> None:
        """Remove item ``item_id``."""
        _delete(self.connection, "game_item", "item_id", item_id)


@dataclass
class UserBalance:
    """One row of a per-user balance table."""

    id: int | None = None
    user_id: int | None = None
    value: int | None = None
    created_at: Any = None
    updated_at: Any = None
    created_by: int | None = None
    updated_by: int | None = None


class BalanceRepository:
    """Paged listing and editing of a table of per-user balances."""

    def __init__(
        self,
        connection: Any,
        table: str,
        id_column: str,
        value_column: str,
        list_search_columns: Sequence[str],
        count_search_columns: Sequence[str],
    ) -> None:
        self.connection = connection
        self.table = table
        self.id_column = id_column
        self.value_column = value_column
        self.list_search_columns = tuple(list_search_columns)
        self.count_search_columns = tuple(count_search_columns)

    def list(self, page: int, limit: int, search: str = "") -> list[UserBalance]:
        """Return one page of balances matching ``search``."""
        where, params = search_clause(self.list_search_columns, search)
        query = (
            f"SELECT {self.id_column}, user_id, {self.value_column}, created_at,"
            f" updated_at, created_by, updated_by FROM {self.table}"
            f"{where} LIMIT ?  OFFSET ?"
        )
        params.extend(page_params(page, limit))
        return [UserBalance(*row) for row in _fetch_all(self.connection, query, params)]

    def count(self, search: str = "") -> int:
        """Return how many balances match ``search``."""
        where, params = search_clause(self.count_search_columns, search)
        query = f"SELECT count({self.id_column}) as total from {self.table}{where}"
        return _fetch_count(self.connection, query, params)

    def create(self, balance: UserBalance) -> int:
        """Insert ``balance`` and return its new id."""
        query = (
            f"INSERT INTO {self.table}(user_id, {self.value_column}, created_at,"
            " created_by) VALUES(?,?, NOW(), ?)"
        )
        return _execute(
            self.connection, query, (balance.user_id, balance.value, balance.created_by)
        )

    def update(self, balance: UserBalance, balance_id: int) -> None:
        """Update the set fields of ``balance`` on row ``balance_id``; stamp updated_at."""
        columns, params = _assignments(
            (
                (self.value_column, balance.value),
                ("user_id", balance.user_id),
                ("updated_by", balance.updated_by),
            )
        )
        _update(self.connection, self.table, self.id_column, columns, params, balance_id)

    def delete(self, balance_id: int) -> None:
        """Remove balance ``balance_id``."""
        _delete(self.connection, self.table, self.id_column, balance_id)


def user_coin_repository(connection: Any) -> BalanceRepository:
    """Repository over the ``user_coin`` table."""
    return BalanceRepository(
        connection,
        "user_coin",
        "user_coin_id",
        "user_coin_value",
        ["user_coin_value"],
        ["user_coin_value"],
    )


def user_point_repository(connection: Any) -> BalanceRepository:
    """Repository over the ``user_point`` table."""
    return BalanceRepository(
        connection,
        "user_point",
        "user_point_id",
        "user_point_value",
        ["user_coin_value", "user_point_value"],
        ["user_id", "user_point_value"],
    )