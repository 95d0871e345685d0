import sqlite3
from datetime import datetime

import pytest

from bubbme.cms.catalog_repository import CatalogEntry, coin_source_repository
from bubbme.cms.catalog_usecase import CatalogUsecase, Response, parse_actor_id


class FakeCatalog:
    def __init__(self, entries=(), total=0, fail=None):
        self.entries = list(entries)
        self.total = total
        self.fail = fail
        self.calls = []

    def _check(self, operation):
        if self.fail == operation:
            raise RuntimeError(operation)

    def list(self, page, limit, search=""):
        self.calls.append(("list", page, limit, search))
        self._check("list")
        return list(self.entries)

    def count(self, search=""):
        self.calls.append(("count", search))
        self._check("count")
        return self.total

    def create(self, entry):
        self.calls.append(("create", entry))
        self._check("create")
        return 1

    def update(self, entry, entry_id):
        self.calls.append(("update", entry, entry_id))
        self._check("update")

    def delete(self, entry_id):
        self.calls.append(("delete", entry_id))
        self._check("delete")


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.create_function("NOW", 0, lambda: "2024-01-01 00:00:00")
    conn.execute(
        "CREATE TABLE coin_source (coin_source_id INTEGER PRIMARY KEY AUTOINCREMENT,"
        " coin_source_name TEXT, created_at TEXT, updated_at TEXT,"
        " created_by INTEGER, updated_by INTEGER)"
    )
    yield conn
    conn.close()


@pytest.mark.parametrize(
    "value, expected",
    [("42", 42), ("+7", 7), ("-3", -3), ("abc", 0), ("", 0), (" 5", 0), ("1_0", 0), (None, 0), (9, 9)],
)
def test_parse_actor_id(value, expected):
    assert parse_actor_id(value) == expected


def test_parse_actor_id_clamps_to_int64():
    assert parse_actor_id("9" * 30) == 2**63 - 1
    assert parse_actor_id("-" + "9" * 30) == -(2**63)


def test_list_returns_entries_and_total():
    entries = [CatalogEntry(id=1, name="Daily"), CatalogEntry(id=2, name="Bonus")]
    repo = FakeCatalog(entries, total=2)
    result = CatalogUsecase(repo).list(2, 5, "a")
    assert result == Response(message="success", total=2, data=entries)
    assert repo.calls == [("list", 2, 5, "a"), ("count", "a")]


@pytest.mark.parametrize("operation", ["list", "count"])
def test_list_propagates_errors(operation):
    repo = FakeCatalog(fail=operation)
    with pytest.raises(RuntimeError, match=operation):
        CatalogUsecase(repo).list(1, 10, "")


def test_create_builds_entry():
    repo = FakeCatalog()
    result = CatalogUsecase(repo).create("Daily", "12")
    assert result.message == "success"
    assert result.data == []
    (_, entry), = repo.calls
    assert entry.name == "Daily"
    assert entry.created_by == 12


def test_create_propagates_errors():
    with pytest.raises(RuntimeError):
        CatalogUsecase(FakeCatalog(fail="create")).create("Daily", "1")


def test_update_builds_entry():
    repo = FakeCatalog()
    result = CatalogUsecase(repo).update("Weekly", 8, "4")
    assert result.data == []
    (_, entry, entry_id), = repo.calls
    assert entry_id == 8
    assert entry.name == "Weekly"
    assert entry.updated_by == 4
    assert isinstance(entry.updated_at, datetime)


def test_update_propagates_errors():
    with pytest.raises(RuntimeError):
        CatalogUsecase(FakeCatalog(fail="update")).update("Weekly", 8, "4")


def test_delete_passes_id_and_errors():
    repo = FakeCatalog()
    assert CatalogUsecase(repo).delete(5).message == "success"
    assert repo.calls == [("delete", 5)]
    with pytest.raises(RuntimeError):
        CatalogUsecase(FakeCatalog(fail="delete")).delete(5)


def test_round_trip_with_database(connection):
    usecase = CatalogUsecase(coin_source_repository(connection))
    usecase.create("Daily", "3")
    usecase.create("Weekly", "3")

    listed = usecase.list(1, 10, "")
    assert listed.total == 2
    assert [entry.name for entry in listed.data] == ["Daily", "Weekly"]
    assert all(entry.created_by == 3 for entry in listed.data)

    searched = usecase.list(1, 10, "Week")
    assert searched.total == 1
    assert searched.data[0].name == "Weekly"

    first_id = listed.data[0].id
    usecase.update("Monthly", first_id, "4")
    updated = usecase.list(1, 1, "")
    assert updated.data[0].name == "Monthly"
    assert updated.data[0].updated_by == 4

    usecase.delete(first_id)
    remaining = usecase.list(1, 10, "")
    assert remaining.total == 1
    assert [entry.name for entry in remaining.data] == ["Weekly"]