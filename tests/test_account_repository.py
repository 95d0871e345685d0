import sqlite3

import pytest

from bubbme.cms.account_repository import (
    AdminUser,
    AdminUserRepository,
    AppUser,
    AppUserRepository,
)
from bubbme.storage import NoRowsError

STAMP = "2024-01-01 00:00:00"


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.create_function("NOW", 0, lambda: STAMP)
    conn.executescript(
        """
        CREATE TABLE user (
            user_id INTEGER PRIMARY KEY,
            user_name TEXT,
            user_phone TEXT,
            user_is_verify INTEGER,
            user_otp INTEGER,
            created_at TEXT,
            created_by INTEGER,
            updated_at TEXT,
            updated_by INTEGER
        );
        CREATE TABLE user_admin (
            id INTEGER PRIMARY KEY,
            email TEXT,
            username TEXT,
            password TEXT,
            name TEXT,
            created_at TEXT,
            updated_at TEXT,
            is_login INTEGER,
            created_by INTEGER
        );
        """
    )
    yield conn
    conn.close()


@pytest.fixture
def app_repo(connection):
    repo = AppUserRepository(connection)
    repo.create(AppUser(name="alice", phone="111", is_verify=1, created_by=3))
    repo.create(AppUser(name="bob", phone="222", is_verify=0, created_by=3))
    repo.create(AppUser(name="carol", phone="333", is_verify=1, created_by=3))
    return repo


def test_app_create_and_get_by_phone(app_repo):
    user = app_repo.get_by_phone("222")
    assert (user.name, user.phone, user.is_verify, user.created_by) == ("bob", "222", 0, 3)
    assert user.created_at == STAMP


def test_app_get_by_phone_missing_raises(app_repo):
    with pytest.raises(NoRowsError):
        app_repo.get_by_phone("999")


def test_app_get_by_phone_empty_returns_first(app_repo):
    assert app_repo.get_by_phone("").name == "alice"


def test_app_list_search_by_name_and_phone(app_repo):
    assert [u.name for u in app_repo.list(1, 10, "ali")] == ["alice"]
    assert [u.name for u in app_repo.list(1, 10, "33")] == ["carol"]


def test_app_list_maps_columns(app_repo):
    listed = app_repo.list(1, 10, "bob")[0]
    assert listed == app_repo.get_by_phone("222")


def test_app_pages_cover_all(app_repo):
    first = app_repo.list(1, 2)
    second = app_repo.list(2, 2)
    assert len(first) + len(second) == app_repo.count()
    assert {u.id for u in first}.isdisjoint({u.id for u in second})


def test_app_update_keeps_empty_fields(app_repo):
    user = app_repo.get_by_phone("111")
    app_repo.update(AppUser(name="alicia", is_verify=0, updated_by=8), user.id)
    changed = app_repo.get_by_phone("111")
    assert (changed.name, changed.phone, changed.is_verify, changed.updated_by) == (
        "alicia",
        "111",
        0,
        8,
    )
    assert changed.updated_at == STAMP


def test_app_delete(app_repo):
    before = app_repo.count()
    user = app_repo.get_by_phone("333")
    app_repo.delete(user.id)
    assert app_repo.count() == before - 1
    with pytest.raises(NoRowsError):
        app_repo.get_by_phone("333")


@pytest.fixture
def admin_repo(connection):
    repo = AdminUserRepository(connection)
    password = "password"
    repo.create(
        AdminUser(email="ann@example.com", username="ann", name="Ann", password=password, created_by=1)
    )
    repo.create(
        AdminUser(email="ben@example.com", username="ben", name="Ben", password=password, created_by=1)
    )
    return repo


def test_admin_get_by_email(admin_repo):
    admin = admin_repo.get_by_email("ben@example.com")
    assert (admin.email, admin.username, admin.name, admin.password, admin.is_login) == (
        "ben@example.com",
        "ben",
        "Ben",
        "password",
        0,
    )


def test_admin_get_by_email_missing(admin_repo):
    with pytest.raises(NoRowsError):
        admin_repo.get_by_email("nobody@example.com")


def test_admin_list_search(admin_repo):
    assert [a.email for a in admin_repo.list(1, 10, "Ann")] == ["ann@example.com"]
    assert len(admin_repo.list(1, 10)) == admin_repo.count()


def test_admin_update_only_non_empty(admin_repo):
    admin = admin_repo.get_by_email("ann@example.com")
    admin_repo.update(AdminUser(name="Annie"), admin.id)
    changed = admin_repo.get_by_email("ann@example.com")
    assert (changed.name, changed.username, changed.updated_at) == ("Annie", "ann", STAMP)


def test_admin_update_with_nothing_fails(admin_repo):
    admin = admin_repo.get_by_email("ann@example.com")
    with pytest.raises(sqlite3.OperationalError):
        admin_repo.update(AdminUser(), admin.id)


def test_admin_delete(admin_repo):
    admin = admin_repo.get_by_email("ann@example.com")
    admin_repo.delete(admin.id)
    with pytest.raises(NoRowsError):
        admin_repo.get_by_email("ann@example.com")