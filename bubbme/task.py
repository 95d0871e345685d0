"""User tasks and the use case around them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass
class Task:
    """A task owned by a user."""

    id: Any = None
    title: str = ""
    user_id: Any = None


class _TaskStore(Protocol):
    def create(self, task: Task) -> None: ...

    def fetch_by_user_id(self, user_id: str) -> list[Task]: ...


class TaskRepository:
    """Task storage; tasks are not persisted by the relational backend."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def create(self, task: Task) -> None:
        """Accept ``task`` without storing it."""
        return None

    def fetch_by_user_id(self, user_id: str) -> list[Task]:
        """Return the tasks of ``user_id``; none are stored, so always empty."""
        return []


class TaskUsecase:
    """Creates and looks up tasks through a repository."""

    def __init__(self, repository: _TaskStore) -> None:
        self.repository = repository

    def create(self, task: Task) -> None:
        """Store ``task``."""
        self.repository.create(task)

    def fetch_by_user_id(self, user_id: str) -> list[Task]:
        """Return the tasks owned by ``user_id``."""
        return self.repository.fetch_by_user_id(user_id)