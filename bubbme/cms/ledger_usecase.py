"""Administrative use cases for game items and user coin and point balances."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from bubbme.cms.catalog_usecase import Response, logged, parse_actor_id
from bubbme.cms.ledger_repository import BalanceRepository, Item, ItemRepository, UserBalance


@dataclass
class ItemRequest:
    """Fields submitted to create or edit a game item."""

    name: str = ""
    description: str = ""
    value: int = 0
    type_id: int = 0


class ItemUsecase:
    """Lists and edits game items."""

    def __init__(self, repository: ItemRepository) -> None:
        self.repository = repository

    def list(self, page: int, limit: int, search: str = "") -> Response:
        """Return one page of items with the number of matching items."""
        items = logged(lambda: self.repository.list(page, limit, search))
        total = logged(lambda: self.repository.count(search))
        return Response(total=total, data=items)

    def create(self, request: ItemRequest, actor_id: Any) -> Response:
        """Add the item in ``request`` on behalf of ``actor_id``."""
        item = Item(
            name=request.name,
            description=request.description,
            value=request.value,
            type_id=request.type_id,
            created_by=parse_actor_id(actor_id),
        )
        logged(lambda: self.repository.create(item))
        return Response()

    def update(self, request: ItemRequest, item_id: int, actor_id: Any) -> Response:
        """Apply ``request`` to item ``item_id`` on behalf of ``actor_id``."""
        item = Item(
            name=request.name,
            description=request.description,
            value=request.value,
            type_id=request.type_id,
            updated_at=datetime.now(),
            updated_by=parse_actor_id(actor_id),
        )
        logged(lambda: self.repository.update(item, item_id))
        return Response()

    def delete(self, item_id: int) -> Response:
        """Remove item ``item_id``."""
        self.repository.delete(item_id)
        return Response()


@dataclass
class BalanceRequest:
    """Fields submitted to create or edit a user balance."""

    user_id: int = 0
    value: int = 0


class BalanceUsecase:
    """Lists and edits per-user balances of one kind."""

    def __init__(self, repository: BalanceRepository) -> None:
        self.repository = repository

    def list(self, page: int, limit: int, search: str = "") -> Response:
        """Return one page of balances with the number of matching balances."""
        balances = logged(lambda: self.repository.list(page, limit, search))
        total = logged(lambda: self.repository.count(search))
        return Response(total=total, data=balances)

    def create(self, request: BalanceRequest, actor_id: Any) -> Response:
        """Add the balance in ``request`` on behalf of ``actor_id``."""
        balance = UserBalance(
            user_id=request.user_id,
            value=request.value,
            created_by=parse_actor_id(actor_id),
        )
        logged(lambda: self.repository.create(balance))
        return Response()

    def update(self, request: BalanceRequest, balance_id: int, actor_id: Any) -> Response:
        """Apply ``request`` to balance ``balance_id`` on behalf of ``actor_id``."""
        balance = UserBalance(
            user_id=request.user_id,
            value=request.value,
            updated_at=datetime.now(),
            updated_by=parse_actor_id(actor_id),
        )
        logged(lambda: self.repository.update(balance, balance_id))
        return Response()

    def delete(self, balance_id: int) -> Response:
        """Remove balance ``balance_id``."""
        self.repository.delete(balance_id)
        return Response()