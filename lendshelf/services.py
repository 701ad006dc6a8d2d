from __future__ import annotations
import logging
from typing import List

from .domain import ErrorKind, Item, Member, Result
from .repositories import ItemRepo

logger = logging.getLogger(__name__)

NO_ITEMS_MESSAGE = "No items borrowed"


class LoanLedger:
    """Borrow/return on behalf of one member.

    The member's ``held_item_ids`` is the ledger itself; items are resolved
    through the shared ItemRepo so nothing here keeps a second reference.
    """

    def __init__(self, member: Member, items: ItemRepo) -> None:
        self.member = member
        self.items = items

    def borrow(self, item: Item) -> Result:
        if self.items.get(item.item_id) is not item:
            logger.warning("[borrow] item=%s is not in this catalog", item.item_id)
            return Result.failure(
                ErrorKind.ENTITY_NOT_FOUND, f"Item {item.item_id} not found"
            )

        result = item.borrow(self.member.name)
        if not result:
            logger.warning(
                "[borrow] refused item=%s member=%s: %s",
                item.item_id,
                self.member.member_id,
                result.message,
            )
            return result

        self.member.held_item_ids.append(item.item_id)
        logger.info("[borrow] item=%s member=%s", item.item_id, self.member.member_id)
        return result

    def return_item(self, item_id: str) -> Result:
        if item_id not in self.member.held_item_ids:
            logger.warning(
                "[return] item=%s not held by member=%s", item_id, self.member.member_id
            )
            return Result.failure(
                ErrorKind.ITEM_NOT_HELD,
                f"Item {item_id} not found in {self.member.name}'s borrowed items",
            )

        item = self.items.get(item_id)
        if item is None:
            logger.warning("[return] held item=%s missing from catalog", item_id)
            return Result.failure(
                ErrorKind.ENTITY_NOT_FOUND, f"Item {item_id} not found"
            )
        self.member.held_item_ids.remove(item_id)
        logger.info("[return] item=%s member=%s", item_id, self.member.member_id)
        return item.return_item()

    def holds(self, item_id: str) -> bool:
        return item_id in self.member.held_item_ids

    def held_items(self) -> List[Item]:
        # ids that no longer resolve are left out, as return_item refuses them
        held: List[Item] = []
        for item_id in self.member.held_item_ids:
            item = self.items.get(item_id)
            if item is not None:
                held.append(item)
        return held

    def list_borrowed_items(self) -> str:
        held = self.held_items()
        if not held:
            return NO_ITEMS_MESSAGE
        return "\n".join(i.get_details() for i in held)
