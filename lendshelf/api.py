from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple

from .domain import ErrorKind, Item, ItemKind, Member, Result
from .errors import LendingError
from .repositories import ItemRepo, MemberRepo
from .services import LoanLedger

logger = logging.getLogger(__name__)


class Catalog:
    """
    Facade that owns every item and member and routes borrow/return requests
    to the right member's ledger.
    """

    def __init__(self) -> None:
        # repos
        self.items = ItemRepo()
        self.members = MemberRepo()

        # one ledger per member, keyed by member_id
        self._ledgers: Dict[str, LoanLedger] = {}

    # ---- registration
    def add_item(self, item: Item) -> None:
        self.items.add(item)
        logger.debug("[catalog] added item=%s kind=%s", item.item_id, item.kind.name)

    def add_member(self, member: Member) -> None:
        if member.held_item_ids:
            raise LendingError(
                f"Member {member.member_id} cannot join holding {member.held_item_ids}"
            )
        self.members.add(member)
        self._ledgers[member.member_id] = LoanLedger(member, self.items)
        logger.debug("[catalog] added member=%s", member.member_id)

    # ---- lookup
    def find_item_by_id(self, item_id: str) -> Optional[Item]:
        return self.items.get(item_id)

    def find_member_by_id(self, member_id: str) -> Optional[Member]:
        return self.members.get(member_id)

    def ledger_for(self, member_id: str) -> Optional[LoanLedger]:
        return self._ledgers.get(member_id)

    def list_items(self, kind: Optional[ItemKind] = None) -> List[Item]:
        if kind is None:
            return self.items.list_all()
        return self.items.list_by_kind(kind)

    def search_items(self, text: str) -> List[Item]:
        return self.items.search(text)

    def holder_of(self, item_id: str) -> Optional[Member]:
        for ledger in self._ledgers.values():
            if ledger.holds(item_id):
                return ledger.member
        return None

    # ---- circulation
    def borrow_item(self, member_id: str, item_id: str) -> Result:
        ledger = self.ledger_for(member_id)
        if ledger is None:
            return _not_found("Member", member_id)
        item = self.find_item_by_id(item_id)
        if item is None:
            return _not_found("Item", item_id)
        return ledger.borrow(item)

    def return_item(self, member_id: str, item_id: str) -> Result:
        ledger = self.ledger_for(member_id)
        if ledger is None:
            return _not_found("Member", member_id)
        return ledger.return_item(item_id)

    # ---- reporting
    def list_borrowed_items(self, member_id: str) -> str:
        ledger = self.ledger_for(member_id)
        if ledger is None:
            return _not_found("Member", member_id).message
        return ledger.list_borrowed_items()

    def report_availability(self) -> List[Tuple[Item, Optional[str]]]:
        """
        Returns tuples of (Item, holder member_id or None when on the shelf)
        """
        report: List[Tuple[Item, Optional[str]]] = []
        for item in self.items.list_all():
            holder = self.holder_of(item.item_id)
            report.append((item, holder.member_id if holder else None))
        return report

    def get_library_summary(self) -> str:
        item_lines = "\n".join(i.get_details() for i in self.items.list_all())
        member_names = ", ".join(m.name for m in self.members.list_all())
        return (
            "--- Library Summary ---\n"
            "All items:\n"
            f"{item_lines}\n"
            "\n"
            "All members:\n"
            f"{member_names}\n"
        )


def _not_found(entity: str, entity_id: str) -> Result:
    logger.warning("[lookup] %s %s not found", entity.lower(), entity_id)
    return Result.failure(ErrorKind.ENTITY_NOT_FOUND, f"{entity} {entity_id} not found")
