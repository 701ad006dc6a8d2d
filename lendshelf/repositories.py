from __future__ import annotations
from typing import Dict, List, Optional

from .domain import Item, ItemKind, Member
from .errors import DuplicateItemError, DuplicateMemberError


class ItemRepo:
    def __init__(self) -> None:
        self._items: Dict[str, Item] = {}

    def add(self, item: Item) -> None:
        if item.item_id in self._items:
            raise DuplicateItemError(f"Item already exists: item_id={item.item_id}")
        self._items[item.item_id] = item

    def get(self, item_id: str) -> Optional[Item]:
        return self._items.get(item_id)

    def list_all(self) -> List[Item]:
        # insertion order
        return list(self._items.values())

    def list_by_kind(self, kind: ItemKind) -> List[Item]:
        return [i for i in self._items.values() if i.kind == kind]

    def search(self, text: str) -> List[Item]:
        t = text.lower().strip()
        return [
            i
            for i in self._items.values()
            if t in i.title.lower() or t in i.item_id.lower()
        ]


class MemberRepo:
    def __init__(self) -> None:
        self._members: Dict[str, Member] = {}

    def add(self, member: Member) -> None:
        if member.member_id in self._members:
            raise DuplicateMemberError(
                f"Member already exists: member_id={member.member_id}"
            )
        self._members[member.member_id] = member

    def get(self, member_id: str) -> Optional[Member]:
        return self._members.get(member_id)

    def list_all(self) -> List[Member]:
        return list(self._members.values())
