from __future__ import annotations
import logging

from .api import Catalog
from .domain import Item, Member

logger = logging.getLogger(__name__)


def seed_demo_data(catalog: Catalog) -> None:
    # items
    catalog.add_item(Item.book("TypeScript Guide", "B001", "John Doe"))
    catalog.add_item(Item.magazine("Tech Monthly", "M001", "2023-09"))
    catalog.add_item(
        Item.audiobook("Learn TypeScript", "AB001", "Jane Smith", 180, "Narrator Joe")
    )
    catalog.add_item(Item.digital_media("JavaScript Patterns", "DM001", "PDF", 15))
    catalog.add_item(Item.equipment("Chess Set", "EQ001", "Board Game", 2))

    # members
    catalog.add_member(Member("Alice", "MEM001"))
    catalog.add_member(Member("Bob", "MEM002"))

    logger.info("[seed] items: %s", [i.item_id for i in catalog.list_items()])
    logger.info("[seed] members: %s", [m.name for m in catalog.members.list_all()])
