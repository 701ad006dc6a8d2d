from __future__ import annotations

import pytest

from lendshelf import Catalog, Item, seed_demo_data


@pytest.fixture
def catalog() -> Catalog:
    c = Catalog()
    seed_demo_data(c)
    return c


@pytest.fixture
def book() -> Item:
    return Item.book("TypeScript Guide", "B001", "John Doe")
