from __future__ import annotations

import logging

from lendshelf import ErrorKind, Item, ItemRepo, LoanLedger, Member, NO_ITEMS_MESSAGE


def _ledger(*items: Item) -> LoanLedger:
    repo = ItemRepo()
    for item in items:
        repo.add(item)
    return LoanLedger(Member("Alice", "MEM001"), repo)


def test_borrow_records_item_in_borrow_order():
    book = Item.book("TypeScript Guide", "B001", "John Doe")
    chess = Item.equipment("Chess Set", "EQ001", "Board Game", 2)
    ledger = _ledger(book, chess)

    assert ledger.borrow(chess).ok
    assert ledger.borrow(book).ok

    assert ledger.member.held_item_ids == ["EQ001", "B001"]
    assert ledger.held_items() == [chess, book]


def test_borrow_unavailable_item_leaves_ledger_untouched():
    book = Item.book("TypeScript Guide", "B001", "John Doe")
    ledger = _ledger(book)
    book.borrow("Bob")

    result = ledger.borrow(book)

    assert result.error == ErrorKind.ITEM_UNAVAILABLE
    assert ledger.member.held_item_ids == []
    assert not book.is_available()


def test_return_removes_only_that_item():
    items = [
        Item.book("TypeScript Guide", "B001", "John Doe"),
        Item.magazine("Tech Monthly", "M001", "2023-09"),
        Item.equipment("Chess Set", "EQ001", "Board Game", 2),
    ]
    ledger = _ledger(*items)
    for item in items:
        ledger.borrow(item)

    result = ledger.return_item("M001")

    assert result.ok
    assert ledger.member.held_item_ids == ["B001", "EQ001"]
    assert items[1].is_available()
    assert not items[0].is_available()


def test_return_of_item_not_held_is_refused():
    book = Item.book("TypeScript Guide", "B001", "John Doe")
    ledger = _ledger(book)
    book.borrow("Bob")

    result = ledger.return_item("B001")

    assert result.error == ErrorKind.ITEM_NOT_HELD
    # availability untouched since the item was never returned
    assert not book.is_available()


def test_second_return_is_refused():
    book = Item.book("TypeScript Guide", "B001", "John Doe")
    ledger = _ledger(book)
    ledger.borrow(book)

    assert ledger.return_item("B001").ok
    assert ledger.return_item("B001").error == ErrorKind.ITEM_NOT_HELD


def test_list_borrowed_items():
    book = Item.book("TypeScript Guide", "B001", "John Doe")
    mag = Item.magazine("Tech Monthly", "M001", "2023-09")
    ledger = _ledger(book, mag)

    assert ledger.list_borrowed_items() == NO_ITEMS_MESSAGE

    ledger.borrow(mag)
    ledger.borrow(book)

    assert ledger.list_borrowed_items() == "\n".join(
        [mag.get_details(), book.get_details()]
    )


def test_refused_borrow_is_logged(caplog):
    book = Item.book("TypeScript Guide", "B001", "John Doe")
    ledger = _ledger(book)
    book.borrow("Bob")

    with caplog.at_level(logging.WARNING, logger="lendshelf.services"):
        ledger.borrow(book)

    assert "[borrow] refused item=B001" in caplog.text


def test_borrow_of_item_outside_repo_is_refused():
    stray = Item.book("Stray", "X1", "Nobody")
    ledger = _ledger()

    result = ledger.borrow(stray)

    assert result.error == ErrorKind.ENTITY_NOT_FOUND
    assert stray.is_available()
    assert ledger.member.held_item_ids == []
    assert ledger.return_item("X1").error == ErrorKind.ITEM_NOT_HELD


def test_borrow_of_lookalike_item_is_refused():
    book = Item.book("TypeScript Guide", "B001", "John Doe")
    twin = Item.book("TypeScript Guide", "B001", "John Doe")
    ledger = _ledger(book)

    result = ledger.borrow(twin)

    assert result.error == ErrorKind.ENTITY_NOT_FOUND
    assert twin.is_available()
    assert book.is_available()
    assert ledger.member.held_item_ids == []
