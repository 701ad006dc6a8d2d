from __future__ import annotations
import argparse
import logging

from lendshelf import Catalog, seed_demo_data


def demo_flow() -> None:
    catalog = Catalog()
    seed_demo_data(catalog)

    # Borrow and return a book
    print(catalog.borrow_item("MEM001", "B001").message)
    print(catalog.list_borrowed_items("MEM001"))
    print(catalog.return_item("MEM001", "B001").message)

    # Borrow one of each of the other kinds
    print()
    print(catalog.borrow_item("MEM001", "AB001").message)
    print(catalog.borrow_item("MEM002", "DM001").message)
    print(catalog.borrow_item("MEM001", "EQ001").message)

    # Bob tries to take Alice's chess set
    attempt = catalog.borrow_item("MEM002", "EQ001")
    print("[demo] Bob borrows EQ001:", "SUCCESS" if attempt else f"DENIED ({attempt.message})")

    print("\nAlice's borrowed items:")
    print(catalog.list_borrowed_items("MEM001"))
    print("\nBob's borrowed items:")
    print(catalog.list_borrowed_items("MEM002"))

    print("\n[demo] availability:")
    for item, holder in catalog.report_availability():
        print(f"  - {item.item_id}: {'on loan to ' + holder if holder else 'available'}")

    print()
    print(catalog.return_item("MEM001", "AB001").message)
    print(catalog.return_item("MEM002", "DM001").message)

    print(catalog.get_library_summary())


def main() -> None:
    parser = argparse.ArgumentParser(description="lendshelf demo walkthrough")
    parser.add_argument(
        "--quiet", action="store_true", help="only log warnings and errors"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    demo_flow()


if __name__ == "__main__":
    main()
