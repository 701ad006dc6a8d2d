"""
lendshelf: an in-memory lending catalog.

Exports key modules for convenient imports.
"""

from .domain import (
    ErrorKind,
    Result,
    ItemKind,
    BookDetails,
    MagazineDetails,
    AudioBookDetails,
    DigitalMediaDetails,
    EquipmentDetails,
    Item,
    Member,
)

from .errors import (
    LendingError,
    DuplicateItemError,
    DuplicateMemberError,
)

from .repositories import (
    ItemRepo,
    MemberRepo,
)

from .services import LoanLedger, NO_ITEMS_MESSAGE

from .api import Catalog
from .seed import seed_demo_data

__all__ = [
    # domain
    "ErrorKind",
    "Result",
    "ItemKind",
    "BookDetails",
    "MagazineDetails",
    "AudioBookDetails",
    "DigitalMediaDetails",
    "EquipmentDetails",
    "Item",
    "Member",
    # errors
    "LendingError",
    "DuplicateItemError",
    "DuplicateMemberError",
    # repos
    "ItemRepo",
    "MemberRepo",
    # services
    "LoanLedger",
    "NO_ITEMS_MESSAGE",
    # api
    "Catalog",
    # seed
    "seed_demo_data",
]
