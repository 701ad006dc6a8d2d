from __future__ import annotations
from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar, List, Optional, Tuple, Union


class ErrorKind(Enum):
    ENTITY_NOT_FOUND = auto()
    ITEM_UNAVAILABLE = auto()
    ITEM_NOT_HELD = auto()


@dataclass(frozen=True)
class Result:
    """Outcome of a borrow or return request.

    Failures are ordinary values: ``ok`` is False and ``error`` says why.
    """

    ok: bool
    message: str
    error: Optional[ErrorKind] = None

    @classmethod
    def success(cls, message: str) -> "Result":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "Result":
        return cls(ok=False, message=message, error=error)

    def __bool__(self) -> bool:
        return self.ok


class ItemKind(Enum):
    BOOK = auto()
    MAGAZINE = auto()
    AUDIOBOOK = auto()
    DIGITAL_MEDIA = auto()
    EQUIPMENT = auto()


# ---- variant payloads


@dataclass(frozen=True)
class BookDetails:
    kind: ClassVar[ItemKind] = ItemKind.BOOK
    label: ClassVar[str] = "Book"

    author: str

    def describe(self, title: str, item_id: str) -> str:
        return f'Book: "{title}" by {self.author} (ID: {item_id})'


@dataclass(frozen=True)
class MagazineDetails:
    kind: ClassVar[ItemKind] = ItemKind.MAGAZINE
    label: ClassVar[str] = "Magazine"

    issue_date: str

    def describe(self, title: str, item_id: str) -> str:
        return f'Magazine: "{title}" issue {self.issue_date} (ID: {item_id})'


@dataclass(frozen=True)
class AudioBookDetails:
    kind: ClassVar[ItemKind] = ItemKind.AUDIOBOOK
    label: ClassVar[str] = "AudioBook"

    author: str
    duration_minutes: int
    narrator: str

    def describe(self, title: str, item_id: str) -> str:
        return (
            f'AudioBook: "{title}" by {self.author}, narrated by {self.narrator}, '
            f"{self.duration_minutes} min (ID: {item_id})"
        )


@dataclass(frozen=True)
class DigitalMediaDetails:
    kind: ClassVar[ItemKind] = ItemKind.DIGITAL_MEDIA
    label: ClassVar[str] = "Digital Media"

    file_format: str
    file_size_mb: float

    def describe(self, title: str, item_id: str) -> str:
        return (
            f'Digital Media: "{title}" format: {self.file_format}, '
            f"size: {self.file_size_mb:g}MB (ID: {item_id})"
        )


@dataclass(frozen=True)
class EquipmentDetails:
    kind: ClassVar[ItemKind] = ItemKind.EQUIPMENT
    label: ClassVar[str] = "Equipment"

    equipment_type: str
    quantity: int

    def describe(self, title: str, item_id: str) -> str:
        return (
            f'Equipment: "{title}" type: {self.equipment_type}, '
            f"quantity: {self.quantity} (ID: {item_id})"
        )


ItemDetails = Union[
    BookDetails,
    MagazineDetails,
    AudioBookDetails,
    DigitalMediaDetails,
    EquipmentDetails,
]


# ---- envelope


class _FixedIdentity:
    """Fields named in ``_fixed`` can be set once, in __init__, and never again."""

    _fixed: ClassVar[Tuple[str, ...]] = ()

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._fixed and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)


@dataclass
class Item(_FixedIdentity):
    """One loanable unit.

    The availability state machine (Available <-> Borrowed) lives here and is
    the same for every kind; ``details`` only changes the wording of messages
    and descriptions.
    """

    _fixed: ClassVar[Tuple[str, ...]] = ("item_id", "title", "details")

    item_id: str
    title: str
    details: ItemDetails
    available: bool = field(default=True, init=False)

    @property
    def kind(self) -> ItemKind:
        return self.details.kind

    def borrow(self, borrower_name: str) -> Result:
        # single check-and-set; nothing else flips available to False
        if not self.available:
            return Result.failure(
                ErrorKind.ITEM_UNAVAILABLE,
                f'{self.details.label} "{self.title}" is not available',
            )
        self.available = False
        return Result.success(
            f'{self.details.label} "{self.title}" borrowed by {borrower_name}'
        )

    def return_item(self) -> Result:
        self.available = True
        return Result.success(f'{self.details.label} "{self.title}" returned')

    def is_available(self) -> bool:
        return self.available

    def get_details(self) -> str:
        return self.details.describe(self.title, self.item_id)

    # ---- constructors, one per kind

    @classmethod
    def book(cls, title: str, item_id: str, author: str) -> "Item":
        return cls(item_id=item_id, title=title, details=BookDetails(author=author))

    @classmethod
    def magazine(cls, title: str, item_id: str, issue_date: str) -> "Item":
        return cls(
            item_id=item_id, title=title, details=MagazineDetails(issue_date=issue_date)
        )

    @classmethod
    def audiobook(
        cls, title: str, item_id: str, author: str, duration_minutes: int, narrator: str
    ) -> "Item":
        return cls(
            item_id=item_id,
            title=title,
            details=AudioBookDetails(
                author=author, duration_minutes=duration_minutes, narrator=narrator
            ),
        )

    @classmethod
    def digital_media(
        cls, title: str, item_id: str, file_format: str, file_size_mb: float
    ) -> "Item":
        return cls(
            item_id=item_id,
            title=title,
            details=DigitalMediaDetails(
                file_format=file_format, file_size_mb=file_size_mb
            ),
        )

    @classmethod
    def equipment(
        cls, title: str, item_id: str, equipment_type: str, quantity: int
    ) -> "Item":
        return cls(
            item_id=item_id,
            title=title,
            details=EquipmentDetails(equipment_type=equipment_type, quantity=quantity),
        )


@dataclass
class Member(_FixedIdentity):
    _fixed: ClassVar[Tuple[str, ...]] = ("name", "member_id", "held_item_ids")

    name: str
    member_id: str
    # borrow order; only LoanLedger appends or removes
    held_item_ids: List[str] = field(default_factory=list, init=False)
