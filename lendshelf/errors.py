class LendingError(Exception):
    """Base exception for lending catalog misuse."""


class DuplicateItemError(LendingError):
    """An item with the same identifier is already in the catalog."""


class DuplicateMemberError(LendingError):
    """A member with the same identifier is already registered."""
