from enum import Enum


class InsertResult(Enum):
    INSERTED = "inserted"
    DUPLICATE = "duplicate"


class RemoveResult(Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"


class DuplicateValueError(ValueError):
    """Raised by a strict insert when the value is already in the tree."""

    def __init__(self, value) -> None:
        super().__init__(f"value already present: {value!r}")
        self.value = value


class ValueNotFoundError(KeyError):
    """Raised by a strict remove when the value is not in the tree."""

    def __init__(self, value) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"value not found: {self.value!r}"
