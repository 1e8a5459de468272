"""Custom exceptions for the editing context."""

from typing import Any, Iterable, Optional


class UnknownCollectionError(ValueError):
    """Raised when a mutation names a collection the document does not have."""

    def __init__(self, collection: str, valid: Iterable[str]):
        self.collection = collection
        self.valid = tuple(valid)
        super().__init__(
            f"Unknown collection '{collection}'. Valid collections: {', '.join(self.valid)}"
        )


class UnknownFieldError(ValueError):
    """
    Raised when a mutation names a field the target record does not have.

    Attributes:
        field_name: The offending field name
        record_type: Name of the record type (e.g., 'ExperienceEntry')
    """

    def __init__(self, field_name: str, record_type: str, message: Optional[str] = None):
        self.field_name = field_name
        self.record_type = record_type
        super().__init__(message or f"{record_type} has no editable field '{field_name}'")


class InvalidFieldValueError(ValueError):
    """
    Raised when a value cannot be stored in a field (e.g., an unknown skill level).

    Attributes:
        field_name: Field being updated
        value: The rejected value
    """

    def __init__(self, field_name: str, value: Any, message: str):
        self.field_name = field_name
        self.value = value
        super().__init__(message)
