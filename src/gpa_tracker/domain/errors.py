"""Errors raised by the domain and persistence layers."""

from uuid import UUID


class InvalidSubjectError(ValueError):
    """Raised when subject entries cannot produce a grade-point average."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class ResultMismatchError(ValueError):
    """Raised when a submitted average disagrees with the recomputed one."""


class RecordNotFoundError(LookupError):
    """Raised when no stored record matches an identity."""

    def __init__(self, entity: str, record_id: UUID) -> None:
        super().__init__(f"{entity.capitalize()} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class StoreError(RuntimeError):
    """Raised when the record store rejects or fails an operation."""
