from __future__ import annotations


class AssetTrackerError(Exception):
    """Base class for errors raised by the asset tracker."""


class FieldIndexError(AssetTrackerError, IndexError):
    """Raised when a display column is requested that the asset does not define."""

    def __init__(self, index: int, column_count: int) -> None:
        self.index = index
        self.column_count = column_count
        super().__init__(f"Field index {index} is outside 0..{column_count - 1}")


__all__ = ["AssetTrackerError", "FieldIndexError"]
