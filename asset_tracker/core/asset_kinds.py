"""Shared asset kind constants and helpers."""

from __future__ import annotations

from enum import Enum


class AssetKind(str, Enum):
    COMPUTER = "Computer"
    PHONE = "Phone"

    def __str__(self) -> str:
        return self.value


# Answer that ends the interactive entry loop instead of naming a kind.
DONE_KEYWORD = "done"

_KINDS_BY_KEY = {kind.value.lower(): kind for kind in AssetKind}


def normalize_kind(value: str | AssetKind | None) -> AssetKind | None:
    """Return the matching ``AssetKind`` for free text, ignoring case and padding."""

    if isinstance(value, AssetKind):
        return value
    if value is None:
        return None
    return _KINDS_BY_KEY.get(value.strip().lower())


__all__ = [
    "AssetKind",
    "DONE_KEYWORD",
    "normalize_kind",
]
