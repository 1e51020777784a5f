"""Exceptions raised while parsing or packing cards."""

from __future__ import annotations

from typing import Any


class InvalidCard(ValueError):
    """Base error for card input that cannot be encoded."""

    def __init__(self, notation: Any, message: str) -> None:
        super().__init__(f"{message}: {notation!r}")
        self.notation = notation


class InvalidLength(InvalidCard):
    """Raised when card notation is not exactly two characters."""


class InvalidRank(InvalidCard):
    """Raised when the rank character or index is outside the rank table."""


class InvalidSuit(InvalidCard):
    """Raised when the suit character or bit is outside the suit table."""
