"""Batch helpers operating on hands (ordered sequences of cards)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np

from . import encoding
from .cards import Card

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def card_strings_to_int(card_strings: Iterable[str]) -> list[Card]:
    """Parse every notation in ``card_strings``; the first invalid one raises."""

    cards = [Card(notation) for notation in card_strings]
    logger.debug("parsed %d card(s)", len(cards))
    return cards


def prime_product_from_hands(cards: Iterable[Card]) -> int:
    """Return the product of the primes of ``cards`` (``1`` for no cards)."""

    product = 1
    for card in cards:
        product *= card.prime
    return product


def prime_product_from_rankbits(rankbits: int) -> int:
    """Return the product of the primes for every rank bit set in ``rankbits``.

    Only bits 0-12 name ranks; anything above is ignored.
    """

    product = 1
    for rank, prime in enumerate(encoding.PRIMES):
        if (rankbits >> rank) & 1:
            product *= prime
    return product


def rankbits_from_cards(cards: Iterable[Card]) -> int:
    """Return the union of the bitranks of ``cards``."""

    mask = 0
    for card in cards:
        mask |= card.bitrank
    return mask


def prettify_list_of_cards(cards: Iterable[Card]) -> str:
    return " ".join(card.prettify for card in cards)


def card_int_array(cards: Sequence[Card]) -> "NDArray[np.uint32]":
    """Return the packed integers of ``cards`` as a ``uint32`` array."""

    return np.array([card.card_int_value for card in cards], dtype=np.uint32)
