"""Packed integer encoding for standard playing cards.

A card is packed into a single integer with four disjoint fields::

    bits 16-28  bitrank   one-hot rank mask, ``1 << rank``
    bits 12-15  suit      one-hot suit mask (s=1, h=2, d=4, c=8)
    bits  8-11  rank      rank index, 0 (deuce) .. 12 (ace)
    bits  0-7   prime     prime assigned to the rank

Downstream evaluators read these integers directly, so the offsets are fixed.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from .errors import InvalidLength, InvalidRank, InvalidSuit

RANKS: Final[str] = "23456789TJQKA"
SUITS: Final[str] = "shdc"
PRIMES: Final[tuple[int, ...]] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)

RANK_TO_IDX: Final[Mapping[str, int]] = MappingProxyType({rank: idx for idx, rank in enumerate(RANKS)})
SUIT_BITS: Final[Mapping[str, int]] = MappingProxyType({"s": 1, "h": 2, "d": 4, "c": 8})
BIT_TO_SUIT: Final[Mapping[int, str]] = MappingProxyType({bit: suit for suit, bit in SUIT_BITS.items()})
SUIT_GLYPHS: Final[Mapping[int, str]] = MappingProxyType({1: "♠", 2: "♥", 4: "♦", 8: "♣"})

PRIME_SHIFT: Final[int] = 0
PRIME_MASK: Final[int] = 0xFF
RANK_SHIFT: Final[int] = 8
RANK_MASK: Final[int] = 0xF
SUIT_SHIFT: Final[int] = 12
SUIT_MASK: Final[int] = 0xF
BITRANK_SHIFT: Final[int] = 16
BITRANK_MASK: Final[int] = 0x1FFF

# binary_string template, slots counted from the right.
_TEMPLATE_SLOTS: Final[int] = 33
_TAB_SLOTS: Final[tuple[int, ...]] = (25, 30)


@dataclass(frozen=True, slots=True)
class CardFields:
    """Fields read back out of a packed card integer."""

    rank: int
    suit: int
    bitrank: int
    prime: int


def parse_notation(notation: str) -> tuple[int, int]:
    """Return ``(rank, suit_bit)`` for a two-character card such as ``"As"``."""

    if not isinstance(notation, str) or len(notation) != 2:
        raise InvalidLength(notation, "card notation must be exactly two characters")
    rank_char, suit_char = notation
    rank = RANK_TO_IDX.get(rank_char)
    if rank is None:
        raise InvalidRank(notation, f"unknown rank character {rank_char!r}")
    suit_bit = SUIT_BITS.get(suit_char)
    if suit_bit is None:
        raise InvalidSuit(notation, f"unknown suit character {suit_char!r}")
    return rank, suit_bit


def pack(rank: int, suit_bit: int) -> int:
    """Encode a rank index and suit bit into the packed card integer."""

    if not 0 <= rank < len(RANKS):
        raise InvalidRank(rank, "rank index out of range")
    if suit_bit not in BIT_TO_SUIT:
        raise InvalidSuit(suit_bit, "suit must be one of 1, 2, 4, 8")
    bitrank = 1 << rank
    return (
        (bitrank << BITRANK_SHIFT)
        | (suit_bit << SUIT_SHIFT)
        | (rank << RANK_SHIFT)
        | (PRIMES[rank] << PRIME_SHIFT)
    )


def rank_of(card_int: int) -> int:
    return (card_int >> RANK_SHIFT) & RANK_MASK


def suit_of(card_int: int) -> int:
    return (card_int >> SUIT_SHIFT) & SUIT_MASK


def bitrank_of(card_int: int) -> int:
    return (card_int >> BITRANK_SHIFT) & BITRANK_MASK


def prime_of(card_int: int) -> int:
    return (card_int >> PRIME_SHIFT) & PRIME_MASK


def unpack(card_int: int) -> CardFields:
    """Decode a packed card integer into its four fields."""

    return CardFields(
        rank=rank_of(card_int),
        suit=suit_of(card_int),
        bitrank=bitrank_of(card_int),
        prime=prime_of(card_int),
    )


def notation_for(rank: int, suit_bit: int) -> str:
    """Return the two-character notation for a rank index and suit bit."""

    if not 0 <= rank < len(RANKS):
        raise InvalidRank(rank, "rank index out of range")
    suit_char = BIT_TO_SUIT.get(suit_bit)
    if suit_char is None:
        raise InvalidSuit(suit_bit, "suit must be one of 1, 2, 4, 8")
    return RANKS[rank] + suit_char


def binary_string(card_int: int) -> str:
    """Render ``card_int`` as binary digits over a tab-grouped template.

    The template holds 33 slots counted from the right: tabs at slots 25 and
    30, ``"0"`` everywhere else. Bit ``i`` is written into slot ``i + i // 4``
    whether it is set or not, so a written bit replaces a tab. Slots past the
    template that no bit reaches are left out.
    """

    slots = {slot: "0" for slot in range(_TEMPLATE_SLOTS)}
    for slot in _TAB_SLOTS:
        slots[slot] = "\t"
    for bit in range(card_int.bit_length()):
        slots[bit + bit // 4] = "1" if (card_int >> bit) & 1 else "0"
    return "".join(slots[slot] for slot in sorted(slots, reverse=True))
