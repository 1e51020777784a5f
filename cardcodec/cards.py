"""Card value type built on top of the packed integer encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from . import encoding


@dataclass(frozen=True, slots=True, repr=False)
class Card:
    """Immutable card parsed once from two-character notation such as ``"Td"``."""

    notation: str
    rank: int = field(init=False, compare=False)
    suit: int = field(init=False, compare=False)
    bitrank: int = field(init=False, compare=False)
    prime: int = field(init=False, compare=False)
    card_int_value: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        rank, suit_bit = encoding.parse_notation(self.notation)
        object.__setattr__(self, "rank", rank)
        object.__setattr__(self, "suit", suit_bit)
        object.__setattr__(self, "bitrank", 1 << rank)
        object.__setattr__(self, "prime", encoding.PRIMES[rank])
        object.__setattr__(self, "card_int_value", encoding.pack(rank, suit_bit))

    @classmethod
    def from_int(cls, card_int: int) -> "Card":
        """Rebuild a card from its packed integer."""

        return cls(encoding.notation_for(encoding.rank_of(card_int), encoding.suit_of(card_int)))

    @property
    def rank_char(self) -> str:
        return encoding.RANKS[self.rank]

    @property
    def suit_char(self) -> str:
        return encoding.BIT_TO_SUIT[self.suit]

    @property
    def suit_glyph(self) -> str:
        return encoding.SUIT_GLYPHS[self.suit]

    def as_string(self) -> str:
        """Return the canonical two-character notation."""

        return self.rank_char + self.suit_char

    @property
    def prettify(self) -> str:
        """Return the bracketed display form, e.g. ``"[ A ♠ ]"``."""

        return f"[ {self.rank_char} {self.suit_glyph} ]"

    @property
    def binary_string(self) -> str:
        return encoding.binary_string(self.card_int_value)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f'Card("{self.as_string()}")'

    def __int__(self) -> int:
        return self.card_int_value


def iter_full_deck() -> Iterator[Card]:
    """Yield all 52 cards, suit by suit, ranks ascending."""

    for suit_char in encoding.SUITS:
        for rank_char in encoding.RANKS:
            yield Card(rank_char + suit_char)
