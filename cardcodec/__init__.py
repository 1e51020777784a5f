"""Packed-integer playing card codec for poker hand evaluation."""

from . import cards, encoding, errors, hands, render
from .cards import Card, iter_full_deck
from .errors import InvalidCard, InvalidLength, InvalidRank, InvalidSuit
from .hands import (
    card_int_array,
    card_strings_to_int,
    prettify_list_of_cards,
    prime_product_from_hands,
    prime_product_from_rankbits,
    rankbits_from_cards,
)

__all__ = [
    "Card",
    "InvalidCard",
    "InvalidLength",
    "InvalidRank",
    "InvalidSuit",
    "card_int_array",
    "card_strings_to_int",
    "cards",
    "encoding",
    "errors",
    "hands",
    "iter_full_deck",
    "prettify_list_of_cards",
    "prime_product_from_hands",
    "prime_product_from_rankbits",
    "rankbits_from_cards",
    "render",
]
