"""Rich rendering helpers for cards and hands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from rich.text import Text

from .cards import Card


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Presentation options for rendered cards."""

    spade: str = "cyan"
    heart: str = "red"
    diamond: str = "magenta"
    club: str = "green"
    separator: str = " "

    def style_for(self, suit_bit: int) -> str:
        return {1: self.spade, 2: self.heart, 4: self.diamond, 8: self.club}[suit_bit]


DEFAULT_CONFIG = RenderConfig()


def format_card(card: Card, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Return a Rich markup label for ``card``, e.g. ``"[red]A♥[/red]"``."""

    style = config.style_for(card.suit)
    return f"[{style}]{card.rank_char}{card.suit_glyph}[/{style}]"


def render_card(card: Card, config: RenderConfig = DEFAULT_CONFIG) -> Text:
    """Return the styled equivalent of ``card.prettify``."""

    text = Text("[ ")
    text.append(card.rank_char, style="bold")
    text.append(" ")
    text.append(card.suit_glyph, style=config.style_for(card.suit))
    text.append(" ]")
    return text


def render_hand(cards: Iterable[Card], config: RenderConfig = DEFAULT_CONFIG) -> Text:
    """Return the styled equivalent of ``prettify_list_of_cards``."""

    return Text(config.separator).join(render_card(card, config) for card in cards)
