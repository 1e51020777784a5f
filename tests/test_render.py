from __future__ import annotations

from cardcodec.cards import Card
from cardcodec.hands import prettify_list_of_cards
from cardcodec.render import DEFAULT_CONFIG, RenderConfig, format_card, render_card, render_hand


def test_format_card_uses_suit_style() -> None:
    assert format_card(Card("Ah")) == "[red]A♥[/red]"
    assert format_card(Card("Ts")) == "[cyan]T♠[/cyan]"


def test_format_card_honours_config() -> None:
    config = RenderConfig(club="yellow")
    assert format_card(Card("9c"), config) == "[yellow]9♣[/yellow]"


def test_render_card_plain_text_matches_prettify() -> None:
    card = Card("Qd")
    assert render_card(card).plain == card.prettify


def test_render_hand_plain_text_matches_prettify_list() -> None:
    hand = [Card("As"), Card("2h"), Card("Td"), Card("Jc")]

    assert render_hand(hand).plain == prettify_list_of_cards(hand)
    assert render_hand([]).plain == ""


def test_render_hand_styles_suit_glyphs() -> None:
    text = render_hand([Card("2h")])
    styles = {str(span.style) for span in text.spans}
    assert DEFAULT_CONFIG.heart in styles


def test_render_hand_custom_separator() -> None:
    hand = [Card("Kc"), Card("Kd")]
    assert render_hand(hand, RenderConfig(separator=" | ")).plain == "[ K ♣ ] | [ K ♦ ]"
