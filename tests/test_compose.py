from __future__ import annotations

import pytest

from invoicegen.styles.compose import StyleComposer, compose
from invoicegen.styles.table import STYLE_TABLE


TABLE = {
    "a": {"color": "#111", "font_size": 10},
    "b": {"color": "#222", "margin_top": 5},
    "c": {"font_weight": "bold"},
}


@pytest.mark.parametrize("tokens", ["", "   ", "unknown-token", "nope also-nope", None])
def test_empty_or_unknown_tokens_give_empty_bundle(tokens) -> None:
    assert StyleComposer(TABLE).compose(tokens) == {}
    assert compose(tokens) == {}


def test_later_token_wins_on_conflicts() -> None:
    composer = StyleComposer(TABLE)
    assert composer.compose("a b") == {"color": "#222", "font_size": 10, "margin_top": 5}
    assert composer.compose("b a") == {"color": "#111", "font_size": 10, "margin_top": 5}


def test_keys_are_union_of_known_tokens() -> None:
    composer = StyleComposer(TABLE)
    bundle = composer.compose("a  missing\tc")
    assert set(bundle) == {"color", "font_size", "font_weight"}


def test_composer_snapshots_its_table() -> None:
    source = {"a": {"color": "#111"}}
    composer = StyleComposer(source)
    source["a"]["color"] = "#999"
    source["b"] = {"color": "#000"}
    assert composer.compose("a b") == {"color": "#111"}


def test_compose_returns_fresh_bundle() -> None:
    composer = StyleComposer(TABLE)
    first = composer.compose("a")
    first["color"] = "changed"
    assert composer.compose("a")["color"] == "#111"


def test_default_table_tokens() -> None:
    bundle = compose("span fs-45 right bold")
    assert bundle["font_size"] == 45
    assert bundle["text_align"] == "right"
    assert bundle["font_weight"] == "bold"
    assert bundle["padding_top"] == STYLE_TABLE["span"]["padding_top"]
    assert compose("view flex w-50")["flex_direction"] == "row"
    assert compose("view flex w-50")["width"] == "50%"


def _walk(node):
    yield node
    for child in getattr(node, "children", ()):
        yield from _walk(child)


def test_invoice_layout_only_uses_known_tokens() -> None:
    from invoicegen.components.invoice_page import invoice_page
    from invoicegen.data.models import initial_invoice

    layout = invoice_page(initial_invoice())
    used = set()
    for node in _walk(layout):
        used.update(node.tokens().split())
        used.update(node.tokens(screen=True).split())
    assert used - set(STYLE_TABLE) == set()
    assert {"input", "link", "button"} <= used
