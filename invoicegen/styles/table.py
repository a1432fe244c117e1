from __future__ import annotations

"""Style table: semantic class token -> style bundle.

Bundle keys understood by both renderers:

  color, background_color       hex strings
  font_size                     number
  font_weight                   "bold" | "normal"
  text_align                    "left" | "right" | "center"
  flex_direction                "row" | "column"
  flex                          stretch factor inside a row
  width                         percentage string, e.g. "50%"
  margin_top, margin_bottom     number
  padding_top, padding_right,
  padding_bottom, padding_left  number
  border_bottom_width           number
  border_bottom_color           hex string
"""

from typing import Dict

from invoicegen.styles.tokens import Colors, FontSize, Space

StyleBundle = Dict[str, object]


def _padding(top: float, right: float, bottom: float, left: float) -> StyleBundle:
    return {
        "padding_top": top,
        "padding_right": right,
        "padding_bottom": bottom,
        "padding_left": left,
    }


def _width(pct: int) -> StyleBundle:
    return {"width": f"{pct}%"}


STYLE_TABLE: Dict[str, StyleBundle] = {
    # Structural roles
    "page": {
        "font_size": FontSize.body,
        "color": Colors.text,
        **_padding(Space.xxxl, 35, Space.xxxl, 35),
    },
    "view": {},
    "span": _padding(Space.xs, 12, Space.xs, 0),
    # On-screen counterpart of span
    "input": _padding(Space.xs, Space.xs, Space.xs, Space.xs),
    "logo": {},
    "button": {"color": Colors.dark},
    # Layout
    "flex": {"flex_direction": "row"},
    "w-auto": {"flex": 1, "padding_right": Space.md},
    "ml-30": {"flex": 1},
    "w-100": _width(100),
    "w-60": _width(60),
    "w-55": _width(55),
    "w-50": _width(50),
    "w-48": _width(48),
    "w-45": _width(45),
    "w-40": _width(40),
    "w-38": _width(38),
    "w-18": _width(18),
    "w-17": _width(17),
    "row": {"border_bottom_width": 1, "border_bottom_color": Colors.rule},
    # Spacing
    "mt-40": {"margin_top": Space.xxxl},
    "mt-30": {"margin_top": Space.xxl},
    "mt-20": {"margin_top": Space.xl},
    "mt-10": {"margin_top": Space.lg},
    "mb-5": {"margin_bottom": Space.sm},
    "p-4-8": _padding(Space.xs, Space.md, Space.xs, Space.md),
    "p-5": _padding(Space.sm, Space.sm, Space.sm, Space.sm),
    "pb-10": {"padding_bottom": Space.lg},
    "p-10": _padding(Space.lg, Space.lg, Space.lg, Space.lg),
    # Text
    "left": {"text_align": "left"},
    "right": {"text_align": "right"},
    "center": {"text_align": "center"},
    "bold": {"font_weight": "bold"},
    "fs-20": {"font_size": FontSize.lead},
    "fs-30": {"font_size": FontSize.heading},
    "fs-45": {"font_size": FontSize.title},
    "white": {"color": Colors.white},
    "dark": {"color": Colors.dark},
    # Backgrounds
    "bg-dark": {"background_color": Colors.bg_dark},
    "bg-gray": {"background_color": Colors.bg_gray},
    # Interactive-only controls
    "row__remove": {"color": Colors.remove, "font_weight": "bold"},
    "link": {"color": Colors.link, "font_weight": "bold"},
}
