from __future__ import annotations

"""Design tokens shared by the on-screen form and the PDF.

- Colors are hex strings; both Qt style sheets and ReportLab accept them.
- Sizes are points for the PDF and pixels on screen (1:1).
"""


class Colors:
    text = "#555"
    dark = "#222"
    white = "#fff"
    bg_dark = "#555"
    bg_gray = "#e3e3e3"
    rule = "#e3e3e3"
    remove = "#c0392b"
    link = "#3d6fd6"

    # Window shell
    shell_bg = "#fafafa"
    shell_card = "#ffffff"
    shell_border = "#e0e0e0"
    shell_focus = "#5b8def"
    shell_bg_dark = "#2b2b2b"
    shell_card_dark = "#2f2f2f"
    shell_text_dark = "#f0f0f0"
    shell_border_dark = "#3d3d3d"


class Space:
    xs = 4
    sm = 5
    md = 8
    lg = 10
    xl = 20
    xxl = 30
    xxxl = 40


class FontSize:
    body = 13
    lead = 20
    heading = 30
    title = 45


class Radius:
    sm = 4
    md = 10
