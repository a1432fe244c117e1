from __future__ import annotations

from typing import List, Mapping

from invoicegen.styles.tokens import Colors, Radius

# Bundle keys that Qt style sheets can express directly; layout keys
# (width, flex, flex_direction, text_align) are applied by the renderer.
_BOX_KEYS = (
    ("margin_top", "margin-top"),
    ("margin_bottom", "margin-bottom"),
    ("padding_top", "padding-top"),
    ("padding_right", "padding-right"),
    ("padding_bottom", "padding-bottom"),
    ("padding_left", "padding-left"),
)
TEXT_KEYS = ("color", "font_size", "font_weight")


def _declarations(bundle: Mapping[str, object], keys: tuple) -> List[str]:
    out: List[str] = []
    for key in keys:
        if key not in bundle:
            continue
        value = bundle[key]
        if key == "color":
            out.append(f"color: {value};")
        elif key == "font_size":
            out.append(f"font-size: {value}px;")
        elif key == "font_weight":
            out.append(f"font-weight: {value};")
    return out


def text_qss(bundle: Mapping[str, object]) -> str:
    """Declarations for the text attributes of *bundle* (no selector)."""
    return " ".join(_declarations(bundle, TEXT_KEYS))


def box_qss(bundle: Mapping[str, object]) -> str:
    """Declarations for spacing, background and borders of *bundle* (no selector)."""
    out: List[str] = []
    for key, prop in _BOX_KEYS:
        if key in bundle:
            out.append(f"{prop}: {bundle[key]}px;")
    if "background_color" in bundle:
        out.append(f"background: {bundle['background_color']};")
    if bundle.get("border_bottom_width"):
        color = bundle.get("border_bottom_color", Colors.rule)
        out.append(f"border-bottom: {bundle['border_bottom_width']}px solid {color};")
    return " ".join(out)


def bundle_to_qss(bundle: Mapping[str, object], selector: str) -> str:
    """Translate a composed bundle into a style sheet rule for *selector*.

    Text attributes are also emitted for the editors and labels inside the
    container, which is how the document renderer lets children inherit them.
    """
    rules = [f"{selector} {{ {box_qss(bundle)} {text_qss(bundle)} }}"]
    text = text_qss(bundle)
    if text:
        rules.append(f"{selector} QLineEdit, {selector} QPlainTextEdit, {selector} QLabel {{ {text} }}")
    return "\n".join(rules)


def light_qss() -> str:
    c = Colors
    r = Radius
    return f"""
    QWidget {{ font-size: 13px; background: {c.shell_bg}; color: {c.dark}; }}
    QLabel#Heading {{ font-size: 30px; font-weight: 700; qproperty-alignment: AlignCenter; }}
    QFrame[role="page"] {{ background: {c.shell_card}; border: 1px solid {c.shell_border}; border-radius: {r.md}px; }}
    QFrame[role="page"] QWidget {{ background: transparent; }}
    QLineEdit, QPlainTextEdit {{ border: 1px dashed transparent; border-radius: {r.sm}px; }}
    QLineEdit:hover, QPlainTextEdit:hover {{ border-color: {c.shell_border}; }}
    QLineEdit:focus, QPlainTextEdit:focus {{ border: 1px solid {c.shell_focus}; }}
    QLineEdit[readOnly="true"] {{ border: none; }}
    QPushButton {{ padding: 6px 12px; border-radius: {r.md}px; border: 1px solid {c.shell_border}; background: {c.shell_card}; }}
    QPushButton:hover {{ background: #f3f6ff; border-color: #b8c6ff; }}
    QPushButton#DownloadPdf {{ background: {c.shell_focus}; color: {c.white}; border: none; font-weight: 600; }}
    """


def dark_qss() -> str:
    c = Colors
    r = Radius
    return f"""
    QWidget {{ font-size: 13px; background: {c.shell_bg_dark}; color: {c.shell_text_dark}; }}
    QLabel#Heading {{ font-size: 30px; font-weight: 700; qproperty-alignment: AlignCenter; }}
    QFrame[role="page"] {{ background: {c.shell_card}; border: 1px solid {c.shell_border_dark}; border-radius: {r.md}px; }}
    QFrame[role="page"] QWidget {{ background: transparent; }}
    QLineEdit, QPlainTextEdit {{ border: 1px dashed transparent; border-radius: {r.sm}px; }}
    QLineEdit:focus, QPlainTextEdit:focus {{ border: 1px solid {c.shell_focus}; }}
    QLineEdit[readOnly="true"] {{ border: none; }}
    QPushButton {{ padding: 6px 12px; border-radius: {r.md}px; border: 1px solid {c.shell_border_dark}; background: #3a3a3a; color: {c.shell_text_dark}; }}
    QPushButton#DownloadPdf {{ background: {c.shell_focus}; color: {c.white}; border: none; font-weight: 600; }}
    """
