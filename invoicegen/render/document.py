from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.utils import ImageReader
from reportlab.platypus import Flowable, Image, Paragraph, Spacer, Table, TableStyle

from invoicegen.components.primitives import Action, EditableInput, EditableTextarea, Logo, Page, View
from invoicegen.render.base import Renderer
from invoicegen.styles.compose import StyleComposer
from invoicegen.styles.table import StyleBundle

logger = logging.getLogger(__name__)

PAGE_SIZE = A4
PAGE_WIDTH, PAGE_HEIGHT = PAGE_SIZE

REGULAR_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"
DEFAULT_FONT_SIZE = 10
LEADING_RATIO = 1.25

_ALIGN = {"left": TA_LEFT, "right": TA_RIGHT, "center": TA_CENTER}


@dataclass
class DocumentPage:
    """A rendered page: its flowables plus the page box taken from the ``page`` style."""

    flowables: List[Flowable] = field(default_factory=list)
    # top, right, bottom, left
    margins: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    background: Optional[str] = None


def _num(bundle: StyleBundle, key: str) -> float:
    try:
        return float(bundle.get(key, 0) or 0)
    except (TypeError, ValueError):
        return 0.0


def _percent(value: object) -> Optional[float]:
    if isinstance(value, str) and value.endswith("%"):
        try:
            return float(value[:-1]) / 100.0
        except ValueError:
            return None
    return None


def paragraph_style(bundle: StyleBundle, name: str = "span") -> ParagraphStyle:
    """Map the text attributes of a bundle onto a ReportLab ParagraphStyle."""
    size = _num(bundle, "font_size") or DEFAULT_FONT_SIZE
    bold = str(bundle.get("font_weight", "")).lower() in ("bold", "700", "600")
    return ParagraphStyle(
        name,
        fontName=BOLD_FONT if bold else REGULAR_FONT,
        fontSize=size,
        leading=size * LEADING_RATIO,
        textColor=colors.HexColor(str(bundle["color"])) if bundle.get("color") else colors.black,
        alignment=_ALIGN.get(str(bundle.get("text_align", "left")), TA_LEFT),
    )


def _indented(content: List[Flowable], left: float, right: float) -> List[Flowable]:
    """Shift the paragraphs in *content* inwards by *left* and *right* points."""
    if not (left or right):
        return list(content)
    for f in content:
        if isinstance(f, Paragraph):
            s = f.style
            f.style = ParagraphStyle(
                f"{s.name}-pad",
                parent=s,
                leftIndent=s.leftIndent + left,
                rightIndent=s.rightIndent + right,
            )
    return list(content)


class DocumentRenderer(Renderer):
    """Renders primitives as ReportLab flowables.

    Every Table gets absolute column widths: the renderer tracks the width
    available to each node, starting from the page width minus its padding.
    """

    pdf_mode = True

    def __init__(self, composer: Optional[StyleComposer] = None, page_size: Tuple[float, float] = PAGE_SIZE) -> None:
        super().__init__(composer)
        self.page_size = page_size
        self._avail: List[float] = [page_size[0]]

    # ----- helpers -----
    def _box(self, content: List[Flowable], bundle: StyleBundle, width: float) -> List[Flowable]:
        """Apply padding, background, bottom border and margins around *content*.

        Plain padding around text is expressed with paragraph indents and
        spacers so long text can still break across pages. Backgrounds and
        borders need a Table; those are allowed to split inside their row.
        """
        pads = [_num(bundle, k) for k in ("padding_top", "padding_right", "padding_bottom", "padding_left")]
        background = bundle.get("background_color")
        border = _num(bundle, "border_bottom_width")
        decorations = []
        if background:
            decorations.append(("BACKGROUND", (0, 0), (-1, -1), colors.HexColor(str(background))))
        if border:
            color = bundle.get("border_bottom_color") or "#000000"
            decorations.append(("LINEBELOW", (0, -1), (-1, -1), border, colors.HexColor(str(color))))

        out: List[Flowable] = []
        if decorations and not any(pads) and len(content) == 1 and isinstance(content[0], Table):
            # A row already is a Table: decorate it in place
            content[0].setStyle(TableStyle(decorations))
            out.append(content[0])
        elif decorations or (any(pads) and not all(isinstance(f, (Paragraph, Spacer)) for f in content)):
            t = Table([[content or ""]], colWidths=[max(width, 1.0)], splitInRow=1)
            ts = TableStyle(decorations)
            ts.add("TOPPADDING", (0, 0), (-1, -1), pads[0])
            ts.add("RIGHTPADDING", (0, 0), (-1, -1), pads[1])
            ts.add("BOTTOMPADDING", (0, 0), (-1, -1), pads[2])
            ts.add("LEFTPADDING", (0, 0), (-1, -1), pads[3])
            ts.add("VALIGN", (0, 0), (-1, -1), "TOP")
            t.setStyle(ts)
            out.append(t)
        elif any(pads):
            out.extend(_indented(content, left=pads[3], right=pads[1]))
            if pads[0]:
                out.insert(0, Spacer(1, pads[0]))
            if pads[2]:
                out.append(Spacer(1, pads[2]))
        else:
            out.extend(content)
        if out and _num(bundle, "margin_top"):
            out.insert(0, Spacer(1, _num(bundle, "margin_top")))
        if out and _num(bundle, "margin_bottom"):
            out.append(Spacer(1, _num(bundle, "margin_bottom")))
        return out

    def _inner_width(self, bundle: StyleBundle, width: float) -> float:
        return max(width - _num(bundle, "padding_left") - _num(bundle, "padding_right"), 1.0)

    def _column_widths(self, children, width: float) -> List[float]:
        """Percent widths claim their share first; the rest is split among the others."""
        shares = [_percent(self.style(child).get("width")) for child in children]
        claimed = sum(width * s for s in shares if s is not None)
        free = [s for s in shares if s is None]
        rest = max(width - claimed, 0.0) / len(free) if free else 0.0
        return [width * s if s is not None else rest for s in shares]

    def _render_within(self, node, width: float) -> List[Flowable]:
        self._avail.append(width)
        try:
            return list(self.render(node))
        finally:
            self._avail.pop()

    # ----- primitives -----
    def render_page(self, node: Page) -> DocumentPage:
        bundle = self.style(node)
        margins = (
            _num(bundle, "padding_top"),
            _num(bundle, "padding_right"),
            _num(bundle, "padding_bottom"),
            _num(bundle, "padding_left"),
        )
        width = self.page_size[0] - margins[1] - margins[3]
        flowables: List[Flowable] = []
        self.push(bundle)
        try:
            for child in node.children:
                flowables.extend(self._render_within(child, width))
        finally:
            self.pop()
        background = bundle.get("background_color")
        return DocumentPage(flowables, margins, str(background) if background else None)

    def render_view(self, node: View) -> List[Flowable]:
        bundle = self.style(node)
        width = self._avail[-1]
        inner = self._inner_width(bundle, width)
        content: List[Flowable] = []
        self.push(bundle)
        try:
            if bundle.get("flex_direction") == "row" and node.children:
                widths = self._column_widths(node.children, inner)
                cells = []
                for child, w in zip(node.children, widths):
                    cells.append(self._render_within(child, w) or "")
                row = Table([cells], colWidths=[max(w, 0.1) for w in widths], splitInRow=1)
                row.setStyle(
                    TableStyle(
                        [
                            ("LEFTPADDING", (0, 0), (-1, -1), 0),
                            ("RIGHTPADDING", (0, 0), (-1, -1), 0),
                            ("TOPPADDING", (0, 0), (-1, -1), 0),
                            ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
                            ("VALIGN", (0, 0), (-1, -1), "TOP"),
                        ]
                    )
                )
                content.append(row)
            else:
                for child in node.children:
                    content.extend(self._render_within(child, inner))
        finally:
            self.pop()
        return self._box(content, bundle, width)

    def render_input(self, node: EditableInput) -> List[Flowable]:
        bundle = self.text_style(node)
        text = escape(node.text)
        if isinstance(node, EditableTextarea):
            text = text.replace("\r", "").replace("\n", "<br/>")
        para = Paragraph(text, paragraph_style(bundle))
        return self._box([para], self.style(node), self._avail[-1])

    def render_logo(self, node: Logo) -> List[Flowable]:
        if not node.path or not Path(node.path).is_file():
            return []
        try:
            iw, ih = ImageReader(node.path).getSize()
            if iw <= 0 or ih <= 0:
                return []
            w = min(float(node.width or iw), self._avail[-1])
            img = Image(node.path, width=w, height=w * ih / iw)
        except Exception:
            logger.warning("Leaving out unreadable logo: %s", node.path)
            return []
        img.hAlign = "LEFT"
        return self._box([img], self.style(node), self._avail[-1])

    def render_action(self, node: Action) -> List[Flowable]:
        # Buttons only exist on screen
        return []
