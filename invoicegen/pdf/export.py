from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Union

from reportlab.lib import colors
from reportlab.platypus import SimpleDocTemplate

from invoicegen.components.invoice_page import render_invoice_page
from invoicegen.data.models import Invoice, initial_invoice
from invoicegen.render.document import PAGE_SIZE, DocumentPage, DocumentRenderer
from invoicegen.styles.compose import StyleComposer

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "invoice"


def export_filename(invoice: Optional[Invoice], default: str = DEFAULT_FILE_NAME) -> str:
    """``<lower-cased invoice title>.pdf``, or ``<default>.pdf`` when the title is empty."""
    title = invoice.invoice_title if invoice is not None else ""
    stem = title.lower() if title else (default or DEFAULT_FILE_NAME)
    return f"{stem}.pdf"


def build_invoice_pdf_bytes(invoice: Optional[Invoice], composer: Optional[StyleComposer] = None) -> bytes:
    """Render the invoice layout in document mode and encode it as a PDF."""
    inv = invoice if invoice is not None else initial_invoice()
    page: DocumentPage = render_invoice_page(inv, pdf_mode=True, renderer=DocumentRenderer(composer, PAGE_SIZE))
    top, right, bottom, left = page.margins

    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=PAGE_SIZE,
        topMargin=top,
        rightMargin=right,
        bottomMargin=bottom,
        leftMargin=left,
        title=inv.invoice_title or "Invoice",
        author=inv.company_name or inv.name or "Invoice Generator",
    )

    def _paint_background(canvas, _doc) -> None:
        if page.background:
            canvas.saveState()
            canvas.setFillColor(colors.HexColor(page.background))
            canvas.rect(0, 0, PAGE_SIZE[0], PAGE_SIZE[1], stroke=0, fill=1)
            canvas.restoreState()

    doc.build(list(page.flowables), onFirstPage=_paint_background, onLaterPages=_paint_background)
    data = buf.getvalue()
    logger.info("Rendered invoice %r to PDF (%s bytes)", inv.invoice_title, len(data))
    return data


def build_invoice_pdf(out_path: Union[str, Path], invoice: Optional[Invoice], composer: Optional[StyleComposer] = None) -> Path:
    """Write the invoice PDF to *out_path*, creating parent folders. Returns the path."""
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    data = build_invoice_pdf_bytes(invoice, composer)
    out.write_bytes(data)
    logger.info("PDF written: %s", out)
    return out
