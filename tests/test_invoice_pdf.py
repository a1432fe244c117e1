from __future__ import annotations

import io
import math
import re
from pathlib import Path

from pypdf import PdfReader

from invoicegen.data.models import Invoice, ProductLine, initial_invoice
from invoicegen.pdf.export import build_invoice_pdf, build_invoice_pdf_bytes


def _a4_size_points() -> tuple[float, float]:
    # ReportLab A4 in points
    return (595.2755905511812, 841.8897637795277)


def _text(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    return "\n".join((p.extract_text() or "") for p in reader.pages)


def test_invoice_pdf_single_a4_page(tmp_path: Path) -> None:
    inv = (
        initial_invoice()
        .with_field("company_name", "Acme Services")
        .with_field("client_name", "Test Customer")
        .with_field("invoice_date", "09-08-2025")
    )

    out_pdf = build_invoice_pdf(tmp_path / "nested" / "invoice.pdf", inv)
    assert out_pdf.exists()

    reader = PdfReader(str(out_pdf))
    assert len(reader.pages) == 1
    box = reader.pages[0].mediabox
    width = float(box.right - box.left)
    height = float(box.top - box.bottom)
    a4w, a4h = _a4_size_points()
    assert math.isclose(width, a4w, rel_tol=0, abs_tol=1.0)
    assert math.isclose(height, a4h, rel_tol=0, abs_tol=1.0)

    text = reader.pages[0].extract_text() or ""
    for expected in ("INVOICE", "Acme Services", "Test Customer", "INV-12", "09-08-2025", "Brochure Design"):
        assert expected in text
    # Sub total carries the currency; amounts are quantity x rate
    assert "$200.00" in text
    assert re.search(r"220\.00", text) is not None
    assert "Qty" in text and "Rate" in text and "Amount" in text


def test_pdf_has_no_on_screen_controls() -> None:
    text = _text(build_invoice_pdf_bytes(initial_invoice()))
    assert "Add Line Item" not in text
    assert "✕" not in text


def test_negative_and_zero_lines_render_their_product() -> None:
    inv = initial_invoice().with_line_added(ProductLine(description="Refund", quantity="-2", rate="12.50"))
    text = _text(build_invoice_pdf_bytes(inv))
    assert "-25.00" in text
    assert "0.00" in text


def test_empty_invoice_still_encodes() -> None:
    data = build_invoice_pdf_bytes(Invoice())
    assert data.startswith(b"%PDF")
    assert len(PdfReader(io.BytesIO(data)).pages) == 1


def test_document_metadata_uses_invoice_title() -> None:
    reader = PdfReader(io.BytesIO(build_invoice_pdf_bytes(initial_invoice().with_field("invoice_title", "INV-77"))))
    assert reader.metadata is not None
    assert reader.metadata.title == "INV-77"


def test_long_notes_flow_onto_further_pages() -> None:
    notes = "\n".join(f"Term line {i}" for i in range(120))
    data = build_invoice_pdf_bytes(initial_invoice().with_field("notes", notes))
    reader = PdfReader(io.BytesIO(data))
    assert len(reader.pages) >= 2
    text = _text(data)
    assert "Term line 0" in text
    assert "Term line 119" in text


def test_long_line_description_flows_onto_further_pages() -> None:
    description = "\n".join(f"Item detail {i}" for i in range(120))
    data = build_invoice_pdf_bytes(initial_invoice().with_line_field(0, "description", description))
    assert len(PdfReader(io.BytesIO(data)).pages) >= 2
    text = _text(data)
    assert "Item detail 0" in text
    assert "Item detail 119" in text
    assert "220.00" in text


def test_unreadable_logo_is_left_out(tmp_path: Path) -> None:
    bogus = tmp_path / "logo.png"
    bogus.write_bytes(b"not an image")
    data = build_invoice_pdf_bytes(initial_invoice().with_field("logo", str(bogus)))
    assert data.startswith(b"%PDF")
    assert "INVOICE" in _text(data)
