from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on sys.path when running this script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from invoicegen.data.models import ProductLine, initial_invoice
from invoicegen.pdf.export import build_invoice_pdf, export_filename

# Generates a sample invoice PDF for README/demo purposes.


def main() -> None:
    out_dir = ROOT / "samples"
    invoice = initial_invoice()
    invoice = invoice.with_field("company_name", "Sample Studio").with_field("client_name", "(Customer Name)")
    invoice = invoice.with_line_removed(1).with_line_added(
        ProductLine(description="Landing page copy", quantity="3", rate="45.50")
    )
    out = build_invoice_pdf(out_dir / export_filename(invoice), invoice)
    print(f"Wrote sample to: {out}")


if __name__ == "__main__":
    main()
