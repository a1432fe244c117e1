from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtCore import QObject, Signal

from invoicegen.data.models import Invoice, initial_invoice

logger = logging.getLogger(__name__)


class InvoiceStore(QObject):
    """Owns the current Invoice reference.

    Every edit swaps in a new Invoice and emits ``changed`` with it, so
    listeners can compare references to detect a change.

    Emits:
      - changed(object): the new Invoice
      - linesChanged(int): the new number of product lines (add/remove only)
    """

    changed = Signal(object)
    linesChanged = Signal(int)

    def __init__(self, invoice: Optional[Invoice] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        # An unpopulated root starts from the default labels
        self._invoice: Invoice = invoice if invoice is not None else initial_invoice()

    @property
    def invoice(self) -> Invoice:
        return self._invoice

    def replace(self, invoice: Invoice) -> None:
        old_lines = len(self._invoice.product_lines)
        self._invoice = invoice
        self.changed.emit(invoice)
        if len(invoice.product_lines) != old_lines:
            self.linesChanged.emit(len(invoice.product_lines))

    def set_field(self, name: str, value: Any) -> None:
        self.replace(self._invoice.with_field(name, value))

    def set_line_field(self, index: int, name: str, value: Any) -> None:
        self.replace(self._invoice.with_line_field(index, name, value))

    def add_line(self) -> None:
        logger.debug("Adding product line #%s", len(self._invoice.product_lines) + 1)
        self.replace(self._invoice.with_line_added())

    def remove_line(self, index: int) -> None:
        logger.debug("Removing product line #%s", index + 1)
        self.replace(self._invoice.with_line_removed(index))
