from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from invoicegen.components.invoice_page import invoice_page
from invoicegen.components.primitives import EditableInput, Logo, iter_fields
from invoicegen.data.models import Invoice
from invoicegen.data.store import InvoiceStore
from invoicegen.render.interactive import InteractiveRenderer, set_logo, sync_field

logger = logging.getLogger(__name__)


class InvoiceEditor(QWidget):
    """The invoice layout rendered as an editable form.

    Edits go to the store; the store's new Invoice is projected back onto
    the existing widgets. Adding or removing a product line rebuilds the
    page because the layout itself changes.
    """

    def __init__(self, store: InvoiceStore, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.store = store
        self.page: Optional[QWidget] = None
        self.fields: Dict[str, QWidget] = {}

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

        self.rebuild()
        self.store.changed.connect(self._on_changed)
        self.store.linesChanged.connect(lambda _n: self.rebuild())

    def rebuild(self) -> None:
        renderer = InteractiveRenderer()
        page = invoice_page(self.store.invoice, pdf_mode=False, store=self.store).render(False, renderer)
        if self.page is not None:
            self._layout.removeWidget(self.page)
            self.page.setParent(None)
            self.page.deleteLater()
        self.page = page
        self.fields = renderer.fields
        self._layout.addWidget(page)
        logger.debug("Invoice form built with %s fields", len(self.fields))

    def _on_changed(self, invoice: Invoice) -> None:
        layout = invoice_page(invoice, pdf_mode=False)
        for node in iter_fields(layout):
            widget = self.fields.get(node.name)
            if widget is None:
                # Line count changed; linesChanged will rebuild
                continue
            if isinstance(node, Logo):
                if isinstance(widget, QLabel) and widget.property("logoPath") != node.path:
                    set_logo(widget, node.path, node.width)
            elif isinstance(node, EditableInput):
                sync_field(widget, node.text)

    def field(self, name: str) -> Optional[QWidget]:
        return self.fields.get(name)
