from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from invoicegen.core.settings import Settings, load_settings
from invoicegen.data.models import Invoice
from invoicegen.data.store import InvoiceStore
from invoicegen.styles.themes import dark_qss, light_qss
from invoicegen.widgets.download import DownloadPdf
from invoicegen.widgets.invoice_editor import InvoiceEditor

PAGE_WIDTH_PX = 700


class MainWindow(QMainWindow):
    """Page shell: heading, the editable invoice and the Save PDF control."""

    def __init__(self, data: Optional[Invoice] = None, settings: Optional[Settings] = None) -> None:
        super().__init__()
        QApplication.setStyle("Fusion")
        self.setWindowTitle("Invoice Generator")
        self.settings: Settings = settings or load_settings()

        # Root data; nothing loads it yet, so the store seeds the default labels
        self.store = InvoiceStore(data, self)

        root = QWidget(self)
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(16, 16, 16, 16)
        root_layout.setSpacing(12)

        header = QHBoxLayout()
        header.addStretch(1)
        title = QLabel("Invoice Generator")
        title.setObjectName("Heading")
        header.addWidget(title)
        header.addStretch(1)
        self.download = DownloadPdf(self.store.invoice, self.settings)
        header.addWidget(self.download)
        root_layout.addLayout(header)

        self.editor = InvoiceEditor(self.store)
        self.editor.setFixedWidth(PAGE_WIDTH_PX)
        holder = QWidget()
        holder_layout = QHBoxLayout(holder)
        holder_layout.addStretch(1)
        holder_layout.addWidget(self.editor, 0, Qt.AlignTop)
        holder_layout.addStretch(1)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setWidget(holder)
        root_layout.addWidget(self.scroll, 1)

        self.setCentralWidget(root)
        self.store.changed.connect(self.download.set_invoice)
        self.resize(PAGE_WIDTH_PX + 120, 900)

        if self.settings.dark_mode:
            self.apply_dark_theme()
        else:
            self.apply_light_theme()

    # Theme helpers
    def apply_light_theme(self) -> None:
        self.setStyleSheet(light_qss())

    def apply_dark_theme(self) -> None:
        self.setStyleSheet(dark_qss())


def create_main_window(data: Optional[Invoice] = None, settings: Optional[Settings] = None) -> MainWindow:
    return MainWindow(data, settings)
