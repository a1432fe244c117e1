from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import QObject, Qt, QTimer, Signal
from PySide6.QtWidgets import QFileDialog, QHBoxLayout, QLabel, QMessageBox, QPushButton, QWidget

from invoicegen.core.download_gate import DownloadGate, DownloadState
from invoicegen.core.paths import export_dir
from invoicegen.core.settings import Settings
from invoicegen.data.models import Invoice
from invoicegen.pdf.export import build_invoice_pdf_bytes, export_filename

logger = logging.getLogger(__name__)


class _PendingTimer:
    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    def stop(self) -> None:
        self._timer.stop()
        self._timer.deleteLater()


class QtScheduler:
    """Schedules one-shot callbacks on the Qt event loop with stoppable QTimers."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _PendingTimer:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.timeout.connect(callback)
        timer.timeout.connect(timer.deleteLater)
        timer.start(int(delay_ms))
        return _PendingTimer(timer)


class DownloadPdf(QWidget):
    """Save PDF control, shown only after the invoice has been quiet for a moment.

    Emits:
      - saved(str): path of the written PDF
    """

    saved = Signal(str)

    def __init__(self, invoice: Invoice, settings: Optional[Settings] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.settings = settings or Settings()
        self._invoice = invoice

        h = QHBoxLayout(self)
        h.setContentsMargins(0, 0, 0, 0)
        self.loading = QLabel("Preparing PDF…")
        self.loading.setObjectName("DownloadLoading")
        self.button = QPushButton("Save PDF")
        self.button.setObjectName("DownloadPdf")
        self.button.setToolTip("Save PDF")
        self.button.setAccessibleName("Save PDF")
        self.button.setCursor(Qt.PointingHandCursor)
        self.button.clicked.connect(self.save)
        h.addWidget(self.loading)
        h.addWidget(self.button)

        self.gate = DownloadGate(QtScheduler(self), self.settings.download_delay_ms, self._on_state)
        self._on_state(self.gate.state)
        self.gate.bind(invoice)

    @property
    def invoice(self) -> Invoice:
        return self._invoice

    def set_invoice(self, invoice: Invoice) -> None:
        self._invoice = invoice
        self.gate.bind(invoice)

    def _on_state(self, state: DownloadState) -> None:
        ready = state is DownloadState.READY
        self.button.setVisible(ready)
        self.loading.setVisible(not ready)

    def file_name(self) -> str:
        return export_filename(self._invoice, self.settings.default_file_name)

    def write_pdf(self, path: str | Path) -> Path:
        """Encode the current invoice and write it to *path*."""
        out = Path(path)
        logger.info("Building PDF: %s", out)
        out.write_bytes(build_invoice_pdf_bytes(self._invoice))
        logger.info("PDF built: %s", out)
        return out

    def save(self) -> Optional[Path]:
        if not self.gate.ready:
            return None
        start = export_dir(self.settings.last_pdf_dir) / self.file_name()
        path, _ = QFileDialog.getSaveFileName(self, "Save PDF", str(start), "PDF files (*.pdf)")
        if not path:
            return None
        try:
            out = self.write_pdf(path)
        except Exception as e:
            logger.exception("Could not generate the PDF: %s", path)
            QMessageBox.critical(self, "PDF failed", f"Could not generate the PDF.\n\nDetails: {e}")
            return None
        self.settings.last_pdf_dir = str(out.parent)
        self.saved.emit(str(out))
        return out
