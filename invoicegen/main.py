from __future__ import annotations

# Allow running this file directly (python invoicegen/main.py) by ensuring the project root is on sys.path
import os
import sys
if __package__ in (None, ""):
    sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import logging

from PySide6.QtGui import QShortcut, QKeySequence
from PySide6.QtWidgets import QApplication

from invoicegen.core.launch import open_file
from invoicegen.core.settings import load_settings, save_settings
from invoicegen.ui_main import create_main_window

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication.instance() or QApplication(sys.argv)
    settings = load_settings()

    # The root invoice is not loaded from anywhere; the editor starts from defaults
    data = None
    win = create_main_window(data, settings)

    def on_saved(path: str) -> None:
        # Remember the folder for the next Save PDF dialog
        try:
            save_settings(win.settings)
        except OSError:
            logger.exception("Could not save settings")
        if win.settings.open_after_export:
            open_file(path)

    win.download.saved.connect(on_saved)

    save_sc = QShortcut(QKeySequence.Save, win)
    save_sc.activated.connect(win.download.save)

    logger.info("Invoice Generator started")
    win.show()
    app.exec()


if __name__ == "__main__":
    main()
