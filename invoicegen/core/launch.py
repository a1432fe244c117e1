import logging
import os
import subprocess
import sys

logger = logging.getLogger(__name__)


def open_file(path):
        """Open *path* in the default viewer. Returns False when that fails."""
        try:
                if sys.platform == "win32":
                        os.startfile(path)
                elif sys.platform == "darwin":
                        subprocess.Popen(["open", path])
                else:
                        subprocess.Popen(["xdg-open", path])
                return True
        except Exception:
                logger.exception("Failed to open file: %s", path)
                return False
