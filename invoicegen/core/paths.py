from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def user_writable_dir() -> Path:
    """Directory for user-writable files such as settings.json.

    - Bundled executable: the directory containing the executable.
    - Source checkout: the project root.
    """
    if is_frozen():
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def settings_path() -> Path:
    return user_writable_dir() / "settings.json"


def export_dir(last_dir: Optional[str] = None) -> Path:
    """Folder proposed by the Save PDF dialog.

    The last folder used wins while it still exists, then ~/Documents, then home.
    """
    if last_dir:
        p = Path(last_dir)
        if p.is_dir():
            return p
    docs = Path.home() / "Documents"
    return docs if docs.is_dir() else Path.home()
