from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging

from invoicegen.core.paths import settings_path

logger = logging.getLogger(__name__)

SETTINGS_PATH = settings_path()


@dataclass
class Settings:
	# Quiet period after the last edit before the Save PDF control is offered
	download_delay_ms: int = 500
	# File name stem used when the invoice has no title
	default_file_name: str = "invoice"
	# Remember last used folder for "Save PDF" dialog
	last_pdf_dir: Optional[str] = None
	# Open the exported file in the system viewer after saving
	open_after_export: bool = False
	dark_mode: bool = False

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "Settings":
		# Merge provided values over defaults, ignore unknown keys and values of the wrong type
		defaults = asdict(cls())
		merged: Dict[str, Any] = dict(defaults)
		for k, v in data.items():
			if k not in defaults:
				continue
			if _valid(k, v, defaults[k]):
				merged[k] = v
			else:
				logger.warning("Ignoring invalid setting %s=%r", k, v)
		return cls(**merged)

	def to_dict(self) -> Dict[str, Any]:
		return asdict(self)


def _valid(key: str, value: Any, default: Any) -> bool:
	if default is None:
		# Optional folder paths
		return value is None or isinstance(value, str)
	if type(value) is not type(default):
		return False
	if key == "download_delay_ms":
		return value >= 0
	if key == "default_file_name":
		return bool(value.strip())
	return True


def _coerce_path(path: Optional[Union[str, Path]]) -> Path:
	return Path(path) if path is not None else SETTINGS_PATH


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
	"""
	Load settings from JSON (UTF-8). A missing or unreadable file yields defaults.
	"""
	p = _coerce_path(path)
	if not p.exists():
		return Settings()

	try:
		with p.open("r", encoding="utf-8") as f:
			raw: Dict[str, Any] = json.load(f)
	except (ValueError, OSError):
		logger.warning("Ignoring unreadable settings file: %s", p)
		return Settings()

	return Settings.from_dict(raw if isinstance(raw, dict) else {})


def save_settings(settings: Settings, path: Optional[Union[str, Path]] = None) -> None:
	"""Save settings to JSON (UTF-8), creating parent dirs if needed."""
	p = _coerce_path(path)
	p.parent.mkdir(parents=True, exist_ok=True)
	tmp = p.with_suffix(p.suffix + ".tmp")
	with tmp.open("w", encoding="utf-8", newline="\n") as f:
		json.dump(settings.to_dict(), f, indent=2, ensure_ascii=False)
		f.write("\n")
	tmp.replace(p)
