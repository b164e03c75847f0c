from __future__ import annotations
import json
from pathlib import Path

_DEFAULTS = {
    "default_recording_type": "ALL_32",
    "strict_legacy_addresses": False,
    "use_image_notes": True,
    "log_to_stdout": True,
}


class AppConfig:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path.home() / ".config" / "fxgrid" / "config.json"
        self.default_recording_type: str = _DEFAULTS["default_recording_type"]
        self.strict_legacy_addresses: bool = _DEFAULTS["strict_legacy_addresses"]
        self.use_image_notes: bool = _DEFAULTS["use_image_notes"]
        self.log_to_stdout: bool = _DEFAULTS["log_to_stdout"]
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text())
            for key in _DEFAULTS:
                if key in data:
                    setattr(self, key, data[key])
        except (json.JSONDecodeError, OSError):
            pass

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = {key: getattr(self, key) for key in _DEFAULTS}
        self._path.write_text(json.dumps(data, indent=2))
