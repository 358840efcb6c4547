import json
import os
from pathlib import Path
from typing import Dict, Any, Mapping, Optional

APP_DIR_NAME = "fp_todo"


class ConfigError(Exception):
    """Raised when the storage root cannot be determined or created"""


class Config:
    def __init__(self, environ: Optional[Mapping[str, str]] = None,
                 data_dir: Optional[str] = None, local: bool = False):
        """Resolve the storage root once and load settings stored beside the lists"""
        self.environ = os.environ if environ is None else environ
        self.data_dir = self._resolve_data_dir(data_dir, local)
        self.config_file = self.data_dir / "config.json"

        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Could not create data directory {self.data_dir}: {e}") from e

        self.default_config = {
            "report_unrecognized": False,  # silently ignore argument shapes we don't know
            "verbose": False
        }

        self.config = self.load_config()

    def _resolve_data_dir(self, data_dir: Optional[str], local: bool) -> Path:
        if data_dir:
            return Path(data_dir).expanduser()
        if local:
            return Path.cwd() / ".todo"

        xdg = self.environ.get("XDG_DATA_HOME")
        if xdg:
            return Path(xdg) / APP_DIR_NAME

        home = self.environ.get("HOME")
        if home:
            return Path(home) / ".local" / "share" / APP_DIR_NAME

        raise ConfigError("Could not determine data directory: neither XDG_DATA_HOME nor HOME is set")

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file or fall back to defaults"""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    return {**self.default_config, **stored}
            except (json.JSONDecodeError, UnicodeDecodeError, IOError):
                pass
        return self.default_config.copy()

    def get(self, key: str, default=None):
        """Get configuration value"""
        return self.config.get(key, default)
