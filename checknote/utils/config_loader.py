"""
Configuration Loader for Checknote
Handles loading and managing application configuration
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional


def get_default_data_dir() -> Path:
    """Data directory: CHECKNOTE_HOME if set, else ~/.checknote"""
    if env_home := os.environ.get("CHECKNOTE_HOME"):
        return Path(env_home)
    return Path.home() / ".checknote"


def load_env_file(env_path: Path) -> Dict[str, str]:
    """
    Load environment variables from a .env file into a dictionary.

    Parses lines of the form KEY=VALUE, ignoring blank lines and `#`
    comments. Values are split on the first `=` and surrounding quotes are
    stripped. A missing or unreadable file yields an empty dict.

    Parameters:
        env_path (Path): Path to the .env file to read.

    Returns:
        Dict[str, str]: A mapping of variable names to their string values.
    """
    env_vars = {}
    if env_path.exists():
        try:
            with open(env_path, 'r', encoding='utf-8') as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        key, value = line.split('=', 1)
                        # Remove quotes if present
                        value = value.strip().strip('"').strip("'")
                        env_vars[key.strip()] = value
        except OSError as e:
            from .logger import log_error
            log_error(f"Error loading .env file: {e}")
    return env_vars


def coerce_value(value: str, kind: type = str) -> Any:
    """
    Convert a string from the environment to `kind` (bool, int or str).

    Raises ValueError when the string does not fit the type.
    """
    if kind is bool:
        lowered = value.strip().lower()
        if lowered in ('1', 'true', 'yes', 'on'):
            return True
        if lowered in ('0', 'false', 'no', 'off'):
            return False
        raise ValueError(f"not a boolean: {value!r}")
    if kind is int:
        return int(value)
    return value


class ConfigLoader:
    """Loads and manages application configuration"""

    # .env variable -> (config key, value type)
    ENV_MAPPINGS = {
        'DEBUG': ('app.debug', bool),
        'LOG_LEVEL': ('logging.level', str),
        'NOTES_DATA_DIR': ('storage.data_dir', str),
        'NOTES_SLOT': ('storage.slot', str),
        'WINDOW_WIDTH': ('ui.window_width', int),
        'WINDOW_HEIGHT': ('ui.window_height', int),
    }

    def __init__(self, config_path: Optional[Path] = None,
                 env_path: Optional[Path] = None):
        """
        Initialize the ConfigLoader.

        Parameters:
            config_path (Optional[Path]): Path to the JSON config file.
                Defaults to "<data dir>/app_config.json".
            env_path (Optional[Path]): Path to a dotenv file. Defaults to
                ".env" in the current working directory.
        """
        self.config_path = config_path or get_default_data_dir() / "app_config.json"
        self.env_path = env_path or Path.cwd() / ".env"
        self.config_data: Dict[str, Any] = {}
        self.env_vars: Dict[str, str] = {}
        self.load_config()

    @staticmethod
    def default_config() -> Dict[str, Any]:
        return {
            "app": {
                "name": "Notes",
                "version": "1.0.0",
                "debug": False
            },
            "storage": {
                "data_dir": str(get_default_data_dir()),
                "file_name": "storage.json",
                "slot": "notes"
            },
            "logging": {
                "level": "INFO"
            },
            "ui": {
                "window_width": 420,
                "window_height": 720
            }
        }

    def load_config(self) -> None:
        """
        Load configuration from the config file and apply .env overrides.

        A missing file is replaced by the defaults, which are then written
        out. An unreadable or malformed file also falls back to the defaults.
        Sections missing from the file are filled in from the defaults.
        """
        self.env_vars = load_env_file(self.env_path)

        try:
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("config root must be an object")
                self.config_data = self._merge_defaults(loaded)
            else:
                self.create_default_config()
        except (OSError, ValueError) as e:
            from .logger import log_error
            log_error(f"Error loading config: {e}")
            self.config_data = self.default_config()

        self._apply_env_overrides()

    def _merge_defaults(self, loaded: Dict[str, Any]) -> Dict[str, Any]:
        merged = self.default_config()
        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    def _apply_env_overrides(self) -> None:
        """
        Apply known .env variables onto the in-memory configuration.

        Values are coerced to the mapped type and stored without saving,
        so overrides never leak into the config file. A value of the wrong
        type is logged and ignored.
        """
        for env_key, (config_key, kind) in self.ENV_MAPPINGS.items():
            if env_key not in self.env_vars:
                continue
            try:
                value = coerce_value(self.env_vars[env_key], kind)
            except ValueError as e:
                from .logger import log_error
                log_error(f"Ignoring {env_key} from .env: {e}")
                continue
            self.set(config_key, value, save=False)

    def create_default_config(self) -> None:
        """Reset to the built-in defaults and persist them."""
        self.config_data = self.default_config()
        self.save_config()

    def save_config(self) -> None:
        """
        Persist the current configuration to the config file as indented
        JSON. Failures are logged and not propagated.
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.config_data, f, indent=4)
        except OSError as e:
            from .logger import log_error
            log_error(f"Error saving config: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Return a configuration value by dot-notated path (e.g. "app.name"),
        or `default` if any segment is missing.
        """
        value = self.config_data

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """
        Set a configuration value by dot-notated path, creating
        intermediate sections as needed.
        """
        keys = key.split('.')
        config = self.config_data

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        if save:
            self.save_config()

    @property
    def data_dir(self) -> Path:
        return Path(self.get("storage.data_dir", str(get_default_data_dir())))

    @property
    def storage_path(self) -> Path:
        return self.data_dir / self.get("storage.file_name", "storage.json")

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"
