########## ini_config.py

import logging
import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from urlkey.services.exceptions import InvalidArgument

INI_DEFAULT_NAME = "UrlKey.ini"


@dataclass(frozen=True)
class AppSettings:
    default_limit: Optional[int]
    max_limit: int

    log_level: str

    flask_host: str
    flask_port: int
    flask_debug: bool


class IniConfig:
    """
    Adapter around ConfigParser.
    Keeps INI handling out of the extractor/normalizer code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @property
    def ini_path(self) -> Path:
        return self._ini_path

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_positive_int(self, section: str, key: str, fallback: Optional[int]) -> Optional[int]:
        """
        Reads an optional positive integer. An empty value means "not set".
        """
        raw = (self._cfg.get(section, key, fallback="") or "").strip()
        if not raw:
            return fallback
        try:
            value = int(raw)
        except ValueError as e:
            raise InvalidArgument(f"{section}.{key} must be an integer: {raw!r}", code="INVALID_CONFIG") from e
        if value <= 0:
            raise InvalidArgument(f"{section}.{key} must be greater than 0: {value}", code="INVALID_CONFIG")
        return value

    def load_settings(self) -> AppSettings:
        # Extraction
        default_limit = self._cfg_positive_int("extraction", "default_limit", fallback=None)
        max_limit = self._cfg_positive_int("extraction", "max_limit", fallback=1000)

        # Logging
        log_level = (self._cfg.get("logging", "level", fallback="INFO") or "").strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown logging level in INI: {log_level}")

        # Flask
        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        # Validate
        if default_limit is not None and default_limit > max_limit:
            raise InvalidArgument(
                f"extraction.default_limit ({default_limit}) exceeds extraction.max_limit ({max_limit})",
                code="INVALID_CONFIG",
            )

        return AppSettings(
            default_limit=default_limit,
            max_limit=max_limit,
            log_level=log_level,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
        )
