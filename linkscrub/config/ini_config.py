########## ini_config.py

import logging
import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path

from linkscrub.services.redirect_resolver import DEFAULT_USER_AGENT

INI_DEFAULT_NAME = "linkscrub.ini"
INI_ENV_VAR = "LINKSCRUB_INI"


@dataclass(frozen=True)
class AppSettings:
    timeout_seconds: float
    max_redirects: int
    user_agent: str

    log_level: str

    flask_host: str
    flask_port: int
    flask_debug: bool


class IniConfig:
    """
    Adapter around ConfigParser.
    Keeps INI handling out of your app/service code.
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
        ini_raw = (os.getenv(INI_ENV_VAR) or "").strip()
        # If LINKSCRUB_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _get_str(self, section: str, key: str, default: str) -> str:
        return (self._cfg.get(section, key, fallback=default) or "").strip() or default

    def _get_typed(self, section: str, key: str, getter, default):
        """
        Reads a typed value; a value that does not parse is reported with its key.
        """
        try:
            return getter(section, key, fallback=default)
        except ValueError as e:
            raise ValueError(f"{section}.{key} is invalid: {e}") from e

    def load_settings(self) -> AppSettings:
        # Resolver
        timeout_seconds = self._get_typed("resolver", "timeout_seconds", self._cfg.getfloat, 10.0)
        max_redirects = self._get_typed("resolver", "max_redirects", self._cfg.getint, 20)
        user_agent = self._get_str("resolver", "user_agent", DEFAULT_USER_AGENT)

        # Logging
        log_level = self._get_str("logging", "level", "INFO").upper()

        # Flask
        flask_host = self._get_str("flask", "host", "127.0.0.1")
        flask_port = self._get_typed("flask", "port", self._cfg.getint, 5000)
        flask_debug = self._get_typed("flask", "debug", self._cfg.getboolean, False)

        # Validate
        if timeout_seconds <= 0:
            raise ValueError(f"resolver.timeout_seconds must be positive, got {timeout_seconds}")
        if max_redirects < 0:
            raise ValueError(f"resolver.max_redirects must not be negative, got {max_redirects}")
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"logging.level is not a known level: {log_level}")

        return AppSettings(
            timeout_seconds=timeout_seconds,
            max_redirects=max_redirects,
            user_agent=user_agent,
            log_level=log_level,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
        )
