"""Reading settings from the JSON configuration file."""

from __future__ import annotations

import json
import os
from typing import Any, Optional

from wsengine.logsys import Log, get_log

_UINT32_LIMIT = 2**32


class ConfigError(Exception):
    """The configuration could not be read or lacks a required value."""


class ConfigReader:
    """Reads values from a JSON file, re-reading it on each query."""

    def __init__(self, path: "str | os.PathLike[str]", log: Optional[Log] = None) -> None:
        self.path = os.fspath(path)
        self._log = log if log is not None else get_log()

    def _fail(self, message: str) -> ConfigError:
        self._log.error(message)
        return ConfigError(message)

    def parse_config(self) -> Any:
        """Load and return the whole JSON document."""
        if not self.path:
            raise self._fail("No config path set.")
        try:
            with open(self.path, encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError as exc:
            raise self._fail(f"Cannot open config file: {self.path}") from exc
        except (ValueError, UnicodeDecodeError) as exc:
            raise self._fail(f"JSON parse error: {exc}") from exc
        self._log.info(f"Config loaded successfully from: {self.path}")
        return data

    def _general(self) -> dict:
        data = self.parse_config()
        general = data.get("general") if isinstance(data, dict) else None
        return general if isinstance(general, dict) else {}

    def _unsigned(self, section: Any, key: str) -> int:
        if not isinstance(section, dict) or key not in section:
            raise self._fail(f"Missing '{key}' in config.")
        value = section[key]
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < _UINT32_LIMIT:
            raise self._fail(f"'{key}' must be an unsigned 32-bit integer, got {value!r}.")
        return value

    def get_port(self) -> int:
        general = self._general()
        if "communication" not in general:
            raise self._fail("Port not found in config.")
        return self._unsigned(general["communication"], "port")

    def get_log_level(self) -> int:
        general = self._general()
        if "logging" not in general:
            raise self._fail("Log level not found.")
        return self._unsigned(general["logging"], "logLevel")

    def is_debug(self) -> bool:
        general = self._general()
        if "isDebug" not in general:
            self._log.warning("isDebug not set, defaulting to false.")
            return False
        value = general["isDebug"]
        if not isinstance(value, bool):
            raise self._fail(f"'isDebug' must be a boolean, got {value!r}.")
        return value