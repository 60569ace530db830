"""Load run settings from ``advent_of_code.toml``.

Example::

    [output]
    log_level = "INFO"
    log_file = "logs/advent_of_code.log"

    [run]
    debug = false
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_FILE = Path("advent_of_code.toml")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Path | None = None
    debug: bool = False


def load_settings(path: str | Path | None = None) -> Settings:
    """Read settings from ``path``, or from the default file if it exists."""
    if path is None:
        if not DEFAULT_CONFIG_FILE.exists():
            return Settings()
        path = DEFAULT_CONFIG_FILE

    path = Path(path)
    try:
        with open(path, "rb") as f:
            cfg = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    o = cfg.get("output", {})
    r = cfg.get("run", {})

    log_level = str(o.get("log_level", "INFO")).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log_level {log_level!r} in {path}")

    log_file = o.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        raise ConfigError(f"log_file must be a string in {path}")

    debug = r.get("debug", False)
    if not isinstance(debug, bool):
        raise ConfigError(f"debug must be true or false in {path}")

    return Settings(
        log_level=log_level,
        log_file=Path(log_file) if log_file else None,
        debug=debug,
    )
