from __future__ import annotations
"""Logging for the scraper.

    log = Logger.bind(__name__)
    log.info(f"parsed {kv(programs=3, located=4)}")

Console lines carry no timestamp and are coloured per level. A dictConfig
file replaces the console setup when one is found (see setup_logging).
"""
import json
import logging
import os
import sys
import time
from logging.config import dictConfig
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from colorama import init as colorama_init, Fore, Style


CONSOLE_FORMAT = "[ %(levelname)5s ] %(name)s : %(message)s"
CONFIG_FILENAME = "log.config.json"
CONFIG_ENV = "LOG_CONFIG"

LEVEL_COLORS: Dict[int, str] = {
    logging.DEBUG: Style.DIM + Fore.CYAN,
    logging.INFO: Style.NORMAL + Fore.GREEN,
    logging.WARNING: Style.NORMAL + Fore.YELLOW,
    logging.ERROR: Style.BRIGHT + Fore.RED,
    logging.CRITICAL: Style.BRIGHT + Fore.RED,
}


class ColorFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        line = super().format(record)
        prefix = LEVEL_COLORS.get(record.levelno)
        return f"{prefix}{line}{Style.RESET_ALL}" if prefix else line


def kv(**fields: Any) -> str:
    """'a=1 b=x' in argument order; the message style used across the package."""
    return " ".join(f"{k}={v}" for k, v in fields.items())


def _config_candidates(config_path: Optional[Path]) -> List[Path]:
    paths = []
    if config_path:
        paths.append(Path(config_path))
    if os.environ.get(CONFIG_ENV):
        paths.append(Path(os.environ[CONFIG_ENV]))
    paths.append(Path.cwd() / CONFIG_FILENAME)
    paths.append(Path(__file__).resolve().parent.parent / CONFIG_FILENAME)
    return paths


def _console(level: int) -> None:
    colorama_init()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ColorFormatter(fmt=CONSOLE_FORMAT))
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)


def setup_logging(level: int = logging.INFO, config_path: Optional[Path] = None) -> str:
    """Configure the root logger and return where the setup came from.

    Order: config_path, $LOG_CONFIG, ./log.config.json, project root
    log.config.json, then the coloured console handler ("console").
    The level argument overrides the file's root level.
    """
    for p in _config_candidates(config_path):
        if not p.is_file():
            continue
        try:
            with p.open('r', encoding='utf-8') as f:
                dictConfig(json.load(f))
        except (OSError, ValueError, TypeError) as e:
            print(f"[logging] config load fail path={p} error={e}", file=sys.stderr)
            continue
        logging.getLogger().setLevel(level)
        logging.getLogger(__name__).debug(f"logging config loaded path={p}")
        return str(p)
    _console(level)
    return "console"


class Logger:
    """Module-bound logger: warn/fatal aliases and a timing helper."""

    def __init__(self, name: Optional[str] = None):
        self._logger = logging.getLogger(name or __name__)

    @staticmethod
    def bind(name: str) -> "Logger":
        return Logger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str) -> None:
        self._logger.debug(msg)

    def info(self, msg: str) -> None:
        self._logger.info(msg)

    def warn(self, msg: str) -> None:  # noqa: D401
        self._logger.warning(msg)

    def error(self, msg: str) -> None:
        self._logger.error(msg)

    def fatal(self, msg: str) -> None:
        self._logger.critical(msg)

    def exception(self, msg: str) -> None:
        self._logger.exception(msg)

    def time_block(self, label: str) -> Callable[[], float]:
        """Start a timer; calling the result logs and returns elapsed ms.

            done = log.time_block("page fetch")
            ...
            done()
        """
        start = time.perf_counter()

        def _done() -> float:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            self.debug(f"{label} elapsed_ms={elapsed_ms:.1f}")
            return elapsed_ms

        return _done


__all__ = ["Logger", "setup_logging", "ColorFormatter", "kv"]
