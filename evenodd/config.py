"""Reading the key=value configuration file."""

from __future__ import annotations

import os
from dataclasses import dataclass

MAX_THREAD_NUM = 1000
MAX_NUM_PER_THREAD = 1000000

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ConfigError(ValueError):
    """Raised when the configuration file cannot be read or is invalid."""


@dataclass
class Config:
    """How many worker threads to run and how many numbers each one gets."""

    numbers_per_thread: int = 0
    thread_num: int = 0


def _is_numeric_text(value: str) -> bool:
    return bool(value) and all(ch in _DIGITS or ch in _SPACE for ch in value)


def _to_number(value: str, limit: int, name: str) -> int:
    if not all(ch in _DIGITS for ch in value):
        raise ConfigError(f"Invalid number for {name}.")
    number = int(value)
    if number > limit:
        raise ConfigError(f"Invalid number for {name}.")
    return number


def parse_line(line: str, config: Config) -> None:
    """Apply one ``key = value`` line to ``config``."""
    tokens = [token for token in line.split("=") if token]
    if len(tokens) < 2:
        raise ConfigError("Occurred while parsing file")
    key = tokens[0]
    value = tokens[1].strip(_SPACE)

    if key in ("numbers_per_thread", "numbers_per_thread ") and _is_numeric_text(value):
        config.numbers_per_thread = _to_number(
            value, MAX_NUM_PER_THREAD, "numbers_per_thread"
        )
        return
    if key in ("thread_num", "thread_num ") and _is_numeric_text(value):
        config.thread_num = _to_number(value, MAX_THREAD_NUM, "thread_num")
        return
    raise ConfigError("Invalid line found in config file.")


def parse_file(path: str | os.PathLike[str]) -> Config:
    """Read a configuration file and return the settings it holds."""
    try:
        with open(path, "rb") as handle:
            raw_lines = handle.readlines()
    except OSError as exc:
        raise ConfigError("While opening config file.") from exc

    if not raw_lines:
        raise ConfigError("Config file is empty.")

    config = Config()
    for raw in raw_lines:
        parse_line(raw.decode("utf-8", errors="surrogateescape"), config)
    return config