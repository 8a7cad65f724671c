"""Command-line argument validation."""

from __future__ import annotations

import enum
from collections.abc import Sequence


class Mode(enum.Enum):
    """What the program should do after its arguments have been checked."""

    HELP = "help"
    RUN = "run"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


_HELP_FLAGS = ("-h", "--help")
_FILE_FLAGS = ("-f", "--file")


def _check_extension(path: str) -> None:
    dot = path.rfind(".")
    if dot == -1:
        raise ArgumentError("No extension found in the filename.")
    if path[dot:] != ".txt":
        raise ArgumentError("Invalid extension found in the filename.")


def _check_readable(path: str) -> None:
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise ArgumentError("Nonexistent or invalid file.") from exc


def check_args(argv: Sequence[str]) -> Mode:
    """Validate the arguments (without the program name) and return the mode.

    Accepted forms are ``-h``/``--help`` alone, or ``-f``/``--file`` followed
    by the path of an existing ``.txt`` file.
    """
    if len(argv) == 1:
        if argv[0] in _HELP_FLAGS:
            return Mode.HELP
        raise ArgumentError("Invalid parameter.")
    if len(argv) == 2:
        flag, path = argv
        if flag not in _FILE_FLAGS:
            raise ArgumentError("Invalid parameter.")
        _check_extension(path)
        _check_readable(path)
        return Mode.RUN
    raise ArgumentError("Invalid number of parameters.")