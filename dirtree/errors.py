"""Error taxonomy shared by the walker, renderer and front door.

Directory access failures are recoverable and rendered in place.
Everything else that goes wrong while listing is fatal for the run.
"""

from __future__ import annotations

import errno

OUT_OF_MEMORY_MESSAGE = "Out of memory."
NAME_LOOKUP_MESSAGE = "Error on getpwuid /getgrgid."
UNKNOWN_ERROR_MESSAGE = "quit process"

ACCESS_ERROR_MESSAGES: dict[int, str] = {
    errno.EACCES: "Permission denied",
    errno.EPERM: "Permission denied",
    errno.ENOENT: "No such file or directory",
    errno.ENOTDIR: "Not a directory",
}


class FatalError(RuntimeError):
    """Unrecoverable condition; the front door turns it into a failing exit."""


def access_error_message(exc: OSError) -> str | None:
    """Return display text for recoverable directory access errors.

    Returns ``None`` when ``exc`` is not one of the recoverable kinds.
    """
    return ACCESS_ERROR_MESSAGES.get(exc.errno) if exc.errno is not None else None


def is_out_of_memory(exc: OSError) -> bool:
    return exc.errno == errno.ENOMEM


__all__ = [
    "ACCESS_ERROR_MESSAGES",
    "FatalError",
    "NAME_LOOKUP_MESSAGE",
    "OUT_OF_MEMORY_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
    "access_error_message",
    "is_out_of_memory",
]
