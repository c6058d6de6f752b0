"""Domain datatypes for listed directory children and their metadata."""

from __future__ import annotations

import enum
import stat
from dataclasses import dataclass


class EntryKind(enum.Enum):
    """Coarse filesystem object type as reported by a non-following stat."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    FIFO = "fifo"
    CHAR_DEVICE = "char-device"
    BLOCK_DEVICE = "block-device"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> EntryKind:
        """Classify an ``st_mode`` value."""
        if stat.S_ISREG(mode):
            return cls.REGULAR
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISCHR(mode):
            return cls.CHAR_DEVICE
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        return cls.UNKNOWN


@dataclass(frozen=True)
class DirectoryChild:
    """One listed directory child with the listing's own directory tag."""

    name: str
    path: str
    is_dir: bool


@dataclass(frozen=True)
class Metadata:
    """Read-only ``lstat`` snapshot of one entry."""

    kind: EntryKind
    uid: int
    gid: int
    size: int
    blocks: int

    @classmethod
    def from_stat(cls, st) -> Metadata:
        return cls(
            kind=EntryKind.from_mode(st.st_mode),
            uid=int(st.st_uid),
            gid=int(st.st_gid),
            size=int(st.st_size),
            blocks=int(getattr(st, "st_blocks", 0)),
        )


__all__ = [
    "DirectoryChild",
    "EntryKind",
    "Metadata",
]
