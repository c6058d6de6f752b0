"""Per-root and grand-total statistics.

A ``Summary`` only ever grows: entries are folded in one at a time during a
walk and finished root summaries are combined into the grand total.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from .file_tree_model.types import EntryKind, Metadata


@dataclass
class Summary:
    """Entry counters plus byte and block totals."""

    directories: int = 0
    files: int = 0
    links: int = 0
    fifos: int = 0
    sockets: int = 0
    size: int = 0
    blocks: int = 0

    def fold(self, metadata: Metadata) -> None:
        """Count one entry; devices and unknown kinds only add size/blocks."""
        kind = metadata.kind
        if kind is EntryKind.REGULAR:
            self.files += 1
        elif kind is EntryKind.DIRECTORY:
            self.directories += 1
        elif kind is EntryKind.SYMLINK:
            self.links += 1
        elif kind is EntryKind.FIFO:
            self.fifos += 1
        elif kind is EntryKind.SOCKET:
            self.sockets += 1
        self.size += metadata.size
        self.blocks += metadata.blocks

    def combine(self, other: Summary) -> None:
        """Add ``other`` field-wise into this summary."""
        for field in fields(self):
            setattr(self, field.name, getattr(self, field.name) + getattr(other, field.name))

    @property
    def counted_entries(self) -> int:
        return self.directories + self.files + self.links + self.fifos + self.sockets

    def describe(self) -> str:
        """Return the one-sentence count summary, e.g. ``1 file, 2 directories, ...``."""
        return (
            f"{_plural(self.files, 'file', 'files')}, "
            f"{_plural(self.directories, 'directory', 'directories')}, "
            f"{_plural(self.links, 'link', 'links')}, "
            f"{_plural(self.fifos, 'pipe', 'pipes')}, "
            f"and {_plural(self.sockets, 'socket', 'sockets')}"
        )


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


__all__ = ["Summary"]
