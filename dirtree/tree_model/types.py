"""Display option datatypes shared by the renderer, walker and driver."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayOptions:
    """Output switches selected once at startup.

    ``verbose`` implies ``tree_view``; ``__post_init__`` enforces it so every
    consumer can read ``tree_view`` directly.
    """

    tree_view: bool = True
    summary: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.verbose and not self.tree_view:
            object.__setattr__(self, "tree_view", True)
