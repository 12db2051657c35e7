"""Data model for table-of-contents entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TocNode:
    """One navigation entry pointing at a page."""

    name: str
    uid: str | None = None
    href: str | None = None
    children: tuple[TocNode, ...] = ()

    def walk(self):
        """Yield this node and all descendants, depth first."""
        yield self
        for c in self.children:
            yield from c.walk()
