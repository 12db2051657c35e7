"""Rendering: table of contents to DocFX toc structures."""

from typing import Any

from typedoc2docfx.toc_node import TocNode


def render_toc(tocs: list[TocNode] | tuple[TocNode, ...]) -> list[dict[str, Any]]:
    """Render package TOCs as one DocFX toc list.

    A single package is flattened to its children; several packages each get
    a top-level entry.
    """
    if len(tocs) == 1:
        return [_entry(c) for c in tocs[0].children]
    return [_entry(t) for t in tocs]


def _entry(node: TocNode) -> dict[str, Any]:
    out: dict[str, Any] = {"name": node.name}
    if node.uid:
        out["uid"] = node.uid
    elif node.href:
        out["href"] = node.href
    if node.children:
        out["items"] = [_entry(c) for c in node.children]
    return out
