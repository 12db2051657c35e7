"""Logic for building the navigation tree over the pre-flatten forest."""

from collections.abc import Sequence

from typedoc2docfx.conversion_config import ConversionConfig
from typedoc2docfx.entity_record import EntityRecord
from typedoc2docfx.is_orphan_kind import is_orphan_kind
from typedoc2docfx.is_type_kind import is_type_kind
from typedoc2docfx.node_kind import NodeKind
from typedoc2docfx.order_siblings import order_siblings
from typedoc2docfx.page import Page
from typedoc2docfx.toc_node import TocNode


def build_toc(
    roots: Sequence[EntityRecord],
    pages: Sequence[Page],
    package: str,
    config: ConversionConfig,
) -> TocNode:
    """Build the table of contents for one package.

    Entries mirror the nesting of ``roots`` but point at the final pages. All
    orphan declarations share one entry, named after the package, placed where
    the first orphan was declared; sibling order follows the same rule as
    page members.
    """
    page_by_uid = {p.uid: p for p in pages if p.package == package}
    state = {"orphans_listed": False}
    entries: list[TocNode] = []
    for record in roots:
        if record.package != package:
            continue
        entries.extend(_entries(record, page_by_uid, state, package))
    return TocNode(name=package, children=_ordered(entries, config))


def _entries(
    record: EntityRecord,
    page_by_uid: dict[str, Page],
    state: dict[str, bool],
    package: str,
) -> list[TocNode]:
    if is_orphan_kind(record.kind):
        page = page_by_uid.get(package)
        if page is None or state["orphans_listed"]:
            return []
        state["orphans_listed"] = True
        return [TocNode(name=package, uid=page.uid, href=page.href)]
    if record.kind != NodeKind.MODULE and not is_type_kind(record.kind):
        return []
    page = page_by_uid.get(record.uid)
    if page is None:
        return []

    children: list[TocNode] = []
    nested: list[TocNode] = []
    for child in record.children:
        # Orphans inside a module are listed once, at package level.
        for n in _entries(child, page_by_uid, state, package):
            (nested if n.uid == package else children).append(n)
    entry = TocNode(name=record.name, uid=page.uid, href=page.href, children=tuple(children))
    return [entry, *nested]


def _ordered(entries: list[TocNode], config: ConversionConfig) -> tuple[TocNode, ...]:
    """Apply the sibling ordering rule at every level."""
    ordered = order_siblings(entries, lambda n: n.name, alphabetical=config.alphabetical_order)
    return tuple(
        TocNode(
            name=n.name,
            uid=n.uid,
            href=n.href,
            children=_ordered(list(n.children), config),
        )
        for n in ordered
    )
