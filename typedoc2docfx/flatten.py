"""Logic for flattening resolved entity trees into page-sized units."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from typedoc2docfx.conversion_config import ConversionConfig
from typedoc2docfx.entity_record import EntityRecord
from typedoc2docfx.is_member_kind import is_member_kind
from typedoc2docfx.is_orphan_kind import is_orphan_kind
from typedoc2docfx.is_type_kind import is_type_kind
from typedoc2docfx.node_kind import NodeKind
from typedoc2docfx.order_siblings import order_siblings
from typedoc2docfx.page import Page
from typedoc2docfx.page_href import page_href
from typedoc2docfx.reference import FinalReference, Pending
from typedoc2docfx.resolve_references import ResolvedRoot

logger = logging.getLogger(__name__)


def flatten(resolved_roots: Sequence[ResolvedRoot], config: ConversionConfig) -> tuple[Page, ...]:
    """Produce the ordered page sequence for a run.

    Orphan functions and variables of a package collect into one page whose
    uid is the package name; it takes the position of the first orphan seen.
    """
    slots: list[Page | str] = []
    orphans: dict[str, list[EntityRecord]] = {}
    held: dict[str, list[FinalReference]] = {}
    for root in resolved_roots:
        _flatten_record(root.record, slots, orphans, config)
        for (subject, _, _), ref in root.references.items():
            held.setdefault(subject, []).append(ref)

    pages = [
        slot if isinstance(slot, Page) else package_page(slot, orphans[slot], config)
        for slot in slots
    ]
    pages = [replace(page, references=_page_references(page, held)) for page in pages]
    logger.info("Flattened %d roots into %d pages", len(resolved_roots), len(pages))
    return tuple(pages)


def package_page(package: str, orphans: Sequence[EntityRecord], config: ConversionConfig) -> Page:
    """Build the synthetic page that groups a package's orphan declarations."""
    members = order_siblings(orphans, lambda r: r.name, alphabetical=config.alphabetical_order)
    primary = EntityRecord(
        uid=package,
        name=package,
        full_name=package,
        package=package,
        kind=NodeKind.PACKAGE,
    )
    return _page(primary, members, [m.uid for m in members])


def _flatten_record(
    record: EntityRecord,
    slots: list[Page | str],
    orphans: dict[str, list[EntityRecord]],
    config: ConversionConfig,
) -> None:
    kind = record.kind
    if kind == NodeKind.CONSTRUCTOR:
        logger.debug("Not emitting constructor %s as a page", record.uid)
        return
    if is_orphan_kind(kind):
        if record.package not in orphans:
            orphans[record.package] = []
            slots.append(record.package)
        orphans[record.package].append(record)
        return
    if kind != NodeKind.MODULE and not is_type_kind(kind):
        logger.debug("Not emitting %s %s as a page", kind.value, record.uid)
        return

    children = order_siblings(
        record.children,
        lambda r: r.name,
        alphabetical=config.alphabetical_order,
    )
    inlined = [] if kind == NodeKind.MODULE else [c for c in children if is_member_kind(c.kind)]
    slots.append(_page(record, inlined, [c.uid for c in children]))
    for child in children:
        if kind == NodeKind.MODULE or not is_member_kind(child.kind):
            _flatten_record(child, slots, orphans, config)


def _page(primary: EntityRecord, members: Sequence[EntityRecord], child_uids: list[str]) -> Page:
    stripped = [replace(m, children=()) for m in members]
    return Page(
        uid=primary.uid,
        href=page_href(primary.uid),
        package=primary.package,
        primary=replace(primary, children=()),
        members=tuple(stripped),
        child_uids=tuple(child_uids),
    )


def _page_references(
    page: Page,
    held: dict[str, list[FinalReference]],
) -> tuple[FinalReference, ...]:
    """Distinct references resolved for the page's items, in first-use order."""
    seen: dict[FinalReference, None] = {}
    for record in page.items:
        for ref in record.iter_references():
            if isinstance(ref, Pending):
                msg = f"{record.uid} still holds an unresolved identity {ref.identity!r}"
                raise ValueError(msg)
        for ref in held.get(record.uid, ()):
            seen.setdefault(ref, None)
    return tuple(seen)
