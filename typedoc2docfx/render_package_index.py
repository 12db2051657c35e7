"""Rendering: package indexes, merged with the package's orphan page."""

from typing import Any

from typedoc2docfx.package_index import PackageIndex
from typedoc2docfx.page import Page
from typedoc2docfx.render_page import LANGS, render_item, render_reference


def render_package_index(index: PackageIndex, package_page: Page | None) -> dict[str, Any]:
    """Render the package item listing every page, plus grouped orphans.

    The orphan page shares its uid with the package, so both are written as
    one document.
    """
    children = [u for u in index.uids if u != index.package]
    members = package_page.members if package_page else ()
    children.extend(m.uid for m in members)
    item: dict[str, Any] = {
        "uid": index.package,
        "name": index.package,
        "fullName": index.package,
        "children": children,
        "langs": LANGS,
        "type": "package",
    }
    doc: dict[str, Any] = {"items": [item, *(render_item(m) for m in members)]}
    if package_page:
        refs = [r for r in (render_reference(x) for x in package_page.references) if r]
        if refs:
            doc["references"] = refs
    return doc
