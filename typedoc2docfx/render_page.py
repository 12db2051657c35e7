"""Rendering: pages to DocFX UniversalReference structures."""

from typing import Any

from typedoc2docfx.entity_record import EntityRecord, SourceLink
from typedoc2docfx.page import Page
from typedoc2docfx.reference import External, FinalReference, Resolved
from typedoc2docfx.type_text import type_text
from typedoc2docfx.type_expr import TypeExpr

LANGS = ["typeScript"]


def render_page(page: Page) -> dict[str, Any]:
    """Render a page as ``{"items": [...], "references": [...]}``."""
    items = [render_item(page.primary, children=list(page.child_uids))]
    items.extend(render_item(m) for m in page.members)
    doc: dict[str, Any] = {"items": items}
    refs = [r for r in (render_reference(ref) for ref in page.references) if r]
    if refs:
        doc["references"] = refs
    return doc


def render_item(record: EntityRecord, children: list[str] | None = None) -> dict[str, Any]:
    """Render one entity; empty fields are omitted."""
    item: dict[str, Any] = {
        "uid": record.uid,
        "name": record.name,
        "fullName": record.full_name,
    }
    if children:
        item["children"] = children
    item["langs"] = LANGS
    item["type"] = record.kind.value
    _put(item, "summary", record.summary)
    _put(item, "remarks", record.remarks)
    _put(item, "example", [record.example] if record.example else None)
    if record.syntax is not None:
        item["syntax"] = _render_syntax(record)
    item["package"] = record.package
    _put(item, "module", record.module)
    _put(item, "inheritance", [_type(t) for t in record.inheritance])
    _put(item, "implements", [_type(t) for t in record.implements])
    _put(item, "seealso", [_seealso(link.target, link.text) for link in record.see_also])
    if record.source is not None:
        item["source"] = _render_source(record.source)
    if record.deprecated is not None:
        item["deprecated"] = {"content": record.deprecated}
    if record.is_preview:
        item["isPreview"] = True
    _put(item, "numericValue", record.numeric_value)
    return item


def render_reference(ref: FinalReference) -> dict[str, Any] | None:
    """Render a page reference entry; unresolved names have none."""
    if isinstance(ref, Resolved):
        return {"uid": ref.uid, "name": ref.name}
    if isinstance(ref, External):
        return {"uid": ref.name, "name": ref.name, "href": ref.href}
    return None


def _render_syntax(record: EntityRecord) -> dict[str, Any]:
    syntax = record.syntax
    out: dict[str, Any] = {"content": syntax.content}
    if syntax.parameters:
        out["parameters"] = []
        for p in syntax.parameters:
            param: dict[str, Any] = {"id": p.name, "type": [_type(p.type)]}
            _put(param, "description", p.description)
            if p.optional:
                param["optional"] = True
            out["parameters"].append(param)
    ret = syntax.returns
    if ret is not None and ret.type is not None:
        out["return"] = {"type": [_type(ret.type)]}
        _put(out["return"], "description", ret.description)
    return out


def _render_source(source: SourceLink) -> dict[str, Any]:
    out: dict[str, Any] = {"path": source.path, "startLine": source.start_line}
    if source.remote is not None:
        out["remote"] = {
            "path": source.remote.path,
            "branch": source.remote.branch,
            "repo": source.remote.repo,
        }
    _put(out, "href", source.href)
    return out


def _seealso(target: FinalReference, text: str) -> dict[str, Any]:
    if isinstance(target, Resolved):
        return {"linkType": "CRef", "commentId": f"T:{target.uid}", "altText": text}
    if isinstance(target, External):
        return {"linkType": "HRef", "commentId": target.href, "altText": text}
    return {"linkType": "HRef", "altText": text}


def _type(expr: TypeExpr | None) -> str:
    return type_text(expr, linked=True) or "any"


def _put(d: dict[str, Any], key: str, value: object) -> None:
    if value:
        d[key] = value
