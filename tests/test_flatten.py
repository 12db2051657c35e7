"""Tests for flattening entity trees into pages."""

from typing import Any

import pytest

from tests.reflection_builders import (
    cls,
    constructor,
    function,
    intrinsic,
    method,
    module,
    param,
    project,
    ref,
    signature,
    variable,
)
from typedoc2docfx.conversion_config import ConversionConfig
from typedoc2docfx.entity_record import EntityRecord, ReturnValue, Syntax
from typedoc2docfx.flatten import flatten
from typedoc2docfx.node_kind import NodeKind
from typedoc2docfx.page import Page
from typedoc2docfx.parse_reflection import parse_reflection
from typedoc2docfx.reference import Pending, Resolved
from typedoc2docfx.resolve_references import ResolvedRoot, resolve_references
from typedoc2docfx.type_expr import TypeExpr
from typedoc2docfx.walk_tree import walk_tree


def _resolved(raw: dict[str, Any], config: ConversionConfig) -> list[ResolvedRoot]:
    walked = walk_tree([parse_reflection(raw, [])], config)
    return [resolve_references(r, walked.uid_table, config) for r in walked.roots]


def _pages(raw: dict[str, Any], config: ConversionConfig | None = None) -> tuple[Page, ...]:
    config = config or ConversionConfig()
    return flatten(_resolved(raw, config), config)


def _example() -> dict[str, Any]:
    return project("P", cls("A", method("m2"), method("m1")), function("f2"), function("f1"))


def test_flatten_example() -> None:
    """Verify one page per class plus one page for the package's orphans."""
    pages = _pages(_example())
    assert [p.uid for p in pages] == ["A", "P"]
    a, package = pages
    assert [m.uid for m in a.members] == ["A.m1", "A.m2"]
    assert a.child_uids == ("A.m1", "A.m2")
    assert a.href == "A.yml"
    assert package.primary.kind == NodeKind.PACKAGE
    assert [m.uid for m in package.members] == ["f1", "f2"]
    assert package.href == "P.yml"


def test_flatten_keeps_source_order_when_disabled() -> None:
    """Verify that disabling alphabetical order keeps declaration order."""
    pages = _pages(_example(), ConversionConfig(alphabetical_order=False))
    a, package = pages
    assert [m.uid for m in a.members] == ["A.m2", "A.m1"]
    assert [m.uid for m in package.members] == ["f2", "f1"]


def test_flatten_orders_case_insensitively() -> None:
    """Verify that ordering ignores case and is stable for ties."""
    raw = project("P", cls("A", method("beta"), method("Alpha"), method("alpha")))
    (a,) = _pages(raw)
    assert [m.uid for m in a.members] == ["A.Alpha", "A.alpha", "A.beta"]


def test_flatten_inlines_constructor() -> None:
    """Verify that a constructor is a member of its class and never a page."""
    raw = project("P", cls("A", constructor(), method("m")))
    (a,) = _pages(raw)
    assert [m.uid for m in a.members] == ["A.constructor", "A.m"]
    assert "A.constructor" not in {p.uid for p in _pages(raw)}


def test_flatten_skips_constructor_root() -> None:
    """Verify that a stray top-level constructor produces no page."""
    record = EntityRecord(
        uid="constructor",
        name="constructor",
        full_name="constructor",
        package="P",
        kind=NodeKind.CONSTRUCTOR,
    )
    root = ResolvedRoot(record=record, references={}, diagnostics=())
    assert flatten([root], ConversionConfig()) == ()


def test_flatten_orphan_page_takes_first_orphan_position() -> None:
    """Verify that the package page sits where the first orphan was declared."""
    raw = project("P", cls("Z"), variable("v", intrinsic("string")), cls("B"), function("f"))
    assert [p.uid for p in _pages(raw)] == ["Z", "P", "B"]


def test_flatten_strips_member_children() -> None:
    """Verify that pages hold flat records only."""
    (a,) = _pages(project("P", cls("A", method("m"))))
    assert a.primary.children == ()
    assert all(m.children == () for m in a.items)


def test_flatten_is_deterministic() -> None:
    """Verify that flattening the same input twice gives equal pages."""
    config = ConversionConfig()
    roots = _resolved(_example(), config)
    assert flatten(roots, config) == flatten(roots, config)


def test_flatten_collects_page_references() -> None:
    """Verify that a page lists the distinct references of its items."""
    b = cls("B")
    raw = project(
        "P",
        cls(
            "A",
            method("m", signature("m", returns=ref("B", target=b["id"]))),
            method("n", signature("n", param("x", ref("B", target=b["id"])))),
        ),
        b,
    )
    a = _pages(raw)[0]
    assert len(a.references) == 1
    assert a.references[0].uid == "B"


def test_flatten_takes_references_from_resolution() -> None:
    """Verify that page references come from the map built while resolving."""
    member = EntityRecord(uid="A.m", name="m", full_name="A.m", package="P", kind=NodeKind.METHOD)
    record = EntityRecord(
        uid="A",
        name="A",
        full_name="A",
        package="P",
        kind=NodeKind.CLASS,
        children=(member,),
    )
    references = {
        ("A", None, 3): Resolved(uid="B", name="B"),
        ("A.m", "A.m", "C"): Resolved(uid="C", name="C"),
        ("A.m", None, 3): Resolved(uid="B", name="B"),
        ("Z", None, 4): Resolved(uid="Z", name="Z"),
    }
    root = ResolvedRoot(record=record, references=references, diagnostics=())
    (page,) = flatten([root], ConversionConfig())
    assert page.references == (Resolved(uid="B", name="B"), Resolved(uid="C", name="C"))


def test_flatten_rejects_pending_reference() -> None:
    """Verify that an unresolved identity cannot leak into a page."""
    record = EntityRecord(
        uid="A",
        name="A",
        full_name="A",
        package="P",
        kind=NodeKind.CLASS,
        syntax=Syntax(
            content="class A",
            returns=ReturnValue(TypeExpr("reference", name="B", target=Pending(1, "B"))),
        ),
    )
    root = ResolvedRoot(record=record, references={}, diagnostics=())
    with pytest.raises(ValueError, match="unresolved identity"):
        flatten([root], ConversionConfig())


def test_flatten_module_grouping() -> None:
    """Verify that modules become pages listing their children."""
    raw = project("P", module("lib", cls("A"), function("f")))
    pages = _pages(raw, ConversionConfig(module_grouping=True))
    assert [p.uid for p in pages] == ["lib", "lib.A", "P"]
    lib = pages[0]
    assert lib.members == ()
    assert lib.child_uids == ("lib.A", "lib.f")
    assert pages[1].href == "lib.A.yml"
