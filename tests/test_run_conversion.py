"""End-to-end tests for the conversion pipeline."""

from tests.reflection_builders import (
    cls,
    comment,
    function,
    method,
    module,
    param,
    project,
    ref,
    signature,
)
from typedoc2docfx.conversion_config import ConversionConfig
from typedoc2docfx.diagnostic import DiagnosticKind
from typedoc2docfx.node_kind import NodeKind
from typedoc2docfx.package_index import PackageIndex
from typedoc2docfx.reference import Pending
from typedoc2docfx.run_conversion import convert_reflection


def test_convert_example() -> None:
    """Verify pages, TOC and index for a class with methods and two functions."""
    raw = project("P", cls("A", method("m2"), method("m1")), function("f2"), function("f1"))
    result = convert_reflection(raw, ConversionConfig())
    assert [p.uid for p in result.pages] == ["A", "P"]
    assert [m.name for m in result.pages[0].members] == ["m1", "m2"]
    assert [m.name for m in result.pages[1].members] == ["f1", "f2"]
    (toc,) = result.tocs
    assert [c.uid for c in toc.children] == ["A", "P"]
    assert result.package_indexes == (PackageIndex(package="P", uids=("A", "P")),)
    assert result.diagnostics == ()


def test_convert_index_ignores_ordering_flag() -> None:
    """Verify that the package index stays sorted with source order enabled."""
    raw = project("P", function("f"), cls("B"), cls("A"))
    result = convert_reflection(raw, ConversionConfig(alphabetical_order=False))
    assert [p.uid for p in result.pages] == ["P", "B", "A"]
    assert result.package_indexes[0].uids == ("A", "B", "P")


def test_convert_uids_unique_and_final() -> None:
    """Verify that every uid is emitted once and no identity is left pending."""
    b = cls("B", method("run"))
    raw = project(
        "P",
        cls("A", method("use", signature("use", param("b", ref("B", target=b["id"]))))),
        b,
        function("helper"),
    )
    result = convert_reflection(raw, ConversionConfig())
    uids = [item.uid for page in result.pages for item in page.items]
    assert len(uids) == len(set(uids))
    for page in result.pages:
        assert not any(isinstance(r, Pending) for r in page.references)
        for item in page.items:
            assert not any(isinstance(r, Pending) for r in item.iter_references())


def test_convert_isolates_duplicate_roots() -> None:
    """Verify that a colliding root is dropped and reported, others survive."""
    raw = project("P", module("a", cls("A")), module("b", cls("A")), cls("B"))
    result = convert_reflection(raw, ConversionConfig())
    assert [p.uid for p in result.pages] == ["A", "B"]
    assert [d.kind for d in result.diagnostics] == [DiagnosticKind.DUPLICATE_UID]


def test_convert_class_named_like_package() -> None:
    """Verify that the package keeps its uid and orphans stay documented."""
    raw = project(
        "P",
        cls("P", method("m", comment=comment("see {@link f}"))),
        function("f"),
        cls("A", method("n", comment=comment("see {@link f}"))),
    )
    result = convert_reflection(raw, ConversionConfig())
    assert [p.uid for p in result.pages] == ["P", "A"]
    package = result.pages[0]
    assert package.primary.kind == NodeKind.PACKAGE
    assert [m.uid for m in package.members] == ["f"]
    assert [c.uid for c in result.tocs[0].children] == ["A", "P"]
    (diag,) = result.diagnostics
    assert (diag.kind, diag.subject) == (DiagnosticKind.DUPLICATE_UID, "P")

    emitted = {item.uid for page in result.pages for item in page.items}
    assert result.pages[1].members[0].summary == "see [f](xref:f)"
    assert "f" in emitted
    assert "P.m" not in emitted


def test_convert_modern_numeric_kinds() -> None:
    """Verify that TypeDoc 0.23+ output without kindString keeps enums and namespaces."""
    raw = {
        "id": 0,
        "name": "P",
        "kind": 1,
        "schemaVersion": "2.0",
        "children": [
            {
                "id": 1,
                "name": "Color",
                "kind": 8,
                "children": [{"id": 2, "name": "Red", "kind": 16}],
            },
            {"id": 3, "name": "NS", "kind": 4, "children": [{"id": 4, "name": "C", "kind": 128}]},
        ],
    }
    result = convert_reflection(raw, ConversionConfig())
    assert [p.uid for p in result.pages] == ["C", "Color"]
    assert result.pages[1].primary.kind == NodeKind.ENUM
    assert [m.uid for m in result.pages[1].members] == ["Color.Red"]
    assert result.diagnostics == ()


def test_convert_reports_unsupported_kinds() -> None:
    """Verify that a node of an unknown kind is skipped with a diagnostic."""
    odd = {"id": 8, "name": "odd", "kind": 99999}
    raw = project("P", cls("A", odd), {"id": 9, "name": "Z", "kind": 77})
    result = convert_reflection(raw, ConversionConfig())
    assert [p.uid for p in result.pages] == ["A"]
    assert [(d.kind, d.subject) for d in result.diagnostics] == [
        (DiagnosticKind.MALFORMED_NODE, "A.odd"),
        (DiagnosticKind.MALFORMED_NODE, "Z"),
    ]


def test_convert_reports_unresolved_references() -> None:
    """Verify that unresolved references are surfaced after the run."""
    sig = signature("use", param("x", ref("Missing")))
    result = convert_reflection(project("P", function("use", sig)), ConversionConfig())
    assert [p.uid for p in result.pages] == ["P"]
    (diag,) = result.diagnostics
    assert diag.kind == DiagnosticKind.UNRESOLVED_REFERENCE
    assert diag.subject == "use"


def test_convert_malformed_document() -> None:
    """Verify that a document without a usable root yields only a diagnostic."""
    result = convert_reflection({"id": 0, "kind": 0}, ConversionConfig())
    assert result.pages == ()
    assert result.tocs == ()
    assert [d.kind for d in result.diagnostics] == [DiagnosticKind.MALFORMED_NODE]


def test_convert_empty_package() -> None:
    """Verify that a package with nothing documented produces an empty TOC."""
    result = convert_reflection(project("P"), ConversionConfig())
    assert result.pages == ()
    assert result.tocs[0].children == ()
    assert result.package_indexes == ()
