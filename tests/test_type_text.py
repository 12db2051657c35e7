"""Tests for type expression rendering."""

from typedoc2docfx.reference import External, Pending, Resolved, Unresolved
from typedoc2docfx.type_expr import TypeExpr, TypeMember
from typedoc2docfx.type_text import type_text

STRING = TypeExpr("intrinsic", name="string")
NUMBER = TypeExpr("intrinsic", name="number")


def test_type_text_composites() -> None:
    """Verify unions, arrays and tuples."""
    union = TypeExpr("union", arguments=(STRING, NUMBER))
    assert type_text(union) == "string | number"
    assert type_text(TypeExpr("array", arguments=(union,))) == "(string | number)[]"
    assert type_text(TypeExpr("array", arguments=(STRING,))) == "string[]"
    assert type_text(TypeExpr("tuple", arguments=(STRING, NUMBER))) == "[string, number]"
    assert type_text(TypeExpr("intersection", arguments=(STRING, NUMBER))) == "string & number"


def test_type_text_inline_types() -> None:
    """Verify object literals, function types and queries."""
    obj = TypeExpr(
        "reflection",
        members=(TypeMember("a", STRING), TypeMember("b", NUMBER, optional=True)),
    )
    assert type_text(obj) == "{ a: string; b?: number }"
    assert type_text(TypeExpr("reflection")) == "{}"
    fn = TypeExpr("function", arguments=(NUMBER,), members=(TypeMember("x", STRING),))
    assert type_text(fn) == "(x: string) => number"
    ref = TypeExpr("reference", name="Foo", target=Pending(1, "Foo"))
    assert type_text(TypeExpr("query", arguments=(ref,))) == "typeof Foo"


def test_type_text_references() -> None:
    """Verify reference rendering with and without links."""
    resolved = TypeExpr(
        "reference",
        name="Map",
        target=Resolved(uid="Map", name="Map"),
        arguments=(STRING, TypeExpr("reference", name="X", target=Unresolved(name="X"))),
    )
    assert type_text(resolved) == "Map<string, X>"
    assert type_text(resolved, linked=True) == "<xref:Map><string, X>"
    external = TypeExpr(
        "reference",
        name="Promise",
        target=External(href="https://ts.example/Promise", name="Promise"),
    )
    assert type_text(external, linked=True) == "[Promise](https://ts.example/Promise)"


def test_type_text_none() -> None:
    """Verify that a missing type renders as empty text."""
    assert type_text(None) == ""
