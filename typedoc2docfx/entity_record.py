"""Data models for documented entities produced by the tree walk."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from typedoc2docfx.node_kind import NodeKind
from typedoc2docfx.reference import Reference
from typedoc2docfx.type_expr import TypeExpr


@dataclass(frozen=True)
class SyntaxParameter:
    """A documented parameter."""

    name: str
    type: TypeExpr | None
    description: str = ""
    optional: bool = False


@dataclass(frozen=True)
class ReturnValue:
    """Return type of a callable, or value type of a property/variable."""

    type: TypeExpr | None
    description: str = ""


@dataclass(frozen=True)
class Syntax:
    """Declaration text plus its structured parts."""

    content: str
    parameters: tuple[SyntaxParameter, ...] = ()
    returns: ReturnValue | None = None


@dataclass(frozen=True)
class RemoteSource:
    """Location of a file in the hosting repository."""

    repo: str
    branch: str
    path: str


@dataclass(frozen=True)
class SourceLink:
    """Source location of a declaration."""

    path: str
    start_line: int
    remote: RemoteSource | None = None
    href: str | None = None


@dataclass(frozen=True)
class LinkRef:
    """A ``@see`` entry."""

    target: Reference
    text: str


@dataclass(frozen=True)
class EntityRecord:
    """One documented entity (class, member, function, ...)."""

    uid: str
    name: str
    full_name: str
    package: str
    kind: NodeKind
    summary: str = ""
    remarks: str = ""
    example: str = ""
    deprecated: str | None = None
    is_preview: bool = False
    syntax: Syntax | None = None
    children: tuple[EntityRecord, ...] = ()
    inheritance: tuple[TypeExpr, ...] = ()
    implements: tuple[TypeExpr, ...] = ()
    see_also: tuple[LinkRef, ...] = ()
    source: SourceLink | None = None
    module: str | None = None
    numeric_value: str | None = None

    @property
    def child_uids(self) -> tuple[str, ...]:
        """Uids of the direct children, in order."""
        return tuple(c.uid for c in self.children)

    def iter_type_fields(self) -> Iterator[tuple[str, TypeExpr]]:
        """Yield ``(field, type)`` for every type-valued field of this record."""
        for t in self.inheritance:
            yield "inheritance", t
        for t in self.implements:
            yield "implements", t
        if self.syntax:
            for p in self.syntax.parameters:
                if p.type is not None:
                    yield f"parameter {p.name}", p.type
            if self.syntax.returns and self.syntax.returns.type is not None:
                yield "return", self.syntax.returns.type

    def iter_references(self) -> Iterator[Reference]:
        """Yield every reference held by this record (not its children)."""
        for _, t in self.iter_type_fields():
            yield from t.iter_references()
        for link in self.see_also:
            yield link.target

    def walk(self) -> Iterator[EntityRecord]:
        """Yield this record and all descendants, depth first."""
        yield self
        for c in self.children:
            yield from c.walk()
