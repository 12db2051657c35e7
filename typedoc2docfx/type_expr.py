"""Data models for type expressions attached to signatures and declarations."""

from __future__ import annotations

from dataclasses import dataclass

from typedoc2docfx.reference import Reference


@dataclass(frozen=True)
class TypeMember:
    """A named slot of an inline object type or an inline function parameter."""

    name: str
    type: TypeExpr | None
    optional: bool = False


@dataclass(frozen=True)
class TypeExpr:
    """A type as written in a declaration.

    ``kind`` is one of: intrinsic, reference, array, union, intersection, tuple,
    literal, reflection, function, type_parameter, query, unknown.

    * reference: ``target`` names the referenced declaration, ``arguments``
      holds type arguments.
    * array: ``arguments`` holds the element type.
    * union/intersection/tuple: ``arguments`` holds the parts.
    * reflection: inline object type, ``members`` holds its properties.
    * function: inline call signature, ``members`` holds the parameters and
      ``arguments`` the return type.
    * query: ``typeof name``.
    """

    kind: str
    name: str = ""
    target: Reference | None = None
    arguments: tuple[TypeExpr, ...] = ()
    members: tuple[TypeMember, ...] = ()
    uid: str | None = None  # synthesized for reflection/function types

    def iter_references(self):
        """Yield every reference inside this expression, depth first."""
        if self.target is not None:
            yield self.target
        for arg in self.arguments:
            yield from arg.iter_references()
        for member in self.members:
            if member.type is not None:
                yield from member.type.iter_references()
