"""Data models for the parsed TypeDoc reflection tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from typedoc2docfx.node_kind import NodeKind
from typedoc2docfx.type_expr import TypeExpr


@dataclass(frozen=True)
class CommentTag:
    """A block tag such as ``@param name text`` or ``@example``."""

    tag: str
    text: str
    param: str | None = None


@dataclass(frozen=True)
class Comment:
    """A documentation comment."""

    short_text: str = ""
    text: str = ""
    returns: str = ""
    tags: tuple[CommentTag, ...] = ()

    def tag_text(self, name: str) -> str | None:
        """Return the text of the first ``@name`` tag, or None if absent."""
        for t in self.tags:
            if t.tag == name:
                return t.text
        return None

    def has_tag(self, *names: str) -> bool:
        """Check if any of the given tags is present."""
        return any(t.tag in names for t in self.tags)


@dataclass(frozen=True)
class Flags:
    """Visibility and modifier flags of a reflection."""

    is_private: bool = False
    is_protected: bool = False
    is_static: bool = False
    is_optional: bool = False
    is_const: bool = False
    is_readonly: bool = False
    is_external: bool = False


@dataclass(frozen=True)
class SourceRef:
    """Where a declaration lives in the analyzed sources."""

    file_name: str
    line: int


@dataclass(frozen=True)
class Parameter:
    """A parameter of a call signature."""

    name: str
    type: TypeExpr | None = None
    comment: Comment | None = None
    flags: Flags = field(default_factory=Flags)
    default_value: str | None = None


@dataclass(frozen=True)
class Signature:
    """One call signature of a function, method or constructor."""

    id: int | None
    name: str
    parameters: tuple[Parameter, ...] = ()
    type: TypeExpr | None = None
    comment: Comment | None = None
    type_parameters: tuple[str, ...] = ()


@dataclass(frozen=True)
class Node:
    """A reflection node (package, module, class, member, ...)."""

    id: int | None
    name: str
    kind: NodeKind | None
    kind_string: str = ""
    children: tuple[Node, ...] = ()
    signatures: tuple[Signature, ...] = ()
    type: TypeExpr | None = None
    type_parameters: tuple[str, ...] = ()
    extended_types: tuple[TypeExpr, ...] = ()
    implemented_types: tuple[TypeExpr, ...] = ()
    comment: Comment | None = None
    flags: Flags = field(default_factory=Flags)
    sources: tuple[SourceRef, ...] = ()
    default_value: str | None = None
