"""Closed set of reflection kinds understood by the converter."""

from __future__ import annotations

from enum import Enum


class NodeKind(Enum):
    """Kind of a TypeDoc reflection node."""

    PACKAGE = "package"
    MODULE = "module"
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ENUM_MEMBER = "field"
    TYPE_ALIAS = "typealias"
    FUNCTION = "function"
    VARIABLE = "variable"
    PROPERTY = "property"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    EVENT = "event"


    @classmethod
    def from_typedoc(
        cls,
        kind_string: str | None,
        kind: int | None = None,
        *,
        legacy: bool = False,
    ) -> NodeKind | None:
        """Map a TypeDoc ``kindString`` (or numeric ``kind``) to a NodeKind.

        The numeric values were renumbered in TypeDoc 0.23; ``legacy`` selects
        the older table. Returns None for kinds that are not documented on
        their own, such as call signatures, type literals or type parameters.
        """
        if kind_string:
            return _KIND_STRINGS.get(kind_string.strip().lower())
        if kind is not None:
            return (_LEGACY_KIND_BITS if legacy else _KIND_BITS).get(kind)
        return None


_KIND_STRINGS: dict[str, NodeKind] = {
    "project": NodeKind.PACKAGE,
    "external module": NodeKind.MODULE,
    "module": NodeKind.MODULE,
    "namespace": NodeKind.MODULE,
    "class": NodeKind.CLASS,
    "interface": NodeKind.INTERFACE,
    "enumeration": NodeKind.ENUM,
    "enum": NodeKind.ENUM,
    "enumeration member": NodeKind.ENUM_MEMBER,
    "enum member": NodeKind.ENUM_MEMBER,
    "type alias": NodeKind.TYPE_ALIAS,
    "function": NodeKind.FUNCTION,
    "variable": NodeKind.VARIABLE,
    "object literal": NodeKind.VARIABLE,
    "property": NodeKind.PROPERTY,
    "accessor": NodeKind.PROPERTY,
    "method": NodeKind.METHOD,
    "constructor": NodeKind.CONSTRUCTOR,
    "event": NodeKind.EVENT,
}

# ReflectionKind values from TypeDoc 0.23 on, where JSON output has no kindString.
_KIND_BITS: dict[int, NodeKind] = {
    1: NodeKind.PACKAGE,
    2: NodeKind.MODULE,
    4: NodeKind.MODULE,
    8: NodeKind.ENUM,
    16: NodeKind.ENUM_MEMBER,
    32: NodeKind.VARIABLE,
    64: NodeKind.FUNCTION,
    128: NodeKind.CLASS,
    256: NodeKind.INTERFACE,
    512: NodeKind.CONSTRUCTOR,
    1024: NodeKind.PROPERTY,
    2048: NodeKind.METHOD,
    262144: NodeKind.PROPERTY,
    2097152: NodeKind.TYPE_ALIAS,
}

# ReflectionKind values from TypeDoc releases before 0.23.
_LEGACY_KIND_BITS: dict[int, NodeKind] = {
    0: NodeKind.PACKAGE,
    1: NodeKind.MODULE,
    2: NodeKind.MODULE,
    4: NodeKind.ENUM,
    16: NodeKind.ENUM_MEMBER,
    32: NodeKind.VARIABLE,
    64: NodeKind.FUNCTION,
    128: NodeKind.CLASS,
    256: NodeKind.INTERFACE,
    512: NodeKind.CONSTRUCTOR,
    1024: NodeKind.PROPERTY,
    2048: NodeKind.METHOD,
    262144: NodeKind.PROPERTY,
    2097152: NodeKind.VARIABLE,
    4194304: NodeKind.TYPE_ALIAS,
    8388608: NodeKind.EVENT,
}
