"""Predicate for checking if a node kind gets its own page."""

from typedoc2docfx.node_kind import NodeKind


def is_type_kind(kind: NodeKind) -> bool:
    """Check if the kind represents a type (class, interface, enum, alias)."""
    return kind in {
        NodeKind.CLASS,
        NodeKind.INTERFACE,
        NodeKind.ENUM,
        NodeKind.TYPE_ALIAS,
    }
