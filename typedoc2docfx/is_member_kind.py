"""Predicate for checking if a node kind is inlined into its owner's page."""

from typedoc2docfx.node_kind import NodeKind


def is_member_kind(kind: NodeKind) -> bool:
    """Check if the kind represents a member (method, property, etc.)."""
    return kind in {
        NodeKind.METHOD,
        NodeKind.PROPERTY,
        NodeKind.CONSTRUCTOR,
        NodeKind.EVENT,
        NodeKind.ENUM_MEMBER,
    }
