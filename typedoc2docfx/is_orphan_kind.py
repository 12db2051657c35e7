"""Predicate for declarations that have no enclosing type."""

from typedoc2docfx.node_kind import NodeKind


def is_orphan_kind(kind: NodeKind) -> bool:
    """Check if the kind is grouped into the package page when top-level."""
    return kind in {NodeKind.FUNCTION, NodeKind.VARIABLE}
