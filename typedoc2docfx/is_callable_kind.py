"""Predicate for kinds documented once per signature."""

from typedoc2docfx.node_kind import NodeKind


def is_callable_kind(kind: NodeKind) -> bool:
    """Check if the kind carries call signatures (function, method, constructor)."""
    return kind in {NodeKind.FUNCTION, NodeKind.METHOD, NodeKind.CONSTRUCTOR}
