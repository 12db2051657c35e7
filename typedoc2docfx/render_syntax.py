"""Logic for building the declaration line shown for each entity."""

from typedoc2docfx.node_kind import NodeKind
from typedoc2docfx.reflection_node import Node, Signature
from typedoc2docfx.type_text import type_text


def render_syntax(node: Node, signature: Signature | None = None) -> str:
    """Render a TypeScript-like declaration for a node (or one of its signatures)."""
    kind = node.kind
    name = node.name
    tp = _type_params(node.type_parameters)
    if kind == NodeKind.CLASS:
        parts = [f"class {name}{tp}"]
        if node.extended_types:
            parts.append("extends " + ", ".join(type_text(t) for t in node.extended_types))
        if node.implemented_types:
            parts.append(
                "implements " + ", ".join(type_text(t) for t in node.implemented_types),
            )
        return " ".join(parts)
    if kind == NodeKind.INTERFACE:
        head = f"interface {name}{tp}"
        if node.extended_types:
            head += " extends " + ", ".join(type_text(t) for t in node.extended_types)
        return head
    if kind == NodeKind.ENUM:
        return f"enum {name}"
    if kind == NodeKind.ENUM_MEMBER:
        return f"{name} = {node.default_value}" if node.default_value else name
    if kind == NodeKind.TYPE_ALIAS:
        return f"type {name}{tp} = {type_text(node.type) or 'any'}"
    if kind == NodeKind.MODULE:
        return f"module {name}"
    if kind == NodeKind.FUNCTION:
        return f"function {name}{_signature(signature)}"
    if kind == NodeKind.METHOD:
        return f"{_static(node)}{name}{_signature(signature)}"
    if kind == NodeKind.CONSTRUCTOR:
        params = _params(signature) if signature else ""
        return f"constructor({params})"
    if kind == NodeKind.VARIABLE:
        keyword = "const" if node.flags.is_const else "let"
        return f"{keyword} {name}: {type_text(node.type) or 'any'}"
    if kind in {NodeKind.PROPERTY, NodeKind.EVENT}:
        readonly = "readonly " if node.flags.is_readonly else ""
        optional = "?" if node.flags.is_optional else ""
        return f"{_static(node)}{readonly}{name}{optional}: {type_text(node.type) or 'any'}"
    return name


def _signature(sig: Signature | None) -> str:
    if sig is None:
        return "()"
    ret = type_text(sig.type) or "void"
    return f"{_type_params(sig.type_parameters)}({_params(sig)}): {ret}"


def _params(sig: Signature) -> str:
    return ", ".join(
        f"{p.name}{'?' if p.flags.is_optional else ''}: {type_text(p.type) or 'any'}"
        for p in sig.parameters
    )


def _type_params(names: tuple[str, ...]) -> str:
    return f"<{', '.join(names)}>" if names else ""


def _static(node: Node) -> str:
    return "static " if node.flags.is_static else ""
