"""Logic for rendering type expressions as TypeScript-like text."""

from typedoc2docfx.reference import External, Resolved
from typedoc2docfx.type_expr import TypeExpr

_WRAP_IN_ARRAY = {"union", "intersection", "function"}


def type_text(expr: TypeExpr | None, *, linked: bool = False) -> str:
    """Render a type expression.

    With ``linked`` set, resolved targets become ``<xref:uid>`` tags and
    external targets Markdown links; anything else renders as its name.
    """
    if expr is None:
        return ""
    k = expr.kind
    if k == "reference":
        base = _reference_text(expr, linked=linked)
        if expr.arguments:
            args = ", ".join(type_text(a, linked=linked) for a in expr.arguments)
            base = f"{base}<{args}>"
        return base
    if k == "array":
        element = expr.arguments[0] if expr.arguments else None
        inner = type_text(element, linked=linked) or "any"
        if element is not None and element.kind in _WRAP_IN_ARRAY:
            inner = f"({inner})"
        return f"{inner}[]"
    if k == "union":
        return " | ".join(type_text(a, linked=linked) for a in expr.arguments)
    if k == "intersection":
        return " & ".join(type_text(a, linked=linked) for a in expr.arguments)
    if k == "tuple":
        return "[" + ", ".join(type_text(a, linked=linked) for a in expr.arguments) + "]"
    if k == "reflection":
        if not expr.members:
            return "{}"
        fields = "; ".join(
            f"{m.name}{'?' if m.optional else ''}: {type_text(m.type, linked=linked) or 'any'}"
            for m in expr.members
        )
        return f"{{ {fields} }}"
    if k == "function":
        params = ", ".join(
            f"{m.name}{'?' if m.optional else ''}: {type_text(m.type, linked=linked) or 'any'}"
            for m in expr.members
        )
        ret = type_text(expr.arguments[0], linked=linked) if expr.arguments else "void"
        return f"({params}) => {ret}"
    if k == "query":
        queried = expr.arguments[0] if expr.arguments else None
        return f"typeof {type_text(queried, linked=linked)}"
    return expr.name


def _reference_text(expr: TypeExpr, *, linked: bool) -> str:
    target = expr.target
    if linked and isinstance(target, Resolved):
        return f"<xref:{target.uid}>"
    if linked and isinstance(target, External):
        return f"[{expr.name}]({target.href})"
    return expr.name
