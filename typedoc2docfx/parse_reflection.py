"""Logic for turning raw TypeDoc JSON dicts into immutable reflection nodes."""

import logging
from typing import Any

from typedoc2docfx.as_text import as_text
from typedoc2docfx.diagnostic import Diagnostic, DiagnosticKind
from typedoc2docfx.errors import MalformedNodeError
from typedoc2docfx.node_kind import NodeKind
from typedoc2docfx.reference import Pending
from typedoc2docfx.reflection_node import (
    Comment,
    CommentTag,
    Flags,
    Node,
    Parameter,
    Signature,
    SourceRef,
)
from typedoc2docfx.type_expr import TypeExpr, TypeMember

logger = logging.getLogger(__name__)


def parse_reflection(
    raw: Any,
    diagnostics: list[Diagnostic],
    *,
    legacy_kinds: bool | None = None,
) -> Node:
    """Parse a reflection dict and its subtree.

    Raises MalformedNodeError when ``raw`` itself cannot be documented. Malformed
    children are skipped and recorded in ``diagnostics``; their siblings are
    still parsed.

    Numeric ``kind`` values changed in TypeDoc 0.23. Unless ``legacy_kinds`` is
    given, a document is read with the old values when its root has no
    ``schemaVersion`` and still carries a ``kindString``, as every node did
    before that release.
    """
    if not isinstance(raw, dict):
        raise MalformedNodeError(repr(raw)[:40], "not an object")
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedNodeError(str(raw.get("id", "?")), "missing name")
    kind_string = raw.get("kindString")
    kind_bits = raw.get("kind")
    if kind_string is None and kind_bits is None:
        raise MalformedNodeError(name, "missing kind")
    if legacy_kinds is None:
        legacy_kinds = "schemaVersion" not in raw and kind_string is not None

    children: list[Node] = []
    for child in _entries(raw.get("children"), name, "child"):
        try:
            children.append(parse_reflection(child, diagnostics, legacy_kinds=legacy_kinds))
        except MalformedNodeError as e:
            logger.warning("Skipping node under %s: %s", name, e)
            diagnostics.append(
                Diagnostic(DiagnosticKind.MALFORMED_NODE, e.name, str(e)),
            )

    kind = NodeKind.from_typedoc(kind_string, kind_bits, legacy=legacy_kinds)
    node_type = parse_type(raw.get("type"))
    if node_type is None and kind == NodeKind.PROPERTY:
        # Accessors carry their type on the getter signature.
        getter = raw.get("getSignature")
        if isinstance(getter, list):
            getter = getter[0] if getter else None
        if isinstance(getter, dict):
            node_type = parse_type(getter.get("type"))

    return Node(
        id=raw.get("id"),
        name=name,
        kind=kind,
        kind_string=str(kind_string or kind_bits),
        children=tuple(children),
        signatures=tuple(
            _parse_signature(s, name) for s in _entries(raw.get("signatures"), name, "signature")
        ),
        type=node_type,
        type_parameters=_parse_type_parameters(raw),
        extended_types=_parse_types(raw.get("extendedTypes")),
        implemented_types=_parse_types(raw.get("implementedTypes")),
        comment=parse_comment(raw.get("comment"), name),
        flags=_parse_flags(raw.get("flags")),
        sources=tuple(_parse_source(s, name) for s in _entries(raw.get("sources"), name, "source")),
        default_value=_str_or_none(raw.get("defaultValue")),
    )


def parse_comment(raw: Any, owner: str = "comment") -> Comment | None:
    """Parse either the legacy (shortText/text) or the current (summary) shape.

    Raises MalformedNodeError, naming ``owner``, for tags that are not objects.
    """
    if not isinstance(raw, dict):
        return None
    tags: list[CommentTag] = []
    returns = as_text(raw.get("returns"))
    if "summary" in raw:
        summary = as_text(raw.get("summary"))
        short_text, _, text = summary.partition("\n\n")
        for bt in _entries(raw.get("blockTags"), owner, "block tag"):
            tag = str(bt.get("tag", "")).lstrip("@")
            content = as_text(bt.get("content"))
            if tag in {"returns", "return"}:
                returns = content
                continue
            tags.append(CommentTag(tag=tag, text=content, param=bt.get("name")))
        tags.extend(
            CommentTag(tag=str(m).lstrip("@"), text="")
            for m in raw.get("modifierTags") or []
            if isinstance(m, str)
        )
    else:
        short_text = as_text(raw.get("shortText"))
        text = as_text(raw.get("text"))
        for t in _entries(raw.get("tags"), owner, "tag"):
            tag = str(t.get("tag", "")).lstrip("@")
            if tag in {"returns", "return"} and not returns:
                returns = as_text(t.get("text"))
                continue
            tags.append(
                CommentTag(tag=tag, text=as_text(t.get("text")), param=t.get("param")),
            )
    return Comment(
        short_text=short_text.strip(),
        text=text.strip(),
        returns=returns,
        tags=tuple(tags),
    )


def parse_type(raw: Any) -> TypeExpr | None:
    """Parse a TypeDoc type object into a TypeExpr."""
    if not isinstance(raw, dict):
        return None
    t = raw.get("type")
    if t == "intrinsic":
        return TypeExpr("intrinsic", name=str(raw.get("name", "")))
    if t == "reference":
        name = str(raw.get("name", ""))
        identity = raw.get("id", raw.get("target"))
        if not isinstance(identity, int):
            identity = name
        return TypeExpr(
            "reference",
            name=name,
            target=Pending(identity=identity, name=name, package=raw.get("package")),
            arguments=_parse_types(raw.get("typeArguments")),
        )
    if t == "array":
        element = parse_type(raw.get("elementType"))
        return TypeExpr("array", arguments=(element,) if element else ())
    if t in {"union", "intersection"}:
        return TypeExpr(t, arguments=_parse_types(raw.get("types")))
    if t == "tuple":
        return TypeExpr("tuple", arguments=_parse_types(raw.get("elements")))
    if t in {"stringLiteral", "literal"}:
        value = raw.get("value")
        if isinstance(value, str):
            text = f'"{value}"'
        else:
            text = "null" if value is None else str(value).lower()
        return TypeExpr("literal", name=text)
    if t == "typeParameter":
        return TypeExpr("type_parameter", name=str(raw.get("name", "")))
    if t == "query":
        queried = parse_type(raw.get("queryType"))
        return TypeExpr("query", arguments=(queried,) if queried else ())
    if t == "reflection":
        decl = raw.get("declaration")
        return _parse_declaration_type(decl if isinstance(decl, dict) else {})
    return TypeExpr("unknown", name=str(raw.get("name") or t or "unknown"))


def _parse_declaration_type(decl: dict[str, Any]) -> TypeExpr:
    # Unusable entries of an inline type are dropped.
    signatures = _as_list(decl.get("signatures"))
    if signatures and not decl.get("children"):
        params = _as_list(signatures[0].get("parameters"))
        ret = parse_type(signatures[0].get("type"))
        return TypeExpr(
            "function",
            arguments=(ret,) if ret else (),
            members=tuple(
                TypeMember(
                    str(p.get("name", "")),
                    parse_type(p.get("type")),
                    _parse_flags(p.get("flags")).is_optional,
                )
                for p in params
            ),
        )
    members = [
        TypeMember(
            str(c.get("name", "")),
            parse_type(c.get("type")),
            _parse_flags(c.get("flags")).is_optional,
        )
        for c in _as_list(decl.get("children"))
    ]
    for index_sig in _as_list(decl.get("indexSignature")):
        params = _as_list(index_sig.get("parameters")) or [{}]
        key = params[0]
        key_type = parse_type(key.get("type"))
        key_name = key_type.name if key_type else "string"
        member_name = f"[{key.get('name', 'key')}: {key_name}]"
        members.append(TypeMember(member_name, parse_type(index_sig.get("type"))))
    return TypeExpr("reflection", members=tuple(members))


def _parse_signature(raw: dict[str, Any], owner: str) -> Signature:
    return Signature(
        id=raw.get("id"),
        name=str(raw.get("name", "")),
        parameters=tuple(
            Parameter(
                name=str(p.get("name", "")),
                type=parse_type(p.get("type")),
                comment=parse_comment(p.get("comment"), owner),
                flags=_parse_flags(p.get("flags")),
                default_value=_str_or_none(p.get("defaultValue")),
            )
            for p in _entries(raw.get("parameters"), owner, "parameter")
        ),
        type=parse_type(raw.get("type")),
        comment=parse_comment(raw.get("comment"), owner),
        type_parameters=_parse_type_parameters(raw),
    )


def _parse_source(raw: dict[str, Any], owner: str) -> SourceRef:
    line = raw.get("line", 0)
    if not isinstance(line, int):
        raise MalformedNodeError(owner, f"source line {line!r} is not a number")
    return SourceRef(file_name=str(raw.get("fileName", "")), line=line)


def _parse_types(raw: Any) -> tuple[TypeExpr, ...]:
    parsed = (parse_type(x) for x in _as_list(raw))
    return tuple(x for x in parsed if x is not None)


def _parse_type_parameters(raw: dict[str, Any]) -> tuple[str, ...]:
    params = raw.get("typeParameter") or raw.get("typeParameters") or []
    return tuple(str(p.get("name")) for p in _as_list(params))


def _parse_flags(raw: Any) -> Flags:
    f = raw if isinstance(raw, dict) else {}
    return Flags(
        is_private=bool(f.get("isPrivate")),
        is_protected=bool(f.get("isProtected")),
        is_static=bool(f.get("isStatic")),
        is_optional=bool(f.get("isOptional")),
        is_const=bool(f.get("isConst")),
        is_readonly=bool(f.get("isReadonly")),
        is_external=bool(f.get("isExternal")),
    )


def _entries(v: Any, owner: str, what: str) -> list[Any]:
    """Return a list field of ``owner``; entries other than objects are malformed.

    Children are returned as they are so each one is reported on its own.
    """
    if v is None:
        return []
    if not isinstance(v, list):
        raise MalformedNodeError(owner, f"{what} list is not an array")
    if what != "child":
        for entry in v:
            if not isinstance(entry, dict):
                raise MalformedNodeError(owner, f"{what} {entry!r} is not an object")
    return v


def _as_list(v: Any) -> list[dict[str, Any]]:
    if isinstance(v, dict):
        return [v]
    if not isinstance(v, list):
        return []
    return [x for x in v if isinstance(x, dict)]


def _str_or_none(v: Any) -> str | None:
    if v is None:
        return None
    return str(v).strip()
