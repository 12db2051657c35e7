"""Logic for resolving every cross-reference held by an entity tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from typedoc2docfx.conversion_config import ConversionConfig
from typedoc2docfx.diagnostic import Diagnostic, DiagnosticKind
from typedoc2docfx.entity_record import EntityRecord, ReturnValue, Syntax
from typedoc2docfx.reference import (
    External,
    FinalReference,
    Pending,
    Reference,
    Resolved,
    Unresolved,
)
from typedoc2docfx.rewrite_links import rewrite_links
from typedoc2docfx.type_expr import TypeExpr
from typedoc2docfx.uid_table import UidTable

logger = logging.getLogger(__name__)

# Keyed by (subject uid, lookup scope, identity); holds the references records keep.
ReferenceKey = tuple[str, str | None, int | str]
ReferenceMap = Mapping[ReferenceKey, FinalReference]


@dataclass(frozen=True)
class ResolvedRoot:
    """A root entity tree whose references are all final."""

    record: EntityRecord
    references: ReferenceMap
    diagnostics: tuple[Diagnostic, ...]


def resolve_references(
    record: EntityRecord,
    uid_table: UidTable,
    config: ConversionConfig,
) -> ResolvedRoot:
    """Resolve the references of one root and all of its descendants.

    Each reference is looked up once; the target's own references are never
    followed, so cyclic type constraints cannot recurse.
    """
    resolver = _Resolver(uid_table, config)
    resolved = resolver.resolve_record(record)
    return ResolvedRoot(
        record=resolved,
        references=MappingProxyType(dict(resolver.references)),
        diagnostics=tuple(resolver.diagnostics),
    )


def external_href(ref: Pending, bases: Mapping[str, str]) -> str | None:
    """Return the documentation link for a reference into a configured library."""
    library = ref.package
    if library is None and "." in ref.name:
        library = ref.name.split(".", 1)[0]
    base = bases.get(library) if library else None
    if not base:
        return None
    if "{name}" in base:
        return base.replace("{name}", ref.name)
    return f"{base.rstrip('/')}/{ref.name}"


class _Resolver:
    def __init__(self, uid_table: UidTable, config: ConversionConfig) -> None:
        self.uid_table = uid_table
        self.config = config
        self.references: dict[ReferenceKey, FinalReference] = {}
        self.diagnostics: list[Diagnostic] = []

    def resolve_record(self, record: EntityRecord) -> EntityRecord:
        subject = record.uid
        scope = record.full_name

        def text(value: str, field: str) -> str:
            def link(target: str) -> FinalReference:
                return self.resolve(Pending(target, target), subject, field, scope, held=False)

            return rewrite_links(value, link)

        syntax = record.syntax
        if syntax is not None:
            syntax = Syntax(
                content=syntax.content,
                parameters=tuple(
                    replace(
                        p,
                        type=self.resolve_type(p.type, subject, f"parameter {p.name}"),
                        description=text(p.description, f"parameter {p.name}"),
                    )
                    for p in syntax.parameters
                ),
                returns=ReturnValue(
                    type=self.resolve_type(syntax.returns.type, subject, "return"),
                    description=text(syntax.returns.description, "return"),
                )
                if syntax.returns
                else None,
            )

        return replace(
            record,
            summary=text(record.summary, "summary"),
            remarks=text(record.remarks, "remarks"),
            example=text(record.example, "example"),
            deprecated=text(record.deprecated, "deprecated")
            if record.deprecated is not None
            else None,
            syntax=syntax,
            inheritance=tuple(
                self.resolve_type(t, subject, "inheritance") for t in record.inheritance
            ),
            implements=tuple(
                self.resolve_type(t, subject, "implements") for t in record.implements
            ),
            see_also=tuple(
                replace(
                    link,
                    target=self.resolve(link.target, subject, "see also", scope),
                    text=text(link.text, "see also"),
                )
                for link in record.see_also
            ),
            children=tuple(self.resolve_record(c) for c in record.children),
        )

    def resolve_type(self, expr: TypeExpr | None, subject: str, field: str) -> TypeExpr | None:
        if expr is None:
            return None
        target = expr.target
        if target is not None:
            target = self.resolve(target, subject, field)
        return replace(
            expr,
            target=target,
            arguments=tuple(
                self.resolve_type(a, subject, field) or a for a in expr.arguments
            ),
            members=tuple(
                replace(m, type=self.resolve_type(m.type, subject, field))
                for m in expr.members
            ),
        )

    def resolve(
        self,
        ref: Reference,
        subject: str,
        field: str,
        scope: str | None = None,
        *,
        held: bool = True,
    ) -> FinalReference:
        """Resolve a single reference (one lookup, no further indirection).

        Links rewritten into comment text are not ``held`` by the record and
        stay out of the reference map.
        """
        if not isinstance(ref, Pending):
            return ref
        result = self._lookup(ref, scope)
        if held:
            self.references[(subject, scope, ref.identity)] = result
        if isinstance(result, Unresolved):
            logger.warning("%s: unresolved reference %r in %s", subject, ref.name, field)
            self.diagnostics.append(
                Diagnostic(
                    DiagnosticKind.UNRESOLVED_REFERENCE,
                    subject,
                    f"Unresolved reference {ref.name!r} in {field}",
                ),
            )
        return result

    def _lookup(self, ref: Pending, scope: str | None) -> FinalReference:
        uid = self.uid_table.lookup(ref.identity)
        if uid is None and isinstance(ref.identity, str) and scope:
            # Names in comments are relative to the enclosing declarations.
            parts = scope.split(".")
            while parts and uid is None:
                uid = self.uid_table.lookup(".".join([*parts, ref.identity]))
                parts.pop()
        if uid is not None:
            return Resolved(uid=uid, name=ref.name)
        href = external_href(ref, self.config.external_link_bases)
        if href:
            return External(href=href, name=ref.name)
        return Unresolved(name=ref.name)
