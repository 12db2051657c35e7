"""Logic for converting the reflection tree into entity records and uids."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from types import MappingProxyType

from typedoc2docfx.conversion_config import ConversionConfig
from typedoc2docfx.diagnostic import Diagnostic, DiagnosticKind
from typedoc2docfx.entity_record import (
    EntityRecord,
    LinkRef,
    ReturnValue,
    Syntax,
    SyntaxParameter,
)
from typedoc2docfx.errors import ConversionError, DuplicateUidError, MalformedNodeError
from typedoc2docfx.is_callable_kind import is_callable_kind
from typedoc2docfx.node_kind import NodeKind
from typedoc2docfx.reference import Pending
from typedoc2docfx.reflection_node import Comment, Node, Signature
from typedoc2docfx.render_syntax import render_syntax
from typedoc2docfx.rewrite_links import link_targets
from typedoc2docfx.source_link import source_link_for
from typedoc2docfx.type_expr import TypeExpr
from typedoc2docfx.uid_table import UidTable

logger = logging.getLogger(__name__)

EXCLUDING_TAGS = ("internal", "hidden", "ignore")
PREVIEW_TAGS = ("beta", "preview", "alpha", "experimental")
INLINE_TYPE_KINDS = {"reflection", "function"}


@dataclass(frozen=True)
class WalkResult:
    """Entity forest and uid assignments for a whole run."""

    roots: tuple[EntityRecord, ...]
    packages: tuple[str, ...]
    uid_table: UidTable
    diagnostics: tuple[Diagnostic, ...]


@dataclass(frozen=True)
class _TopLevel:
    node: Node
    module: str | None


def walk_tree(projects: Sequence[Node], config: ConversionConfig) -> WalkResult:
    """Walk every package node and assign uids to everything documented.

    Each top-level declaration is walked on its own; a uid collision drops
    only the root that caused it.
    """
    by_id: dict[int, str] = {}
    qualified: dict[str, str] = {}
    simple: dict[str, set[str]] = defaultdict(set)
    uids: set[str] = set()
    roots: list[EntityRecord] = []
    packages: list[str] = []
    diagnostics: list[Diagnostic] = []
    # Package names are the uids of the orphan pages.
    reserved = {project.name for project in projects}

    for project in projects:
        package = project.name
        packages.append(package)
        for top in _top_level(project.children, config):
            walker = _RootWalker(package, config)
            try:
                records = walker.walk(top.node, parent_uid=None, module=top.module)
                clash = sorted(walker.uids & (uids | reserved))
                if clash:
                    raise DuplicateUidError(clash[0])
            except ConversionError as e:
                diagnostics.extend(walker.diagnostics)
                diagnostics.append(_diagnostic_for(e, top.node.name))
                logger.warning("Dropping root %s: %s", top.node.name, e)
                continue

            diagnostics.extend(walker.diagnostics)
            uids |= walker.uids
            by_id.update(walker.by_id)
            for name, uid in walker.qualified.items():
                qualified.setdefault(name, uid)
            for name, found in walker.simple.items():
                simple[name] |= found
            roots.extend(records)

    by_name = {name: next(iter(found)) for name, found in simple.items() if len(found) == 1}
    by_name.update(qualified)
    logger.info("Walked %d roots, assigned %d uids", len(roots), len(uids))
    return WalkResult(
        roots=tuple(roots),
        packages=tuple(packages),
        uid_table=UidTable(
            by_id=MappingProxyType(by_id),
            by_name=MappingProxyType(by_name),
            uids=frozenset(uids),
        ),
        diagnostics=tuple(diagnostics),
    )


def _top_level(children: Sequence[Node], config: ConversionConfig) -> Iterator[_TopLevel]:
    """Yield the nodes that become roots, unwrapping modules unless grouping."""
    for child in children:
        if child.kind == NodeKind.MODULE and not config.module_grouping:
            yield from _top_level(child.children, config)
        else:
            yield _TopLevel(child, None)


def _diagnostic_for(e: ConversionError, subject: str) -> Diagnostic:
    if isinstance(e, DuplicateUidError):
        return Diagnostic(DiagnosticKind.DUPLICATE_UID, e.uid, str(e))
    if isinstance(e, MalformedNodeError):
        return Diagnostic(DiagnosticKind.MALFORMED_NODE, e.name, str(e))
    return Diagnostic(DiagnosticKind.MALFORMED_NODE, subject, str(e))


def _is_excluded(node: Node, comment: Comment | None) -> bool:
    if node.flags.is_private or node.flags.is_protected:
        return True
    return comment is not None and comment.has_tag(*EXCLUDING_TAGS)


def _display_name(node: Node) -> str:
    if node.kind == NodeKind.MODULE:
        return node.name.strip("\"'")
    return node.name


class _RootWalker:
    """Walks one root; keeps its uids local until the root is accepted."""

    def __init__(self, package: str, config: ConversionConfig) -> None:
        self.package = package
        self.config = config
        self.uids: set[str] = set()
        self.by_id: dict[int, str] = {}
        self.qualified: dict[str, str] = {}
        self.simple: dict[str, set[str]] = defaultdict(set)
        self.diagnostics: list[Diagnostic] = []
        self._inline_uids: set[str] = set()
        self._inline_counts: dict[str, int] = defaultdict(int)

    def walk(self, node: Node, parent_uid: str | None, module: str | None) -> list[EntityRecord]:
        """Return the records for ``node`` (several for overloaded callables)."""
        if node.kind == NodeKind.PACKAGE:
            logger.debug("Skipping nested package %s", node.name)
            return []
        if _is_excluded(node, node.comment):
            logger.debug("Skipping non-public %s", node.name)
            return []

        name = _display_name(node)
        full_name = f"{parent_uid}.{name}" if parent_uid else name
        if node.kind is None:
            raise MalformedNodeError(full_name, f"unsupported kind {node.kind_string!r}")

        if is_callable_kind(node.kind):
            if not node.signatures:
                raise MalformedNodeError(full_name, "callable without signatures")
            records = [
                self._callable_record(node, sig, i, full_name, module)
                for i, sig in enumerate(node.signatures)
                if not _is_excluded(node, sig.comment)
            ]
            if records:
                self._register(node.id, records[0].uid, full_name, name)
            return records

        uid = self._claim(full_name)
        self._register(node.id, uid, full_name, name)
        child_module = full_name if node.kind == NodeKind.MODULE else module
        children: list[EntityRecord] = []
        for child in node.children:
            try:
                children.extend(self.walk(child, uid, child_module))
            except MalformedNodeError as e:
                logger.warning("Skipping node under %s: %s", uid, e)
                self.diagnostics.append(
                    Diagnostic(DiagnosticKind.MALFORMED_NODE, e.name, str(e)),
                )

        comment = node.comment
        returns = None
        if node.kind in {
            NodeKind.PROPERTY,
            NodeKind.VARIABLE,
            NodeKind.EVENT,
            NodeKind.TYPE_ALIAS,
        }:
            returns = ReturnValue(type=self._inline(node.type, uid))
        return [
            EntityRecord(
                uid=uid,
                name=name,
                full_name=full_name,
                package=self.package,
                kind=node.kind,
                children=tuple(children),
                syntax=Syntax(content=render_syntax(node), returns=returns),
                inheritance=tuple(self._inline(t, uid) for t in node.extended_types),
                implements=tuple(self._inline(t, uid) for t in node.implemented_types),
                source=source_link_for(node, self.config.repository),
                module=module,
                numeric_value=node.default_value
                if node.kind == NodeKind.ENUM_MEMBER
                else None,
                **_comment_fields(comment),
            ),
        ]

    def _callable_record(
        self,
        node: Node,
        sig: Signature,
        index: int,
        full_name: str,
        module: str | None,
    ) -> EntityRecord:
        uid = self._claim(full_name if index == 0 else f"{full_name}_{index}")
        if sig.id is not None:
            self.by_id[sig.id] = uid
        comment = sig.comment or node.comment
        params = tuple(
            SyntaxParameter(
                name=p.name,
                type=self._inline(p.type, uid),
                description=_param_description(p.name, p.comment, comment),
                optional=p.flags.is_optional,
            )
            for p in sig.parameters
        )
        returns = None
        if node.kind != NodeKind.CONSTRUCTOR:
            returns = ReturnValue(
                type=self._inline(sig.type, uid),
                description=comment.returns if comment else "",
            )
        return EntityRecord(
            uid=uid,
            name=_display_name(node),
            full_name=full_name,
            package=self.package,
            kind=node.kind,
            syntax=Syntax(
                content=render_syntax(node, sig),
                parameters=params,
                returns=returns,
            ),
            source=source_link_for(node, self.config.repository),
            module=module,
            **_comment_fields(comment),
        )

    def _claim(self, uid: str) -> str:
        if uid in self.uids or uid in self._inline_uids:
            raise DuplicateUidError(uid)
        self.uids.add(uid)
        return uid

    def _register(self, node_id: int | None, uid: str, full_name: str, name: str) -> None:
        if node_id is not None:
            self.by_id[node_id] = uid
        self.qualified.setdefault(full_name, uid)
        self.simple[name].add(uid)

    def _inline(self, expr: TypeExpr | None, owner_uid: str) -> TypeExpr | None:
        """Give anonymous inline types a uid scoped to their owner."""
        if expr is None:
            return None
        uid = expr.uid
        if expr.kind in INLINE_TYPE_KINDS:
            uid = f"{owner_uid}.__type{self._inline_counts[owner_uid]}"
            self._inline_counts[owner_uid] += 1
            if uid in self.uids or uid in self._inline_uids:
                raise DuplicateUidError(uid)
            self._inline_uids.add(uid)
        return replace(
            expr,
            uid=uid,
            arguments=tuple(
                a for a in (self._inline(a, owner_uid) for a in expr.arguments) if a is not None
            ),
            members=tuple(
                replace(m, type=self._inline(m.type, owner_uid)) for m in expr.members
            ),
        )


def _comment_fields(comment: Comment | None) -> dict:
    """Split a comment into the text fields of an EntityRecord."""
    if comment is None:
        return {}
    summary = comment.short_text
    remarks = comment.text
    if not summary:
        summary, remarks = remarks, ""
    see_also = []
    for tag in comment.tags:
        if tag.tag != "see" or not tag.text:
            continue
        targets = link_targets(tag.text) or [tag.text.split()[0]]
        see_also.append(
            LinkRef(target=Pending(identity=targets[0], name=targets[0]), text=tag.text),
        )
    return {
        "summary": summary,
        "remarks": remarks,
        "example": comment.tag_text("example") or "",
        "deprecated": comment.tag_text("deprecated"),
        "is_preview": comment.has_tag(*PREVIEW_TAGS),
        "see_also": tuple(see_also),
    }


def _param_description(name: str, own: Comment | None, owner: Comment | None) -> str:
    if own is not None:
        text = own.short_text or own.text
        if text:
            return text
    if owner is not None:
        for tag in owner.tags:
            if tag.tag == "param" and tag.param == name:
                return tag.text
    return ""
