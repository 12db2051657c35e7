"""Orchestration of the transformation pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from typedoc2docfx.build_package_indexes import build_package_indexes
from typedoc2docfx.build_toc import build_toc
from typedoc2docfx.conversion_config import ConversionConfig
from typedoc2docfx.diagnostic import Diagnostic, DiagnosticKind
from typedoc2docfx.errors import MalformedNodeError
from typedoc2docfx.flatten import flatten
from typedoc2docfx.package_index import PackageIndex
from typedoc2docfx.page import Page
from typedoc2docfx.parse_reflection import parse_reflection
from typedoc2docfx.reflection_node import Node
from typedoc2docfx.resolve_references import ResolvedRoot, resolve_references
from typedoc2docfx.toc_node import TocNode
from typedoc2docfx.walk_tree import walk_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Everything a run produces, including the problems it ran into."""

    pages: tuple[Page, ...]
    tocs: tuple[TocNode, ...]
    package_indexes: tuple[PackageIndex, ...]
    diagnostics: tuple[Diagnostic, ...]


def convert_reflection(raw: dict[str, Any], config: ConversionConfig) -> ConversionResult:
    """Parse a decoded TypeDoc JSON document and run the pipeline on it."""
    diagnostics: list[Diagnostic] = []
    try:
        project = parse_reflection(raw, diagnostics)
    except MalformedNodeError as e:
        logger.warning("Cannot convert reflection document: %s", e)
        diagnostics.append(Diagnostic(DiagnosticKind.MALFORMED_NODE, e.name, str(e)))
        return ConversionResult((), (), (), tuple(diagnostics))
    result = run_conversion([project], config)
    return ConversionResult(
        pages=result.pages,
        tocs=result.tocs,
        package_indexes=result.package_indexes,
        diagnostics=(*diagnostics, *result.diagnostics),
    )


def run_conversion(projects: Sequence[Node], config: ConversionConfig) -> ConversionResult:
    """Run walk, resolution, flattening, then TOC and package indexes.

    Each phase consumes the complete output of the previous one and returns
    new structures. Uids are unique once the walk is done, so every page uid
    is too.
    """
    walk = walk_tree(projects, config)
    diagnostics = list(walk.diagnostics)

    resolved: list[ResolvedRoot] = []
    for root in walk.roots:
        r = resolve_references(root, walk.uid_table, config)
        diagnostics.extend(r.diagnostics)
        resolved.append(r)

    pages = flatten(resolved, config)
    tocs = tuple(
        build_toc(walk.roots, pages, package, config)
        for package in dict.fromkeys(walk.packages)
    )
    package_indexes = build_package_indexes(pages)

    logger.info(
        "Converted %d pages with %d diagnostics",
        len(pages),
        len(diagnostics),
    )
    return ConversionResult(
        pages=pages,
        tocs=tocs,
        package_indexes=package_indexes,
        diagnostics=tuple(diagnostics),
    )

