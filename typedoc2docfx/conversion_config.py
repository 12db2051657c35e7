"""Explicit configuration threaded through every pipeline phase."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class RepositoryContext:
    """Where the analyzed sources are hosted; used only for source links."""

    repo_url: str
    branch: str
    base_path: str = ""


@dataclass(frozen=True)
class ConversionConfig:
    """Options consumed by the transformation core."""

    module_grouping: bool = False
    alphabetical_order: bool = True
    external_link_bases: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}),
    )
    repository: RepositoryContext | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConversionConfig:
        """Build a config from the merged dict returned by ``load_config``."""
        repo = data.get("repository")
        repository = None
        if isinstance(repo, dict) and repo.get("repo_url") and repo.get("branch"):
            repository = RepositoryContext(
                repo_url=str(repo["repo_url"]),
                branch=str(repo["branch"]),
                base_path=str(repo.get("base_path") or ""),
            )
        bases = data.get("external_link_bases") or {}
        return cls(
            module_grouping=bool(data.get("module_grouping", False)),
            alphabetical_order=bool(data.get("alphabetical_order", True)),
            external_link_bases=MappingProxyType(
                {str(k): str(v) for k, v in bases.items()},
            ),
            repository=repository,
        )
