"""Data model for the per-package list of pages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageIndex:
    """Every page uid of one package, alphabetically ordered."""

    package: str
    uids: tuple[str, ...]
