"""Data models for cross-reference targets before and after resolution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Pending:
    """A reference still naming a TypeDoc identity (node id or name)."""

    identity: int | str
    name: str
    package: str | None = None  # originating library, when TypeDoc reports one


@dataclass(frozen=True)
class Resolved:
    """A reference to an entity documented in this run."""

    uid: str
    name: str


@dataclass(frozen=True)
class External:
    """A reference to documentation hosted elsewhere."""

    href: str
    name: str


@dataclass(frozen=True)
class Unresolved:
    """A reference nothing could be found for; rendered as plain text."""

    name: str


Reference = Pending | Resolved | External | Unresolved
FinalReference = Resolved | External | Unresolved
