"""Frozen mapping from TypeDoc node identities to assigned uids."""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class UidTable:
    """Uids assigned by the tree walk.

    ``by_id`` maps TypeDoc numeric ids (of nodes and of their signatures).
    ``by_name`` maps qualified names, and simple names that are unambiguous,
    for links written by name in comments.
    """

    by_id: Mapping[int, str]
    by_name: Mapping[str, str]
    uids: frozenset[str]

    def lookup(self, identity: int | str) -> str | None:
        """Return the uid for an identity, or None when it was never assigned."""
        if isinstance(identity, int):
            return self.by_id.get(identity)
        if identity in self.uids:
            return identity
        return self.by_name.get(identity)
