"""Data model for one flattened output unit."""

from dataclasses import dataclass

from typedoc2docfx.entity_record import EntityRecord
from typedoc2docfx.reference import FinalReference


@dataclass(frozen=True)
class Page:
    """A primary entity plus the members inlined into it."""

    uid: str
    href: str
    package: str
    primary: EntityRecord  # children stripped; see ``members``
    members: tuple[EntityRecord, ...] = ()
    child_uids: tuple[str, ...] = ()  # all children of the primary, ordered
    references: tuple[FinalReference, ...] = ()

    @property
    def items(self) -> tuple[EntityRecord, ...]:
        """Primary first, then members, as they appear in the output file."""
        return (self.primary, *self.members)
