"""Exceptions raised while transforming a reflection tree."""


class ConversionError(Exception):
    """Base class for errors confined to one node or one root."""


class MalformedNodeError(ConversionError):
    """A node lacks fields required to document it."""

    def __init__(self, name: str, reason: str) -> None:
        """Record the offending node name and why it was rejected."""
        super().__init__(f"Malformed node {name!r}: {reason}")
        self.name = name
        self.reason = reason


class DuplicateUidError(ConversionError):
    """Two entities were assigned the same uid."""

    def __init__(self, uid: str) -> None:
        """Record the colliding uid."""
        super().__init__(f"Duplicate uid {uid!r}")
        self.uid = uid
