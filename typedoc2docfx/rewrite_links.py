"""Logic for rewriting TypeDoc inline links to DocFX cross-references."""

import re
from collections.abc import Callable

from typedoc2docfx.reference import External, FinalReference, Resolved

LINK_TAG_RE = re.compile(
    r"\{@link(?:code|plain)?\s+([^}\s|]+)\s*(?:\|\s*([^}]*?)|\s+([^}]*?))?\s*\}",
)  # {@link Target|label} / {@link Target label}
DOUBLE_BRACKET_RE = re.compile(r"\[\[([^\]|]+)(?:\|([^\]]+))?\]\]")  # [[Target]]
URL_RE = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


def link_targets(text: str) -> list[str]:
    """Return the targets of all inline links in ``text``, in order."""
    found = [(m.start(), m.group(1)) for m in LINK_TAG_RE.finditer(text)]
    found += [(m.start(), m.group(1).strip()) for m in DOUBLE_BRACKET_RE.finditer(text)]
    return [target for _, target in sorted(found)]


def rewrite_links(text: str, resolve: Callable[[str], FinalReference]) -> str:
    """Rewrite inline links to Markdown links.

    Resolved targets become ``[label](xref:uid)``, external ones
    ``[label](href)``; anything unresolved degrades to ``label`` in backticks.
    """
    if not text:
        return ""

    def repl_tag(m: re.Match) -> str:
        target = m.group(1)
        label = (m.group(2) or m.group(3) or target).strip()
        return _link(target, label, resolve)

    text = LINK_TAG_RE.sub(repl_tag, text)

    def repl_brackets(m: re.Match) -> str:
        target = m.group(1).strip()
        label = (m.group(2) or target).strip()
        return _link(target, label, resolve)

    return DOUBLE_BRACKET_RE.sub(repl_brackets, text)


def _link(target: str, label: str, resolve: Callable[[str], FinalReference]) -> str:
    if URL_RE.match(target):
        return f"[{label}]({target})"
    ref = resolve(target)
    if isinstance(ref, Resolved):
        return f"[{label}](xref:{ref.uid})"
    if isinstance(ref, External):
        return f"[{label}]({ref.href})"
    return f"`{label}`"
