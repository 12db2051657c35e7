"""Logic for converting comment payloads to plain text."""


def as_text(v: object) -> str:
    """Convert a comment value to a string.

    Handles None, plain strings, and TypeDoc display-part lists, where inline
    tags such as ``{@link Foo}`` are re-assembled into their source form.
    """
    if v is None:
        return ""
    if isinstance(v, str):
        return v.strip()
    if isinstance(v, list):
        if all(isinstance(x, dict) for x in v):
            return "".join(_part_text(x) for x in v).strip()
        return "\n".join(as_text(x) for x in v if as_text(x))
    return str(v).strip()


def _part_text(part: dict) -> str:
    text = str(part.get("text") or "")
    if part.get("kind") == "inline-tag":
        return f"{{{part.get('tag', '@link')} {text}}}"
    return text
