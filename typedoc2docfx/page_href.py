"""Utility for deriving a page's file name from its uid."""

import re

UNSAFE_RE = re.compile(r"[^A-Za-z0-9_.@$-]+")


def page_href(uid: str) -> str:
    """Generate the relative href of the page for ``uid``.

    Module paths use dots instead of slashes (``blob/service.Foo`` becomes
    ``blob.service.Foo.yml``) and anything after a ``(`` is dropped.
    """
    name = uid.split("(")[0]
    name = name.replace("/", ".")
    name = UNSAFE_RE.sub("-", name).strip("-.")
    # Avoid pathological emptiness
    return f"{name or 'Unknown'}.yml"
