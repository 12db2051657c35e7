"""Logic for grouping final pages into per-package indexes."""

from collections.abc import Sequence

from typedoc2docfx.package_index import PackageIndex
from typedoc2docfx.page import Page


def build_package_indexes(pages: Sequence[Page]) -> tuple[PackageIndex, ...]:
    """Emit one index per package listing its page uids.

    Uids are always sorted alphabetically, whatever the sibling ordering
    setting, since the index is navigation metadata rather than content.
    """
    by_package: dict[str, list[str]] = {}
    for page in pages:
        by_package.setdefault(page.package, []).append(page.uid)
    return tuple(
        PackageIndex(package=package, uids=tuple(sorted(uids, key=lambda u: (u.lower(), u))))
        for package, uids in sorted(by_package.items(), key=lambda kv: kv[0].lower())
    )
