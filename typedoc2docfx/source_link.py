"""Logic for attaching repository source links to entities."""

from typedoc2docfx.conversion_config import RepositoryContext
from typedoc2docfx.entity_record import RemoteSource, SourceLink
from typedoc2docfx.reflection_node import Node


def source_link_for(node: Node, repository: RepositoryContext | None) -> SourceLink | None:
    """Describe where ``node`` is declared, with a browsable href when possible."""
    if not node.sources:
        return None
    src = node.sources[0]
    if repository is None:
        return SourceLink(path=src.file_name, start_line=src.line)
    base = repository.base_path.strip("/")
    remote_path = f"{base}/{src.file_name}" if base else src.file_name
    href = f"{repository.repo_url.rstrip('/')}/blob/{repository.branch}/{remote_path}#L{src.line}"
    return SourceLink(
        path=src.file_name,
        start_line=src.line,
        remote=RemoteSource(
            repo=repository.repo_url,
            branch=repository.branch,
            path=remote_path,
        ),
        href=href,
    )
