"""
Dot-path helpers for addressing nodes in a field forest.

Paths such as "project.custom.field1" name a chain of nested fields. These
helpers are shared by the builder and the static patch operations so that
both walk a forest the same way: exact name match, first match per level.
"""

from fieldtree.core.field_node import FieldNode


def split_field_path(path: str) -> list[str]:
    """
    Split a dot-path into its segments.

    Segments are returned verbatim, so an empty path yields a single empty
    segment which never matches a stored node.

    Params:
        path: Dot-separated field path (e.g., "project.custom")

    Returns:
        List of path segments

    Examples:
        "project.custom" -> ["project", "custom"]
        "" -> [""]
    """
    return path.split(".")


def find_field(nodes: list[FieldNode], name: str) -> FieldNode | None:
    """Return the first node in `nodes` named exactly `name`, or None."""
    return next((node for node in nodes if node.name == name), None)


def resolve_field_path(nodes: list[FieldNode], parts: list[str]) -> FieldNode | None:
    """
    Walk a sequence of path segments down a forest.

    Params:
        nodes: Root-level nodes to start the walk from
        parts: Path segments, outermost first

    Returns:
        The node addressed by the full path, or None if any segment is
        missing or `parts` is empty
    """
    node = None
    level = nodes
    for part in parts:
        node = find_field(level, part)
        if node is None:
            return None
        level = node.children
    return node
