"""
Serialization of field forests back to selector strings.
"""

from fieldtree.core.field_node import FieldNode
from fieldtree.parsing.parser import FIELD_SEPARATOR, GROUP_CLOSE, GROUP_OPEN


def serialize_field_structure(fields: list[FieldNode]) -> str:
    """
    Serialize a forest of field nodes to a selector string.

    Leaf nodes render as their bare name, nodes with children as
    "name(child,...)". This is the inverse of parse_field_string for any
    string the parser produces itself. The walk keeps one iterator per open
    group instead of recursing, so any depth the parser builds can be written.

    Params:
        fields: Root-level nodes to serialize

    Returns:
        Selector string, empty for an empty forest
    """
    parts: list[str] = []
    pending = [iter(fields)]
    needs_separator = False

    while pending:
        node = next(pending[-1], None)
        if node is None:
            pending.pop()
            if pending:
                parts.append(GROUP_CLOSE)
            needs_separator = True
            continue

        if needs_separator:
            parts.append(FIELD_SEPARATOR)
        parts.append(node.name)
        if node.is_leaf:
            needs_separator = True
        else:
            parts.append(GROUP_OPEN)
            pending.append(iter(node.children))
            needs_separator = False

    return "".join(parts)
