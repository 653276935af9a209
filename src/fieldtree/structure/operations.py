"""
Path-addressable patch operations on selector strings.

Each operation parses its input into a private forest, edits it in place and
returns the serialized result. A path that does not resolve leaves the forest
untouched, so the caller gets the original selector back in normalized form.
"""

import logging

from fieldtree.core.path_utils import resolve_field_path, split_field_path
from fieldtree.parsing.parser import parse_field_string
from fieldtree.parsing.serializer import serialize_field_structure

logger = logging.getLogger(__name__)


def add_field(field_string: str, path: str, new_field: str) -> str:
    """
    Append a selector fragment under the field addressed by a dot-path.

    The fragment may carry its own nesting (e.g., "author(id,login)"); all of
    its top-level nodes are appended to the target's children. No duplicate
    check is made, so adding an existing child name twice yields two copies.

    Params:
        field_string: Original selector string
        path: Dot-separated path of the parent field (e.g., "project.custom")
        new_field: Selector fragment to append under the parent

    Returns:
        Updated selector string, or the original reserialized if the path
        does not resolve
    """
    fields = parse_field_string(field_string)
    target = resolve_field_path(fields, split_field_path(path))

    if target is None:
        logger.debug("Path %r not found; leaving selector unchanged", path)
    else:
        target.children.extend(parse_field_string(new_field))

    return serialize_field_structure(fields)


def remove_field(field_string: str, path: str) -> str:
    """
    Remove the field addressed by a dot-path.

    Only the first matching sibling is removed. A parent left without
    children is kept and serializes as a leaf.

    Params:
        field_string: Original selector string
        path: Dot-separated path of the field to remove (e.g., "project.custom")

    Returns:
        Updated selector string, or the original reserialized if the path
        does not resolve
    """
    fields = parse_field_string(field_string)
    *parent_parts, last_part = split_field_path(path)

    if parent_parts:
        parent = resolve_field_path(fields, parent_parts)
        siblings = parent.children if parent is not None else None
    else:
        siblings = fields

    index = None
    if siblings is not None:
        index = next(
            (i for i, node in enumerate(siblings) if node.name == last_part), None
        )

    if index is None:
        logger.debug("Path %r not found; leaving selector unchanged", path)
    else:
        del siblings[index]

    return serialize_field_structure(fields)


def normalize_field_string(field_string: str | None) -> str:
    """
    Rewrite a selector string in canonical form.

    Empty segments are dropped, names are trimmed, unterminated groups are
    closed and unmatched closing parentheses are discarded.

    Params:
        field_string: Selector string, possibly malformed

    Returns:
        Canonical selector string

    Examples:
        " id , project(name" -> "id,project(name)"
    """
    return serialize_field_structure(parse_field_string(field_string))
