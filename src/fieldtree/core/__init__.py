"""
Core fieldtree components.

This package provides the field tree model and the dot-path helpers used to
address nodes inside it.
"""

from fieldtree.core.field_node import FieldNode, Forest
from fieldtree.core.path_utils import (
    find_field,
    resolve_field_path,
    split_field_path,
)

__all__ = [
    "FieldNode",
    "Forest",
    "find_field",
    "resolve_field_path",
    "split_field_path",
]
