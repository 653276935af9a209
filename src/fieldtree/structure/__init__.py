"""
fieldtree structure editing components.

This package provides the fluent FieldBuilder and the string-in, string-out
patch operations that add or remove fields by dot-path.
"""

from fieldtree.structure.builder import FieldBuilder
from fieldtree.structure.operations import (
    add_field,
    normalize_field_string,
    remove_field,
)

__all__ = [
    "FieldBuilder",
    "add_field",
    "normalize_field_string",
    "remove_field",
]
