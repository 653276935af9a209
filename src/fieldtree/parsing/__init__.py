"""
fieldtree parsing components.

This package provides the selector string parser and its inverse serializer.
"""

from fieldtree.parsing.parser import parse_field_string
from fieldtree.parsing.serializer import serialize_field_structure

__all__ = [
    "parse_field_string",
    "serialize_field_structure",
]
