"""
fieldtree exception classes.

This package provides all exception types used throughout fieldtree.
"""

from fieldtree.exceptions.core import (
    FieldSetNameError,
    FieldTreeError,
    UnknownFieldSetError,
)

__all__ = [
    "FieldTreeError",
    "FieldSetNameError",
    "UnknownFieldSetError",
]
