"""
fieldtree - Parse, edit and serialize nested field selector strings

fieldtree models selectors such as "id,project(id,name)" as a forest of field
nodes that can be extended by dot-path and serialized back for REST queries.
"""

from importlib.metadata import version

from fieldtree.core.field_node import FieldNode
from fieldtree.definitions import (
    DEFAULT_AGILE_FIELDS,
    DEFAULT_FIELD_SETS,
    DEFAULT_ISSUE_FIELDS,
    DEFAULT_SPRINT_FIELDS,
)
from fieldtree.parsing import parse_field_string, serialize_field_structure
from fieldtree.registry import FieldSetRegistry
from fieldtree.structure import (
    FieldBuilder,
    add_field,
    normalize_field_string,
    remove_field,
)

__version__ = version("fieldtree")

__all__ = [
    "__version__",
    "FieldNode",
    "FieldBuilder",
    "FieldSetRegistry",
    "parse_field_string",
    "serialize_field_structure",
    "add_field",
    "remove_field",
    "normalize_field_string",
    "DEFAULT_ISSUE_FIELDS",
    "DEFAULT_SPRINT_FIELDS",
    "DEFAULT_AGILE_FIELDS",
    "DEFAULT_FIELD_SETS",
]
