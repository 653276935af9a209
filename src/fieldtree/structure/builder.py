"""
Fluent builder for field selector strings.

FieldBuilder owns a single forest and accumulates fields into it, either as
plain names, dot-paths or whole selector fragments. Duplicate names are only
suppressed at the level an instance method inserts into; existing subtrees
are never merged.
"""

from collections.abc import Iterable

from fieldtree.core.field_node import FieldNode, Forest
from fieldtree.core.path_utils import find_field, split_field_path
from fieldtree.parsing.parser import parse_field_string
from fieldtree.parsing.serializer import serialize_field_structure
from fieldtree.structure.operations import add_field, remove_field


class FieldBuilder:
    """
    Builder for selector strings such as "id,project(id,name)".

    Usage:
        FieldBuilder().add("id").add("project.name").build()
        # -> "id,project(name)"

    Params:
        field_string: Optional selector string to start from
    """

    parse_field_string = staticmethod(parse_field_string)
    serialize_field_structure = staticmethod(serialize_field_structure)
    add_field = staticmethod(add_field)
    remove_field = staticmethod(remove_field)

    def __init__(self, field_string: str | None = None):
        self.root_fields: Forest = parse_field_string(field_string)

    @classmethod
    def from_string(cls, field_string: str) -> "FieldBuilder":
        """Create a builder holding the parsed fields of `field_string`."""
        return cls(field_string)

    def add(self, field: str | None) -> "FieldBuilder":
        """
        Add a field name or dot-path.

        A plain name is appended at the root unless a root field with the same
        name already exists. A dot-path such as "project.custom.id" extends
        the nested chain, reusing nodes that already exist along the way.

        Params:
            field: Field name or dot-path; None and blank strings are ignored

        Returns:
            This builder, for chaining
        """
        if not field or not field.strip():
            return self

        if "." in field:
            self._add_nested_field(field)
        else:
            name = field.strip()
            if find_field(self.root_fields, name) is None:
                self.root_fields.append(FieldNode(name=name))
        return self

    def add_fields(self, fields: Iterable[str | None]) -> "FieldBuilder":
        """Add each field name or dot-path in order."""
        for field in fields:
            self.add(field)
        return self

    def add_field_string(self, field_string: str | None) -> "FieldBuilder":
        """
        Merge the top-level fields of a selector string into the root.

        Fields whose name already exists at the root are skipped; the
        children of a merged field are taken as parsed.

        Params:
            field_string: Selector string to merge

        Returns:
            This builder, for chaining
        """
        for node in parse_field_string(field_string):
            if find_field(self.root_fields, node.name) is None:
                self.root_fields.append(node)
        return self

    def build(self) -> str:
        """Serialize the accumulated fields to a selector string."""
        return serialize_field_structure(self.root_fields)

    def _add_nested_field(self, field_path: str) -> None:
        level = self.root_fields
        for part in split_field_path(field_path):
            part = part.strip()
            if not part:
                continue
            node = find_field(level, part)
            if node is None:
                node = FieldNode(name=part)
                level.append(node)
            level = node.children

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"FieldBuilder({self.build()!r})"
