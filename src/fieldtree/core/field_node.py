"""
Tree model for field selector strings.

This module defines the FieldNode model shared by the parser, serializer and
editing operations. A selector string has no single root, so parsed selectors
are represented as a Forest: an ordered list of root-level nodes.
"""

from pydantic import BaseModel, ConfigDict, Field


class FieldNode(BaseModel):
    """
    One named field in a selector, optionally selecting nested sub-fields.

    Sibling order is insertion order. A node with an empty children list is a
    leaf and serializes without parentheses.

    Params:
        name: Field name, stripped of surrounding whitespace (never empty)
        children: Ordered sub-field nodes
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    children: list["FieldNode"] = Field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        """Check if this node selects no sub-fields."""
        return not self.children


FieldNode.model_rebuild()

Forest = list[FieldNode]
