"""
Parser for field selector strings.

This module turns selector text such as "id,project(id,name)" into an ordered
forest of FieldNode instances. The parser never raises: malformed input is
recovered from by dropping empty segments, closing unterminated groups at end
of input and absorbing unmatched closing parentheses.
"""

import logging
from dataclasses import dataclass, field

from fieldtree.core.field_node import FieldNode, Forest

logger = logging.getLogger(__name__)

GROUP_OPEN = "("
GROUP_CLOSE = ")"
FIELD_SEPARATOR = ","


@dataclass
class ScanState:
    """
    Cursor over the selector text.

    Params:
        text: Full selector string being scanned
        position: Index of the next character to consume
    """

    text: str
    position: int = 0

    @property
    def exhausted(self) -> bool:
        """Check if every character has been consumed."""
        return self.position >= len(self.text)

    def advance(self) -> str:
        """Consume and return the next character."""
        char = self.text[self.position]
        self.position += 1
        return char


@dataclass
class _Level:
    """Fields collected so far at one nesting level, plus the pending name."""

    fields: Forest = field(default_factory=list)
    name: str = ""

    def emit_pending(self) -> None:
        name = self.name.strip()
        if name:
            self.fields.append(FieldNode(name=name))
        self.name = ""


def _close_group(levels: list[_Level], state: ScanState) -> None:
    """Pop the innermost level and attach it to the name that opened it."""
    group = levels.pop()
    group.emit_pending()
    parent = levels[-1]
    name = parent.name.strip()
    if name:
        parent.fields.append(FieldNode(name=name, children=group.fields))
    else:
        logger.debug("Dropping unnamed group ending at position %d", state.position)
    parent.name = ""


def parse_field_string(field_string: str | None) -> Forest:
    """
    Parse a field selector string into a forest of field nodes.

    Nesting is tracked with an explicit stack of levels, so depth is limited
    only by memory.

    Params:
        field_string: Selector text (e.g., "id,project(id,name)"); None is
            treated as an empty string

    Returns:
        Root-level nodes in source order (empty for empty or blank input)

    Examples:
        "id,project(name)" -> [id, project(name)]
        "id,project(name" -> [id, project(name)]
        "id,,name," -> [id, name]
    """
    if not field_string:
        return []

    state = ScanState(text=field_string)
    levels = [_Level()]

    while not state.exhausted:
        char = state.advance()

        if char == GROUP_OPEN:
            levels.append(_Level())
        elif char == GROUP_CLOSE:
            if len(levels) > 1:
                _close_group(levels, state)
            else:
                logger.debug(
                    "Ignoring unmatched '%s' at position %d",
                    GROUP_CLOSE,
                    state.position - 1,
                )
        elif char == FIELD_SEPARATOR:
            levels[-1].emit_pending()
        else:
            levels[-1].name += char

    if len(levels) > 1:
        logger.debug(
            "Closing %d unterminated group(s) at end of input", len(levels) - 1
        )
    while len(levels) > 1:
        _close_group(levels, state)

    root = levels[0]
    root.emit_pending()
    return root.fields
