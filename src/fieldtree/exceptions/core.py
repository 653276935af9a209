"""
Exception classes for fieldtree.

Selector parsing and editing never raise; these exceptions cover the
field-set registry, where a lookup or registration can be meaningfully wrong.
"""


class FieldTreeError(Exception):
    """Base exception for all fieldtree errors."""

    pass


class UnknownFieldSetError(FieldTreeError, KeyError):
    """Raised when a field set name is not registered."""

    def __init__(self, name: str, available: list[str]):
        """
        Initialize the exception.

        Params:
            name: The field set name that was looked up
            available: Names currently registered
        """
        self.name = name
        self.available = available
        super().__init__(
            f"Field set '{name}' is not registered. Available field sets: {available}"
        )

    def __str__(self) -> str:
        return str(self.args[0])


class FieldSetNameError(FieldTreeError):
    """Raised when a field set is registered under an invalid name."""

    def __init__(self, name: str, reason: str):
        """
        Initialize the exception.

        Params:
            name: The rejected field set name
            reason: Why the name is invalid
        """
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid field set name '{name}': {reason}")
