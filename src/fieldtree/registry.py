import logging

from fieldtree.definitions import DEFAULT_FIELD_SETS, FieldSetDefinition
from fieldtree.exceptions import FieldSetNameError, UnknownFieldSetError
from fieldtree.structure.builder import FieldBuilder

logger = logging.getLogger(__name__)


class FieldSetRegistry:
    """Named collection of field selectors, one live builder per entity.

    Responsibilities:
      - Hold a mutable mapping of field set name -> `FieldBuilder`.
      - Extend or replace a field set without touching the others.
      - Hand out built selector strings for API requests.

    Notes:
      - Defaults come from `DEFAULT_FIELD_SETS` unless `default_field_sets` is
        given; passing an empty dict starts with no field sets.
      - Builders are owned by the registry; callers that need an isolated copy
        should build a new one from `get_fields`.
    """

    def __init__(
        self,
        default_field_sets: dict[str, str | FieldSetDefinition] | None = None,
    ):
        field_sets = DEFAULT_FIELD_SETS if default_field_sets is None else default_field_sets
        self._builders: dict[str, FieldBuilder] = {}
        for name, field_set in field_sets.items():
            fields = field_set.fields if isinstance(field_set, FieldSetDefinition) else field_set
            self.register(name, fields)

    def get_builder(self, name: str) -> FieldBuilder:
        """Get the live builder of a field set.

        Params:
            name: Registered field set name.

        Returns:
            The `FieldBuilder` holding the field set.

        Raises:
            UnknownFieldSetError: If the name is not registered.
        """
        if name not in self._builders:
            raise UnknownFieldSetError(name, self.list_field_sets())
        return self._builders[name]

    def get_fields(self, name: str) -> str:
        """Get the selector string of a field set.

        Raises:
            UnknownFieldSetError: If the name is not registered.
        """
        return self.get_builder(name).build()

    def add_fields(self, name: str, fields: str | list[str]) -> "FieldSetRegistry":
        """Add field names or dot-paths to an existing field set.

        Params:
            name: Registered field set name.
            fields: One field or a list of fields (dot-paths allowed).

        Raises:
            UnknownFieldSetError: If the name is not registered.
        """
        field_list = [fields] if isinstance(fields, str) else fields
        self.get_builder(name).add_fields(field_list)
        return self

    def set_fields(self, name: str, fields: list[str]) -> "FieldSetRegistry":
        """Replace a field set with exactly the given fields.

        Params:
            name: Registered field set name.
            fields: Field names or dot-paths making up the new field set.

        Raises:
            UnknownFieldSetError: If the name is not registered.
        """
        if name not in self._builders:
            raise UnknownFieldSetError(name, self.list_field_sets())
        self._builders[name] = FieldBuilder().add_fields(fields)
        return self

    def register(self, name: str, field_string: str) -> "FieldSetRegistry":
        """Insert a new field set or overwrite an existing one.

        Params:
            name: Field set name.
            field_string: Selector string the field set starts from.

        Raises:
            FieldSetNameError: If the name is blank.
        """
        if not name or not name.strip():
            raise FieldSetNameError(name, "must be a non-empty string")
        if name in self._builders:
            logger.debug("Overwriting field set %r", name)
        self._builders[name] = FieldBuilder(field_string)
        return self

    def list_field_sets(self) -> list[str]:
        """List all registered field set names."""
        return list(self._builders.keys())
