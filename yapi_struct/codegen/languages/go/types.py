"""
Go-specific type system for code generation.

Maps the fixed schema type vocabulary onto Go type names.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from ...core.config import GeneratorConfig
from ...core.errors import UnknownTypeError
from ...core.schema import FieldType

# Sentinel target names for container nodes; the generator expands these
ARRAY = "array"
OBJECT = "object"


@dataclass(frozen=True)
class GoTypeConfig:
    """Configuration for Go type mapping behavior."""

    string_type: str = "string"
    # Integer-like schema types collapse onto one Go integer type
    int_type: str = "int"
    number_type: str = "int"
    bool_type: str = "bool"

    @classmethod
    def from_generator_config(cls, config: GeneratorConfig) -> "GoTypeConfig":
        """Pick the primitive type names out of a generator configuration."""
        return cls(
            string_type=config.string_type,
            int_type=config.int_type,
            number_type=config.number_type,
            bool_type=config.bool_type,
        )


class GoTypeMapper:
    """
    Lookup table from schema type names to Go type names.

    The table is built once and is read-only afterwards. Names outside the
    vocabulary are a schema configuration error, never a fallback.
    """

    def __init__(self, config: Optional[GoTypeConfig] = None):
        """Initialize with type configuration."""
        self.config = config or GoTypeConfig()
        self._types = self._build_type_map()

    def _build_type_map(self) -> Mapping[str, str]:
        """Build the schema name -> Go name table."""
        return MappingProxyType(
            {
                FieldType.STRING.value: self.config.string_type,
                FieldType.ARRAY.value: ARRAY,
                FieldType.OBJECT.value: OBJECT,
                FieldType.NUMBER.value: self.config.number_type,
                FieldType.INTEGER.value: self.config.int_type,
                FieldType.BOOLEAN.value: self.config.bool_type,
            }
        )

    @property
    def table(self) -> Mapping[str, str]:
        """Read-only view of the mapping table."""
        return self._types

    def convert(self, schema_type: str) -> str:
        """
        Map a schema type name to its Go name.

        Raises:
            UnknownTypeError: If the name is not part of the vocabulary
        """
        try:
            return self._types[schema_type]
        except (KeyError, TypeError):
            raise UnknownTypeError(schema_type) from None

    def is_container(self, schema_type: str) -> bool:
        """Check whether a schema type renders as a nested structure."""
        return self.convert(schema_type) in (ARRAY, OBJECT)
