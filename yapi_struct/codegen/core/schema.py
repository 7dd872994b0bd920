"""
Core schema representation for code generation.

Converts the JSON-Schema bodies embedded in an API export into a
recursive Field tree, and normalizes array nodes so that generators can
render arrays and objects with a single rule.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Any, Iterator
from enum import Enum

from .errors import DuplicateFieldError, SchemaError, StructureError
from .naming import find_identifier, sanitize_identifier, upper_first


class FieldType(Enum):
    """Schema type names understood by the generators."""

    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"


@dataclass
class Field:
    """
    One node of a body schema: a primitive, an object or an array.

    ``type`` keeps the raw schema type name; mapping it onto the target
    language (and rejecting unknown names) is the generator's job.
    """

    type: str = FieldType.OBJECT.value
    # Element shape, only meaningful when type is "array"
    items: Optional["Field"] = None
    # Children keyed by field name, in document order
    properties: Dict[str, "Field"] = field(default_factory=dict)
    description: str = ""
    required: List[str] = field(default_factory=list)
    # Set by normalize() on array nodes whose element shape was hoisted
    repeated: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Field":
        """
        Build a Field tree from a decoded schema document.

        Args:
            data: Decoded JSON object for one schema node

        Returns:
            Field with all children and element descriptors converted

        Raises:
            SchemaError: If a node does not have the expected shape
        """
        if not isinstance(data, dict):
            raise SchemaError(f"Schema node must be an object, got {type(data).__name__}")

        field_type = data.get("type") or FieldType.OBJECT.value
        if not isinstance(field_type, str):
            raise SchemaError(f"Schema type must be a string, got {field_type!r}")

        items = data.get("items")
        if items is not None:
            items = cls.from_dict(items)

        properties = data.get("properties")
        if properties is None:
            properties = {}
        if not isinstance(properties, dict):
            raise SchemaError(f"'properties' must be an object, got {properties!r}")

        required = data.get("required")
        if required is None:
            required = []
        if not isinstance(required, list) or not all(
            isinstance(name, str) for name in required
        ):
            raise SchemaError(f"'required' must be a list of names, got {required!r}")

        description = data.get("description") or ""

        return cls(
            type=field_type,
            items=items,
            properties={
                name: cls.from_dict(child) for name, child in properties.items()
            },
            description=str(description),
            required=list(required),
        )

    def is_required(self, name: str) -> bool:
        """Check whether a child name is in this node's required list."""
        return name in self.required

    def walk(self) -> Iterator["Field"]:
        """Iterate over this node and all descendants, pre-order."""
        yield self
        if self.items is not None:
            yield from self.items.walk()
        for child in self.properties.values():
            yield from child.walk()


def normalize(node: Field) -> Field:
    """
    Return a normalized copy of a Field tree.

    Child keys and required names are sanitized into identifiers; every
    array node adopts the children, required list and description of its
    (normalized) element descriptor and is marked ``repeated``. Applying
    it to an already normalized tree yields an equal tree.

    Raises:
        StructureError: If an array node has no element descriptor
        DuplicateFieldError: If two keys collapse to the same field name
        IllegalFieldNameError: If a key holds no identifier
    """
    if node.type == FieldType.ARRAY.value:
        if node.items is None:
            raise StructureError("Array node has no 'items' descriptor", node)
        items = normalize(node.items)
        return replace(
            node,
            items=items,
            properties=dict(items.properties),
            required=list(items.required),
            description=items.description,
            repeated=True,
        )

    items = normalize(node.items) if node.items is not None else None
    return replace(
        node,
        items=items,
        properties=_rekey(node.properties),
        required=_sanitize_required(node.required),
    )


def _rekey(properties: Dict[str, Field]) -> Dict[str, Field]:
    """Sanitize child keys, rejecting keys that clash once case-folded."""
    result: Dict[str, Field] = {}
    seen: Dict[str, str] = {}

    for raw_key, child in properties.items():
        key = sanitize_identifier(raw_key)
        folded = upper_first(key).casefold()
        if folded in seen:
            raise DuplicateFieldError(seen[folded], raw_key, upper_first(key))
        seen[folded] = raw_key
        result[key] = normalize(child)

    return result


def _sanitize_required(required: List[str]) -> List[str]:
    """Sanitize required names; entries without an identifier match nothing."""
    names = []
    for raw_name in required:
        name = find_identifier(raw_name)
        if name is not None and name not in names:
            names.append(name)
    return names
