"""
Exceptions raised by the code generation pipeline.

Every error is fatal for a run: the pipeline raises, and only the
outermost caller (CLI or ``generate_code``) turns it into a message.
Schema problems and operational problems (configuration, templates,
registry lookups, input loading) share the ``GeneratorError`` base.
"""

from typing import Any, List, Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaError(GeneratorError):
    """Raised when the export document or an embedded body is malformed."""

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw

    def __str__(self) -> str:
        message = super().__str__()
        if self.raw is not None:
            return f"{message}\n{self.raw}"
        return message


class UnknownTypeError(GeneratorError):
    """Raised for a schema type name outside the supported vocabulary."""

    def __init__(self, type_name: Any):
        super().__init__(
            f"Unknown schema type {type_name!r}: register it in the type mapping"
        )
        self.type_name = type_name


class IllegalFieldNameError(GeneratorError):
    """Raised when a field name contains no usable identifier."""

    def __init__(self, raw_name: str):
        super().__init__(f"Illegal field name {raw_name!r}: no identifier found")
        self.raw_name = raw_name


class DuplicateFieldError(GeneratorError):
    """Raised when two keys of one object collapse to the same field name."""

    def __init__(self, first: str, second: str, field_name: str):
        super().__init__(
            f"Field keys {first!r} and {second!r} both map to {field_name!r}"
        )
        self.keys = (first, second)
        self.field_name = field_name


class StructureError(GeneratorError):
    """Raised when a schema node is structurally inconsistent."""

    def __init__(self, message: str, node: Any = None):
        super().__init__(message if node is None else f"{message}: {node!r}")
        self.node = node


class SelectionError(GeneratorError):
    """Raised when a classification filter selects nothing."""

    def __init__(self, classification: str, available: List[str]):
        names = ", ".join(repr(name) for name in available) or "(none)"
        super().__init__(
            f"No classification named {classification!r}. "
            f"Classifications in this document: {names}"
        )
        self.classification = classification
        self.available = list(available)


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


class TemplateError(GeneratorError):
    """Exception raised when a template cannot be loaded."""

    pass


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class SourceError(GeneratorError):
    """Exception raised when the export cannot be read from its source."""

    pass
