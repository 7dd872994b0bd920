"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .errors import (
    GeneratorError,
    SchemaError,
    UnknownTypeError,
    IllegalFieldNameError,
    DuplicateFieldError,
    StructureError,
    SelectionError,
    ConfigError,
    TemplateError,
    RegistryError,
    SourceError,
)
from .generator import CodeGenerator, GenerationResult, generate_code
from .schema import Field, FieldType, normalize
from .naming import sanitize_identifier, upper_first, declaration_name
from .config import GeneratorConfig, ConfigManager, load_config
from .templates import TemplateEngine, create_template_engine

__all__ = [
    # Error taxonomy
    "GeneratorError",
    "SchemaError",
    "UnknownTypeError",
    "IllegalFieldNameError",
    "DuplicateFieldError",
    "StructureError",
    "SelectionError",
    "ConfigError",
    "TemplateError",
    "RegistryError",
    "SourceError",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Schema system - core data structures
    "Field",
    "FieldType",
    "normalize",
    # Naming utilities
    "sanitize_identifier",
    "upper_first",
    "declaration_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    # Template system
    "TemplateEngine",
    "create_template_engine",
]
