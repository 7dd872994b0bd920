"""
yapi_struct code generation module.

Generates type declarations from the body schemas of an API export.
"""

from typing import Any, Dict, Optional, Union

from .registry import (
    GeneratorRegistry,
    get_generator,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import ConfigError, GeneratorError, RegistryError
from .core.schema import Field, FieldType, normalize
from .core.config import GeneratorConfig, ConfigManager, load_config


def generate_from_document(
    raw: Union[bytes, str],
    language: str = "go",
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
    classification: Optional[str] = None,
    path: Optional[str] = None,
) -> GenerationResult:
    """
    Generate declarations for every body of an export document.

    Args:
        raw: Export document as bytes or text
        language: Target language name
        config: Generator configuration object or override dict
        classification: Only use the classification with this exact name
        path: Only use the API with this exact path

    Returns:
        GenerationResult with generated code; failed when the document
        cannot be parsed or any body cannot be rendered
    """
    from ..document import collect_bodies, parse_document

    generator = get_generator(language, config)

    try:
        kinds = parse_document(raw, classification)
        bodies = collect_bodies(kinds, path)
    except GeneratorError as e:
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    return generate_code(generator, bodies)


def quick_generate(schema: Union[Dict[str, Any], str], name: str = "/root", **options) -> str:
    """
    Render a single body schema without an export document around it.

    Args:
        schema: Body schema as a dict or JSON text
        name: API path used to derive the declaration name
        **options: Generator options

    Returns:
        Generated code string
    """
    import json

    from ..document import Api

    if not isinstance(schema, str):
        schema = json.dumps(schema)

    api = Api(method="POST", path=name, title=name, req_body_other=schema)
    result = generate_code(get_generator("go", options), list(api.bodies()))

    if result.success:
        return result.code
    raise result.exception


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "Field",
    "FieldType",
    "normalize",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "generate_code",
    "generate_from_document",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "is_language_supported",
    "list_supported_languages",
]
