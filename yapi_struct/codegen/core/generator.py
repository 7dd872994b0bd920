"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List, Any, Optional, TYPE_CHECKING
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig, get_config_manager, load_config
from .errors import GeneratorError
from .templates import create_template_engine

if TYPE_CHECKING:
    from ...document import Body

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config(self.language_name)
        self.template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    @abstractmethod
    def render(self, body: "Body") -> str:
        """
        Render the declaration for one request or response body.

        Args:
            body: Parsed body bound to its API

        Returns:
            Declaration text, or an empty string when the body has no schema
        """
        pass

    def generate(self, bodies: List["Body"]) -> str:
        """
        Generate code for all bodies.

        Declarations are separated by a blank line; bodies that render
        nothing are skipped.
        """
        declarations = []
        for body in bodies:
            text = self.render(body)
            if text:
                declarations.append(text.strip("\n"))

        header = self.get_package_declaration()
        if header:
            declarations.insert(0, header.strip("\n"))

        return "\n\n".join(declarations) + "\n" if declarations else ""

    def get_package_declaration(self) -> Optional[str]:
        """
        Get package/namespace declaration if needed.

        Returns:
            Package declaration string or None
        """
        return None

    def validate_bodies(self, bodies: List["Body"]) -> List[str]:
        """
        Report problems that do not stop generation.

        Args:
            bodies: Bodies about to be generated

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = get_config_manager().validate_config(self.config, self.language_name)

        names = Counter(body.declaration_name(self.config) for body in bodies)
        for name, count in names.items():
            if count > 1:
                warnings.append(
                    f"Declaration name {name} is generated {count} times"
                )
                logger.warning("Duplicate declaration name %s (%d times)", name, count)

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, bodies: List["Body"]) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        bodies: Request/response bodies to generate declarations for

    Returns:
        GenerationResult with code, warnings, and metadata. A failed
        result never carries partial code.
    """
    try:
        warnings = generator.validate_bodies(bodies)
        code = generator.generate(bodies)
        formatted_code = generator.format_code(code)
    except GeneratorError as e:
        logger.debug("Generation aborted", exc_info=True)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "declaration_count": len(bodies),
        "api_count": len({id(body.api) for body in bodies}),
        "request_count": sum(1 for body in bodies if body.role == "request"),
        "response_count": sum(1 for body in bodies if body.role == "response"),
    }
    logger.info(
        "Generated %d declarations for %d APIs",
        metadata["declaration_count"],
        metadata["api_count"],
    )

    return GenerationResult(formatted_code, warnings, metadata)
