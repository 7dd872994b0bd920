"""
Go code generator implementation.

Renders request/response bodies as Go type declarations built from
nested anonymous structs, with ``json`` tags and a required marker.
"""

from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING
from pathlib import Path

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.errors import StructureError
from ...core.generator import CodeGenerator
from ...core.naming import upper_first
from ...core.schema import Field, normalize
from .types import ARRAY, OBJECT, GoTypeConfig, GoTypeMapper

if TYPE_CHECKING:
    from ....document import Body

logger = get_logger(__name__)


@dataclass
class GoTypeView:
    """Template view of a Go type expression."""

    prefix: str = ""
    fields: Optional[List["GoFieldView"]] = None
    primitive: Optional[str] = None


@dataclass
class GoFieldView:
    """Template view of one struct field line."""

    name: str
    type: GoTypeView
    tag: Optional[str] = None
    comment: Optional[str] = None


class GoGenerator(CodeGenerator):
    """Code generator for Go struct declarations with JSON tags."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)
        self.type_mapper = GoTypeMapper(GoTypeConfig.from_generator_config(self.config))

    def get_template_directory(self) -> Path:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def render(self, body: "Body") -> str:
        """Render one body as a commented ``type Name struct {...}`` block."""
        if body.field is None:
            return ""

        struct_name = body.declaration_name(self.config)
        logger.debug("Rendering %s for %s %s", struct_name, body.api.method, body.api.path)

        root = normalize(body.field)
        context = {
            "api": body.api,
            "struct_name": struct_name,
            "root": self._type_view(root),
            "indent_unit": "\t",
        }
        return self.render_template("declaration.go.j2", context)

    def _type_view(self, node: Field) -> GoTypeView:
        """Build the type expression for a normalized node."""
        prefix = ""
        element = node
        while element.repeated:
            prefix += "[]"
            element = element.items

        go_type = self.type_mapper.convert(element.type)
        if go_type == OBJECT:
            # Hoisted children of an array equal its innermost element's
            return GoTypeView(prefix=prefix, fields=self._field_views(node))
        if go_type == ARRAY:
            raise StructureError("Array node was not normalized", element)

        return GoTypeView(prefix=prefix, primitive=go_type)

    def _field_views(self, node: Field) -> List[GoFieldView]:
        """Build one field line per child of an object-shaped node."""
        keys = list(node.properties)
        if self.config.sort_fields:
            keys.sort()

        views = []
        for key in keys:
            child = node.properties[key]
            views.append(
                GoFieldView(
                    name=upper_first(key),
                    type=self._type_view(child),
                    tag=self._render_json_tag(key, node.is_required(key)),
                    comment=self._comment(child),
                )
            )
        return views

    def _render_json_tag(self, key: str, required: bool) -> Optional[str]:
        """Render the struct tag for a field, or None when tags are disabled."""
        if not self.config.generate_json_tags:
            return None

        tag_context = {
            "key": key,
            "required": required,
            "required_tag": self.config.required_tag,
        }
        return self.render_template("json_tag.go.j2", tag_context)

    def _comment(self, node: Field) -> Optional[str]:
        """Flatten a description into a single trailing comment."""
        if not self.config.add_comments:
            return None
        text = " ".join(line.strip() for line in node.description.splitlines())
        return text.strip() or None

    def get_package_declaration(self) -> Optional[str]:
        """Get Go package declaration."""
        if not self.config.package_name:
            return None
        return self.render_template(
            "package.go.j2", {"package_name": self.config.package_name}
        )

    def format_code(self, code: str) -> str:
        """Apply Go-specific formatting."""
        lines = [line.rstrip() for line in code.split("\n")]

        # Remove excessive blank lines (more than 1 consecutive)
        result_lines = []
        blank_count = 0

        for line in lines:
            if not line:
                blank_count += 1
                if blank_count <= 1:
                    result_lines.append(line)
            else:
                blank_count = 0
                result_lines.append(line)

        return "\n".join(result_lines)


def create_go_generator(config: Optional[dict] = None) -> GoGenerator:
    """Create a Go generator, merging ``config`` over the Go defaults."""
    return GoGenerator(load_config("go", custom_config=config))
