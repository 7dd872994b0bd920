"""API export document model.

Parses a YApi-style export (a JSON list of classifications, each holding
API entries with embedded JSON-Schema body strings) into Kind, Api and
Body records, and applies the classification/path selection.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from .codegen.core.config import GeneratorConfig
from .codegen.core.errors import SchemaError, SelectionError
from .codegen.core.naming import declaration_name
from .codegen.core.schema import Field
from .logging_config import get_logger

logger = get_logger(__name__)

REQUEST = "request"
RESPONSE = "response"


@dataclass
class Body:
    """A request or response Field tree bound to the API that owns it."""

    field: Optional[Field]
    api: "Api" = field(repr=False, compare=False)
    role: str = REQUEST

    def declaration_name(self, config: GeneratorConfig) -> str:
        """Name of the declaration generated for this body."""
        suffix = config.request_suffix if self.role == REQUEST else config.response_suffix
        return declaration_name(self.api.path, suffix)


@dataclass
class Api:
    """One API entry of the export."""

    method: str = ""
    path: str = ""
    title: str = ""
    req_body_other: str = ""
    res_body: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Api":
        """Build an Api from one entry of a classification's ``list``."""
        if not isinstance(data, dict):
            raise SchemaError(f"API entry must be an object, got {type(data).__name__}")

        values = {}
        for name in ("method", "path", "title", "req_body_other", "res_body"):
            value = data.get(name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise SchemaError(
                    f"API field {name!r} must be a string, got {value!r}"
                )
            values[name] = value
        return cls(**values)

    def request_body(self) -> Optional[Body]:
        """Parse the request body schema; None when the API declares none."""
        return self._parse_body(self.req_body_other, REQUEST)

    def response_body(self) -> Optional[Body]:
        """Parse the response body schema; None when the API declares none."""
        return self._parse_body(self.res_body, RESPONSE)

    def bodies(self) -> Iterator[Body]:
        """Yield the declared bodies, request first."""
        for body in (self.request_body(), self.response_body()):
            if body is not None:
                yield body

    def _parse_body(self, text: str, role: str) -> Optional[Body]:
        if not text.strip():
            return None

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SchemaError(
                f"Invalid {role} body schema for {self.method} {self.path}: {e}",
                raw=text,
            ) from e

        if data is None:
            return None

        try:
            root = Field.from_dict(data)
        except SchemaError as e:
            raise SchemaError(
                f"Malformed {role} body schema for {self.method} {self.path}: {e}",
                raw=text,
            ) from e

        return Body(field=root, api=self, role=role)


@dataclass
class Kind:
    """A named classification grouping API entries."""

    name: str = ""
    apis: List[Api] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Kind":
        """Build a Kind from one element of the export document."""
        if not isinstance(data, dict):
            raise SchemaError(
                f"Classification must be an object, got {type(data).__name__}"
            )

        name = data.get("name") or ""
        entries = data.get("list") or []
        if not isinstance(entries, list):
            raise SchemaError(
                f"Classification {name!r} has a non-list 'list': {entries!r}"
            )

        return cls(name=str(name), apis=[Api.from_dict(entry) for entry in entries])


def parse_document(
    raw: bytes | str, classification: Optional[str] = None
) -> List[Kind]:
    """
    Parse an export document into its classifications.

    Args:
        raw: Whole document as bytes or text
        classification: Keep only the classification with exactly this name

    Returns:
        Classifications in document order

    Raises:
        SchemaError: If the document is not a list of classifications
        SelectionError: If the classification filter matches nothing
    """
    try:
        text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
        data = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SchemaError(f"Invalid export document: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(
            f"Export document must be a list of classifications, got {type(data).__name__}"
        )

    kinds = [Kind.from_dict(item) for item in data]
    logger.info(
        "Parsed %d classifications with %d APIs",
        len(kinds),
        sum(len(kind.apis) for kind in kinds),
    )

    if classification:
        selected = [kind for kind in kinds if kind.name == classification]
        if not selected:
            raise SelectionError(classification, [kind.name for kind in kinds])
        logger.debug("Classification filter %r kept %d entries", classification, len(selected))
        return selected

    return kinds


def select_apis(kinds: List[Kind], path: Optional[str] = None) -> List[Api]:
    """Flatten classifications into APIs, keeping only ``path`` when given."""
    apis = [api for kind in kinds for api in kind.apis]
    if path:
        apis = [api for api in apis if api.path == path]
        if not apis:
            logger.warning("No API matches path %s", path)
    return apis


def collect_bodies(kinds: List[Kind], path: Optional[str] = None) -> List[Body]:
    """Parse every declared body of the selected APIs, in document order."""
    return [body for api in select_apis(kinds, path) for body in api.bodies()]
