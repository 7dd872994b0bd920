"""yapi_struct: Go struct declarations from YApi API exports."""

__version__ = "0.1.0"

from .document import Api, Body, Kind, collect_bodies, parse_document, select_apis
from .codegen import generate_from_document, quick_generate

__all__ = [
    "Api",
    "Body",
    "Kind",
    "collect_bodies",
    "generate_from_document",
    "parse_document",
    "quick_generate",
    "select_apis",
]
