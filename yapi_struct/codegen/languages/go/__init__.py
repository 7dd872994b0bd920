"""
Go code generator module.

Generates Go struct declarations with JSON tags from API body schemas.
"""

from .generator import GoGenerator, create_go_generator
from .types import GoTypeConfig, GoTypeMapper

__all__ = [
    "GoGenerator",
    "GoTypeConfig",
    "GoTypeMapper",
    "create_go_generator",
]
