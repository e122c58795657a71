"""Генератор индекса TypeScript моделей из OpenAPI"""

from .config import IndexConfig
from .exceptions import (
    CodegenError,
    ExtractedEnumCollisionError,
    InheritanceCycleError,
    InvalidOptionError,
    ModelNotFoundError,
    NameCollisionError,
)
from .generator import ModelIndexGenerator, generate_index, load_openapi

__all__ = [
    "CodegenError",
    "ExtractedEnumCollisionError",
    "IndexConfig",
    "InheritanceCycleError",
    "InvalidOptionError",
    "ModelIndexGenerator",
    "ModelNotFoundError",
    "NameCollisionError",
    "generate_index",
    "load_openapi",
]
