"""Утилиты для генератора"""

from .naming import (
    PROPERTY_NAMING_OPTIONS,
    apply_property_naming,
    camelize,
    escape_description,
    to_enum_value,
    to_enum_var_name,
    to_literal,
    to_var_name,
    underscore,
    validate_property_naming,
)

__all__ = [
    "PROPERTY_NAMING_OPTIONS",
    "apply_property_naming",
    "camelize",
    "escape_description",
    "to_enum_value",
    "to_enum_var_name",
    "to_literal",
    "to_var_name",
    "underscore",
    "validate_property_naming",
]
