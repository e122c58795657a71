"""Утилиты для имен свойств, enum значений и литералов"""

import json
import re
from typing import Any

from ...exceptions import InvalidOptionError

PROPERTY_NAMING_OPTIONS = ["original", "camelCase", "PascalCase", "snake_case"]

# Локальные имена API методов и зарезервированные слова TypeScript
RESERVED_WORDS = {
    "varlocalpath", "queryparameters", "headerparams", "formparams",
    "useformdata", "varlocaldeferred", "requestoptions",
    "abstract", "await", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "debugger", "default", "delete", "do",
    "double", "else", "enum", "export", "extends", "false", "final",
    "finally", "float", "for", "function", "goto", "if", "implements",
    "import", "in", "instanceof", "int", "interface", "let", "long", "native",
    "new", "null", "package", "private", "protected", "public", "return",
    "short", "static", "super", "switch", "synchronized", "this", "throw",
    "transient", "true", "try", "typeof", "var", "void", "volatile", "while",
    "with", "yield",
}


def validate_property_naming(naming: str) -> str:
    if naming not in PROPERTY_NAMING_OPTIONS:
        raise InvalidOptionError(
            "model_property_naming", naming, PROPERTY_NAMING_OPTIONS
        )
    return naming


def sanitize_name(name: str) -> str:
    """Заменяет все, что не годится для идентификатора, на подчеркивания"""
    return re.sub(r"\W", "_", name)


def camelize(name: str, lowercase_first: bool = False) -> str:
    """
    snake_case / kebab-case -> PascalCase или camelCase.

    Examples:
        >>> camelize("foo_bar")
        'FooBar'
        >>> camelize("foo_bar", lowercase_first=True)
        'fooBar'
    """
    parts = [part for part in re.split(r"[_\-\s.]+", name) if part]
    if not parts:
        return name
    result = "".join(part[:1].upper() + part[1:] for part in parts)
    if lowercase_first:
        result = result[:1].lower() + result[1:]
    return result


def underscore(name: str) -> str:
    """camelCase или PascalCase -> snake_case"""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    s2 = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[\-\s.]+", "_", s2).lower()


def apply_property_naming(name: str, naming: str) -> str:
    if naming == "original":
        return name
    if naming == "camelCase":
        return camelize(name, lowercase_first=True)
    if naming == "PascalCase":
        return camelize(name)
    if naming == "snake_case":
        return underscore(name)
    raise InvalidOptionError("model_property_naming", naming, PROPERTY_NAMING_OPTIONS)


def escape_reserved_word(name: str) -> str:
    return "_" + name


def is_reserved_word(name: str) -> bool:
    return name.lower() in RESERVED_WORDS


def to_var_name(name: str, naming: str = "camelCase") -> str:
    """Имя поля модели с учетом соглашения об именовании"""
    name = sanitize_name(name)

    if name == "_":
        name = "_u"

    # Имена в верхнем регистре оставляем как есть
    if re.fullmatch(r"[A-Z_]*", name):
        return name

    name = apply_property_naming(name, naming)

    if is_reserved_word(name) or re.match(r"\d", name):
        name = escape_reserved_word(name)

    return name


def to_enum_var_name(value: str, datatype: str) -> str:
    """Имя члена enum для литерала"""
    if not value:
        return "Empty"

    if datatype == "number":
        var_name = "NUMBER_" + value
        var_name = var_name.replace("-", "MINUS_")
        var_name = var_name.replace("+", "PLUS_")
        return var_name.replace(".", "_DOT_")

    enum_name = sanitize_name(value).strip("_")
    enum_name = camelize(enum_name) if enum_name else "Empty"

    if re.match(r"\d", enum_name):
        return "_" + enum_name
    return enum_name


def to_enum_value(value: str, datatype: str) -> str:
    if datatype == "number":
        return value
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def to_literal(value: Any) -> str:
    """Литерал значения по умолчанию: строки в кавычках, остальное как JSON"""
    return json.dumps(value, ensure_ascii=False)


def escape_description(description: Any) -> Any:
    """Экранирование описания как содержимого JSON строки"""
    if description is None:
        return None
    return json.dumps(str(description), ensure_ascii=False)[1:-1]
