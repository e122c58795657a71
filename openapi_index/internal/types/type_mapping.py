"""Соответствие типов OpenAPI и TypeScript"""

import re
from typing import Any, Dict, List, Optional

from ..names import ModelName, PackagePrefixTable

TYPE_MAPPING = {
    "array": "Array",
    "boolean": "boolean",
    "string": "string",
    "integer": "number",
    "number": "number",
    "object": "any",
    "date": "string",
    "date-time": "Date",
    "binary": "string",
    "byte": "string",
    "uuid": "string",
    "file": "any",
}

LANGUAGE_PRIMITIVES = {
    "string",
    "boolean",
    "number",
    "any",
    "Array",
    "Date",
    "File",
    "Error",
    "Map",
    "Blob",
    "object",
}

# "A | B", "A & B", "Array<A>"
_TYPE_SEPARATORS = re.compile(r"(?: [|&] )|[<>]")


def ref_name(ref: str) -> str:
    """Имя схемы из ссылки вида #/components/schemas/Name"""
    return ref[ref.rfind("/") + 1 :]


def model_type_name(ref: str, prefixes: Optional[PackagePrefixTable] = None) -> str:
    """Полное имя класса (с пакетом) для ссылки на схему"""
    return ModelName(ref_name(ref), prefixes).package_name


def primitive_type(schema: Dict[str, Any]) -> str:
    schema_format = schema.get("format")
    if schema_format in TYPE_MAPPING and schema_format not in ("binary", "byte"):
        return TYPE_MAPPING[schema_format]
    return TYPE_MAPPING.get(schema.get("type"), "any")


def is_byte_array(schema: Dict[str, Any]) -> bool:
    return schema.get("type") == "string" and schema.get("format") in ("byte", "binary")


def is_map_schema(schema: Dict[str, Any]) -> bool:
    additional = schema.get("additionalProperties")
    return (
        schema.get("type", "object") == "object"
        and not schema.get("properties")
        and (isinstance(additional, dict) or additional is True)
    )


def schema_type(
    schema: Dict[str, Any], prefixes: Optional[PackagePrefixTable] = None
) -> str:
    """Тип схемы: имя модели, примитив или составное выражение"""
    if "$ref" in schema:
        return model_type_name(schema["$ref"], prefixes)

    if schema.get("allOf"):
        return " & ".join(_member_types(schema["allOf"], prefixes))
    if schema.get("oneOf"):
        return " | ".join(_member_types(schema["oneOf"], prefixes))
    if schema.get("anyOf"):
        return " | ".join(_member_types(schema["anyOf"], prefixes))

    if schema.get("type") == "array":
        return "Array"
    if schema.get("type") == "object" or "properties" in schema:
        return "object"
    return primitive_type(schema)


def _member_types(
    members: List[Dict[str, Any]], prefixes: Optional[PackagePrefixTable]
) -> List[str]:
    types = []
    for member in members:
        member_type = schema_type(member, prefixes)
        if member.get("type") == "array":
            member_type = f"{member_type}<{schema_type(member.get('items') or {}, prefixes)}>"
        if member_type not in types:
            types.append(member_type)
    return types


def simple_type_name(type_name: str) -> str:
    return type_name[type_name.rfind(".") + 1 :]


def split_type_names(type_expression: str) -> List[str]:
    return [name for name in _TYPE_SEPARATORS.split(type_expression) if name]


def needs_import(type_name: str) -> bool:
    return bool(type_name) and type_name not in LANGUAGE_PRIMITIVES
