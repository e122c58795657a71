"""
Типизированная запись расширения для модели или свойства

В мешке расширений запись хранится под ключом EXTENSION_NAME
с camelCase ключами. Значения неподходящих типов при чтении
отбрасываются и считаются отсутствующими.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .enumeration import EnumerationDefinition

logger = logging.getLogger(__name__)

EXTENSION_NAME = "x-webpdf-codegen"


class ExtensionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type_info_initialized: bool = Field(False, alias="typeInfoInitialized")
    type_package_name: Optional[str] = Field(None, alias="typePackageName")
    type_class_name: Optional[str] = Field(None, alias="typeClassName")
    type_root_location: Optional[str] = Field(None, alias="typeLocation")
    relative_index_location: Optional[str] = Field(None, alias="relativeIndexLocation")

    parent_package_name: Optional[str] = Field(None, alias="parentPackageName")
    parent_class_name: Optional[str] = Field(None, alias="parentClassName")

    extends: Optional[str] = Field(None, alias="extends")
    extends_package: Optional[str] = Field(None, alias="extendsPackage")
    extended_by: Optional[Dict[str, str]] = Field(None, alias="extendedBy")

    enum_name: Optional[str] = Field(None, alias="enumName")
    enum_definition: Optional[EnumerationDefinition] = Field(None, alias="enumDefinition")

    is_enum_reference: bool = Field(False, alias="isEnumReference")
    is_extracted_enum: bool = Field(False, alias="isExtractedEnum")
    is_enum_type: bool = Field(False, alias="isEnumType")
    is_type_reference: bool = Field(False, alias="isTypeReference")

    default_value: Optional[str] = Field(None, alias="defaultValue")
    imports: Optional[List[str]] = Field(None, alias="imports")
    description: Optional[str] = Field(None, alias="description")

    @model_validator(mode="before")
    @classmethod
    def _drop_incompatible(cls, data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict):
            return {}

        values = {}
        for key, value in data.items():
            name = key if key in _FIELD_KINDS else _ALIASES.get(key)
            if name is None:
                continue

            coerced = _coerce(_FIELD_KINDS[name], value)
            if coerced is _ABSENT:
                logger.debug(f"Dropping incompatible extension value {key}={value!r}")
                continue
            values[name] = coerced
        return values

    def to_bag(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


_ABSENT = object()


def _coerce(kind: Any, value: Any) -> Any:
    if value is None:
        return _ABSENT
    if kind is dict:
        if not isinstance(value, dict):
            return _ABSENT
        return {
            k: v for k, v in value.items() if isinstance(k, str) and isinstance(v, str)
        }
    if kind is list:
        if not isinstance(value, list):
            return _ABSENT
        return [v for v in value if isinstance(v, str)]
    if kind is EnumerationDefinition:
        if isinstance(value, EnumerationDefinition):
            return value
        try:
            return EnumerationDefinition.model_validate(value)
        except ValidationError:
            return _ABSENT
    if isinstance(value, kind):
        return value
    return _ABSENT


_FIELD_KINDS = {
    "type_info_initialized": bool,
    "type_package_name": str,
    "type_class_name": str,
    "type_root_location": str,
    "relative_index_location": str,
    "parent_package_name": str,
    "parent_class_name": str,
    "extends": str,
    "extends_package": str,
    "extended_by": dict,
    "enum_name": str,
    "enum_definition": EnumerationDefinition,
    "is_enum_reference": bool,
    "is_extracted_enum": bool,
    "is_enum_type": bool,
    "is_type_reference": bool,
    "default_value": str,
    "imports": list,
    "description": str,
}

_ALIASES = {
    field.alias: name
    for name, field in ExtensionRecord.model_fields.items()
    if field.alias
}
