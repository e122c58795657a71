import copy
import json
import logging
from typing import Any, Dict, List, Optional

import jsonref

from ..names import ModelName, PackagePrefixTable
from ..types.codegen import CodegenModel, CodegenProperty, Discriminator, ModelGraph
from ..types.type_mapping import (
    is_byte_array,
    is_map_schema,
    model_type_name,
    primitive_type,
    ref_name,
    simple_type_name,
)
from ..utils import (
    to_enum_value,
    to_enum_var_name,
    to_literal,
    to_var_name,
    validate_property_naming,
)

logger = logging.getLogger(__name__)


class OpenApiModelParser:
    """Построение графа моделей из components/schemas"""

    def __init__(
        self,
        openapi_dict: Dict[str, Any],
        prefixes: Optional[PackagePrefixTable] = None,
        property_naming: str = "camelCase",
    ):
        self.original_spec = openapi_dict
        # Разрешенная копия: $ref заменены содержимым схем
        self.openapi_dict = jsonref.loads(json.dumps(openapi_dict))
        self.prefixes = prefixes or PackagePrefixTable()
        self.property_naming = validate_property_naming(property_naming)

    def parse(self) -> ModelGraph:
        """Парсинг схем в ModelGraph"""
        graph = ModelGraph()
        schemas = self._schemas(self.original_spec)
        resolved_schemas = self._schemas(self.openapi_dict)

        for schema_name, schema in schemas.items():
            if not isinstance(schema, dict):
                continue
            model = self._build_model(
                schema_name, schema, resolved_schemas.get(schema_name) or {}
            )
            graph.add(model, schema)

        logger.info(f"Parsed {len(graph.models)} models")
        return graph

    @staticmethod
    def _schemas(spec: Dict[str, Any]) -> Dict[str, Any]:
        return (spec.get("components") or {}).get("schemas") or {}

    def _build_model(
        self,
        schema_name: str,
        schema: Dict[str, Any],
        resolved: Dict[str, Any],
    ) -> CodegenModel:
        model_name = ModelName(schema_name, self.prefixes)
        model = CodegenModel(
            name=schema_name,
            classname=model_name.package_name,
            class_filename=model_name.file_name,
            description=schema.get("description"),
            is_enum="enum" in schema,
            is_object=schema.get("type") == "object" or "properties" in schema,
            vendor_extensions=self._vendor_extensions(schema),
        )

        if "default" in schema and schema["default"] is not None:
            model.default_value = to_literal(schema["default"])

        discriminator = schema.get("discriminator")
        if isinstance(discriminator, dict):
            mapping = discriminator.get("mapping")
            model.discriminator = Discriminator(
                property_name=discriminator.get("propertyName"),
                mapping=dict(mapping) if isinstance(mapping, dict) else None,
            )

        model.parent = self._parent_name(schema)
        model.vars = self._build_vars(schema, resolved, model.parent)
        return model

    def _parent_name(self, schema: Dict[str, Any]) -> Optional[str]:
        """
        Родитель из allOf: ссылка на схему с дискриминатором,
        иначе единственная ссылка.
        """
        refs = [
            member["$ref"]
            for member in schema.get("allOf") or []
            if isinstance(member, dict) and "$ref" in member
        ]
        schemas = self._schemas(self.original_spec)
        for ref in refs:
            target = schemas.get(ref_name(ref)) or {}
            if target.get("discriminator"):
                return model_type_name(ref, self.prefixes)
        if len(refs) == 1:
            return model_type_name(refs[0], self.prefixes)
        return None

    def _build_vars(
        self,
        schema: Dict[str, Any],
        resolved: Dict[str, Any],
        parent: Optional[str],
    ) -> List[CodegenProperty]:
        properties: Dict[str, Dict[str, Any]] = {}

        # Свойства родителя не дублируются, остальные члены allOf сливаются
        raw_members = schema.get("allOf") or []
        resolved_members = resolved.get("allOf") or []
        for raw_member, resolved_member in zip(raw_members, resolved_members):
            if (
                "$ref" in raw_member
                and model_type_name(raw_member["$ref"], self.prefixes) == parent
            ):
                continue
            member_properties = (
                raw_member.get("properties")
                if "$ref" not in raw_member
                else resolved_member.get("properties")
            )
            properties.update(member_properties or {})

        properties.update(schema.get("properties") or {})

        return [
            self._build_property(name, property_schema)
            for name, property_schema in properties.items()
            if isinstance(self._reference_schema(property_schema), dict)
        ]

    def _build_property(self, name: str, schema: Dict[str, Any]) -> CodegenProperty:
        schema = self._reference_schema(schema)
        property = CodegenProperty(
            name=to_var_name(name, self.property_naming),
            base_name=name,
            description=schema.get("description"),
            vendor_extensions=self._vendor_extensions(schema),
        )

        if "$ref" in schema:
            type_name = model_type_name(schema["$ref"], self.prefixes)
            property.base_type = type_name
            property.complex_type = type_name
            property.datatype = simple_type_name(type_name)
            property.datatype_with_enum = property.datatype
            return property

        if schema.get("type") == "array":
            items = self._build_property(name, schema.get("items") or {})
            property.items = items
            property.is_list_container = True
            property.base_type = "array"
            property.complex_type = items.complex_type
            property.datatype = f"Array<{items.datatype}>"
            property.datatype_with_enum = f"Array<{items.datatype_with_enum}>"
            if items.is_enum:
                property.is_enum = True
                property.enum_name = items.enum_name
                property.allowable_values = items.allowable_values
            return property

        if is_map_schema(schema):
            additional = schema.get("additionalProperties")
            items = self._build_property(
                name, additional if isinstance(additional, dict) else {}
            )
            property.items = items
            property.is_map_container = True
            property.base_type = "object"
            property.complex_type = items.complex_type
            property.datatype = f"{{ [key: string]: {items.datatype}; }}"
            property.datatype_with_enum = property.datatype
            return property

        datatype = primitive_type(schema)
        property.base_type = datatype
        property.datatype = datatype
        property.datatype_with_enum = datatype
        property.is_primitive_type = True
        property.is_byte_array = is_byte_array(schema)

        if schema.get("default") is not None:
            property.default_value = to_literal(schema["default"])

        if "enum" in schema:
            property.is_enum = True
            property.enum_name = self._enum_name(name)
            property.datatype_with_enum = property.enum_name
            property.allowable_values = {
                "values": list(schema["enum"]),
                "enumVars": [
                    {
                        "name": to_enum_var_name(str(value), datatype),
                        "value": to_enum_value(str(value), datatype),
                    }
                    for value in schema["enum"]
                    if value is not None
                ],
            }

        return property

    @staticmethod
    def _reference_schema(schema: Any) -> Any:
        """Разрешенная jsonref ссылка обратно в {"$ref": ...}"""
        if isinstance(schema, jsonref.JsonRef):
            return dict(schema.__reference__)
        return schema

    def _enum_name(self, property_name: str) -> str:
        """
        Имя встроенного enum: простое имя класса свойства + Enum.

        Пакет правила префикса не входит в имя: enum экспортируется
        из файла модели-владельца, а не из пакета правила, поэтому
        operation_type дает TypeEnum.
        """
        enum_name = ModelName(property_name, self.prefixes).class_name + "Enum"
        return "_" + enum_name if enum_name[:1].isdigit() else enum_name

    @staticmethod
    def _vendor_extensions(schema: Dict[str, Any]) -> Dict[str, Any]:
        return {
            key: copy.deepcopy(value)
            for key, value in schema.items()
            if isinstance(key, str) and key.startswith("x-")
        }
