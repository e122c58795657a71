import logging
from typing import Any, Dict, Optional

from ...exceptions import ExtractedEnumCollisionError
from ..extension import EnumerationDefinition, ExtensionStore
from ..names import ModelName, PackagePrefixTable, TypeName
from ..types.codegen import CodegenModel
from ..types.type_mapping import (
    model_type_name,
    needs_import,
    ref_name,
    schema_type,
    split_type_names,
)
from ..utils import to_literal

logger = logging.getLogger(__name__)


class SchemaHandler:
    """Обработка составных схем перед построением индекса"""

    def __init__(
        self,
        store: ExtensionStore,
        model_package: str = "",
        prefixes: Optional[PackagePrefixTable] = None,
    ):
        self.store = store
        self.model_package = model_package
        self.prefixes = prefixes or PackagePrefixTable()
        # package location -> модель извлеченного enum
        self.enumeration_models: Dict[str, CodegenModel] = {}

    def process_composed_schema(
        self,
        model: CodegenModel,
        schema: Dict[str, Any],
        all_models: Dict[str, CodegenModel],
    ) -> None:
        self._modify_discriminator(model)
        self._modify_vendor_extensions(model, schema, all_models)
        self._modify_defaults(model, schema)
        self._extract_inner_enums(model, all_models)
        self._mark_alias(model, schema)

    def _modify_discriminator(self, model: CodegenModel) -> None:
        """Ссылки в mapping дискриминатора -> простые имена типов"""
        if model.discriminator is None or model.discriminator.mapping is None:
            return

        mapping = model.discriminator.mapping
        for key, value in mapping.items():
            class_name = ModelName(ref_name(value), self.prefixes).class_name
            mapping[key] = TypeName(class_name).name

    def _modify_vendor_extensions(
        self,
        model: CodegenModel,
        schema: Dict[str, Any],
        all_models: Dict[str, CodegenModel],
    ) -> None:
        record = self.store.determine_model_extension(model, self.model_package)
        if record.extends is not None:
            extends_name = TypeName(
                ModelName(record.extends, self.prefixes).package_name
            )
            record.extends = extends_name.name
            record.extends_package = extends_name.pack

        one_of = schema.get("oneOf")
        if schema.get("discriminator") is None and one_of:
            # Неявная иерархия: ключ - имя первого свойства альтернативы
            extended_by = {}
            for ref_schema in one_of:
                reference = ref_schema.get("$ref")
                if not reference:
                    continue
                type_name = TypeName(model_type_name(reference, self.prefixes))
                type_model = all_models.get(type_name.model_name)
                if type_model is not None and type_model.vars:
                    first = type_model.vars[0]
                    extended_by[first.base_name or first.name] = type_name.name
            record.extended_by = extended_by

    def _modify_defaults(self, model: CodegenModel, schema: Dict[str, Any]) -> None:
        record = self.store.determine_model_extension(model, self.model_package)
        if schema.get("default") is not None:
            record.default_value = to_literal(schema["default"])

        flattened = self._flattened_object_schema(schema)
        properties = schema.get("properties") or {}

        for var in model.vars:
            property_record = self.store.determine_property_extension(
                var, self.model_package
            )
            var_name = var.base_name or var.name

            default = None
            if flattened is not None:
                default = (flattened.get("properties") or {}).get(var_name, {}).get(
                    "default"
                )
            if default is None and var_name in properties:
                default = properties[var_name].get("default")

            literal = to_literal(default) if default is not None else None
            # Свойства, слитые из $ref членов allOf, несут default парсера
            if literal is None:
                literal = var.default_value

            if literal is not None:
                if var.is_byte_array:
                    property_record.default_value = '""'
                else:
                    property_record.default_value = literal
            elif (var.base_type or "").lower() == "array":
                property_record.default_value = "[]"
            elif var.is_map_container:
                property_record.default_value = "{}"

    @staticmethod
    def _flattened_object_schema(schema: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Первый встроенный объект из allOf"""
        for member in schema.get("allOf") or []:
            if "$ref" in member:
                continue
            if member.get("type") == "object" or "properties" in member:
                return member
        return None

    def _extract_inner_enums(
        self, model: CodegenModel, all_models: Dict[str, CodegenModel]
    ) -> None:
        """Встроенные enum с явным enumName становятся отдельными объявлениями"""
        for property in model.vars:
            property_record = self.store.determine_property_extension(
                property, self.model_package
            )
            if property_record.enum_name is None:
                continue

            type_name = TypeName(
                ModelName(property_record.enum_name, self.prefixes).package_name
            )
            property_record.is_extracted_enum = True
            package_location = type_name.package_location(self.model_package)

            declared = self._find_declaration(package_location, all_models)
            if declared is not None:
                raise ExtractedEnumCollisionError(package_location)

            if package_location not in self.enumeration_models:
                enum_model = self._create_enum_model(
                    property_record.enum_name, type_name, package_location, property
                )
                self.enumeration_models[package_location] = enum_model
                all_models[package_location] = enum_model
                logger.debug(f"Extracted enum {package_location} from {model.classname}")

            property_record.enum_name = type_name.name
            property_record.type_class_name = type_name.name
            property_record.type_package_name = type_name.package_path(
                self.model_package
            )
            property_record.is_type_reference = True
            property_record.default_value = property.default_value

            property.is_enum = False
            property.is_primitive_type = False
            property.complex_type = package_location
            if property.is_list_container:
                property.datatype_with_enum = f"Array<{type_name.name}>"
            else:
                property.datatype_with_enum = type_name.name

    def _find_declaration(
        self, package_location: str, all_models: Dict[str, CodegenModel]
    ) -> Optional[CodegenModel]:
        """Обычная (не извлеченная) модель по расположению пакета"""
        for candidate in all_models.values():
            if self.store.determine_extension(candidate).is_extracted_enum:
                continue
            location = TypeName(candidate.classname).package_location(self.model_package)
            if location == package_location:
                return candidate
        return None

    def _create_enum_model(
        self,
        enum_name: str,
        type_name: TypeName,
        package_location: str,
        property,
    ) -> CodegenModel:
        enumeration = EnumerationDefinition(package_name=package_location)
        enum_vars = property.allowable_values.get("enumVars")
        if isinstance(enum_vars, list):
            for enum_var in enum_vars:
                if not isinstance(enum_var, dict):
                    continue
                key = enum_var.get("name")
                value = enum_var.get("value")
                if isinstance(key, str) and isinstance(value, str):
                    enumeration.put(key, value)

        enum_model = CodegenModel(
            name=enum_name,
            classname=type_name.model_name,
            class_filename=type_name.root_file_location(),
            is_enum=True,
        )
        enum_record = self.store.determine_model_extension(
            enum_model, self.model_package
        )
        enum_record.enum_definition = enumeration
        enum_record.is_extracted_enum = True
        return enum_model

    def _mark_alias(self, model: CodegenModel, schema: Dict[str, Any]) -> None:
        """oneOf/anyOf без свойств - псевдоним объединения типов"""
        is_alias = bool(schema.get("oneOf")) or bool(schema.get("anyOf"))
        if not is_alias or model.vars:
            return

        model.is_alias = True
        model.data_type = schema_type(schema, self.prefixes)
        for name in split_type_names(model.data_type):
            if needs_import(name):
                model.imports.add(name)
