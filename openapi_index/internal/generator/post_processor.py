"""
Единый проход по всем моделям

Сначала каждая модель проходит через SchemaHandler (дискриминаторы,
extends, значения по умолчанию, извлечение enum, псевдонимы), затем
регистрируется в индексе, разрешаются свойства и импорты, и в конце
индекс сортируется.
"""

import logging
from typing import Dict, Optional, Set

from ...exceptions import ModelNotFoundError
from ..extension import INTERFACE_SUFFIX, ExtensionStore, Index, IndexEntry
from ..names import PackagePrefixTable, TypeName
from ..types.codegen import CodegenModel, ModelGraph
from ..utils import escape_description
from .schema_handler import SchemaHandler

logger = logging.getLogger(__name__)

# Вспомогательный тип параметров, нужен каждой объектной модели
PARAMETER_TYPE = "Parameter"


class ModelPostProcessor:
    """Разрешение имен, импортов и порядка экспорта для всех моделей"""

    def __init__(
        self,
        model_package: str = "",
        prefixes: Optional[PackagePrefixTable] = None,
        store: Optional[ExtensionStore] = None,
    ):
        self.model_package = model_package
        self.prefixes = prefixes or PackagePrefixTable()
        self.store = store or ExtensionStore()
        self.index = Index(model_package, self.store)
        self.schema_handler = SchemaHandler(self.store, model_package, self.prefixes)

    def process(self, graph: ModelGraph) -> Index:
        all_models = graph.models

        for model in list(all_models.values()):
            schema = graph.schemas.get(model.classname) or {}
            self.schema_handler.process_composed_schema(model, schema, all_models)

        for model in list(all_models.values()):
            self._process_model(model, all_models)

        self.index.sort()
        self.store.flush()
        logger.info(
            f"Processed {len(all_models)} models, {len(self.index)} index entries"
        )
        return self.index

    def _process_model(
        self, model: CodegenModel, all_models: Dict[str, CodegenModel]
    ) -> None:
        type_name = TypeName(model.classname)
        model_record = self.store.determine_model_extension(model, self.model_package)
        model_record.type_root_location = type_name.root_file_location()
        description = escape_description(model.description)
        if description is not None:
            model_record.description = description

        entry = IndexEntry(
            type_name.root_file_location(),
            type_name.package_location(self.model_package),
            model,
        ).add_exported_name(type_name.name)
        if not model.is_enum:
            entry.add_exported_name(type_name.name + INTERFACE_SUFFIX)
        self.index.add(entry)

        entry = self.index.get(type_name.name)
        if entry is None:
            raise ModelNotFoundError(type_name.name)

        for property in model.vars:
            property_record = self.store.determine_property_extension(
                property, self.model_package
            )
            description = escape_description(property.description)
            if description is not None:
                property_record.description = description

            ref_model = all_models.get(property.base_type or "")
            if ref_model is not None:
                ref_record = self._resolve_reference(ref_model, property_record)
                if ref_model.is_enum:
                    property_record.default_value = ref_record.default_value
            else:
                ref_model = all_models.get(property.complex_type or "")
                if ref_model is not None:
                    self._resolve_reference(ref_model, property_record)
                elif property.is_enum and property.enum_name:
                    self.index.add_exported_name(entry, property.enum_name)

        if not model.is_enum:
            model_record.imports = sorted(self._collect_imports(model))

    def _resolve_reference(self, ref_model: CodegenModel, property_record):
        """Разрешение модели, на которую ссылается свойство"""
        ref_record = self.store.determine_model_extension(ref_model, self.model_package)
        if ref_model.is_enum:
            ref_type = TypeName(ref_model.classname)
            property_record.is_enum_reference = True
            self.index.add(
                IndexEntry(
                    ref_type.root_file_location(),
                    ref_type.package_location(self.model_package),
                    ref_model,
                ).add_exported_name(ref_type.name)
            )
            ref_record.type_root_location = ref_type.root_file_location()
            ref_record.is_enum_type = True
        return ref_record

    def _collect_imports(self, model: CodegenModel) -> Set[str]:
        record = self.store.determine_model_extension(model, self.model_package)
        imports = {PARAMETER_TYPE}

        for property in model.vars:
            property_record = self.store.determine_property_extension(
                property, self.model_package
            )
            if (
                property_record.is_type_reference
                and not property.is_enum
                and property_record.type_class_name
            ):
                imports.add(property_record.type_class_name)

        if record.extends is not None:
            imports.add(record.extends)
            imports.add(record.extends + INTERFACE_SUFFIX)

        if record.parent_class_name is not None:
            imports.add(record.parent_class_name)
            imports.add(record.parent_class_name + INTERFACE_SUFFIX)

        if record.extended_by is not None:
            for extension in record.extended_by.values():
                imports.add(TypeName(extension).name)

        if model.discriminator is not None and model.discriminator.mapping:
            imports.update(model.discriminator.mapping.values())

        return imports
