import logging
from typing import Any, Dict, Iterator, Tuple, Union

from ..names import TypeName
from ..types.codegen import CodegenModel, CodegenProperty
from .record import EXTENSION_NAME, ExtensionRecord

logger = logging.getLogger(__name__)

INDEX_TYPE_NAME = TypeName.from_parts("", "index")

Owner = Union[CodegenModel, CodegenProperty]


class ExtensionStore:
    """
    Хранилище записей расширений, ключ - идентичность владельца.

    При первом обращении запись собирается из того, что уже лежит
    в мешке расширений владельца (например, x-webpdf-codegen из схемы),
    дальше владелец всегда получает один и тот же объект записи.
    """

    def __init__(self, extension_name: str = EXTENSION_NAME):
        self.extension_name = extension_name
        self._records: Dict[int, Tuple[Owner, ExtensionRecord]] = {}

    def determine_extension(self, owner: Owner) -> ExtensionRecord:
        """Получение или создание записи без разрешения имен"""
        stored = self._records.get(id(owner))
        if stored is not None:
            return stored[1]

        bag_value = owner.vendor_extensions.get(self.extension_name)
        record = ExtensionRecord.model_validate(
            bag_value if isinstance(bag_value, dict) else {}
        )
        self._records[id(owner)] = (owner, record)
        return record

    def determine_model_extension(
        self, model: CodegenModel, model_package: str
    ) -> ExtensionRecord:
        """Однократное разрешение имени модели и ее родителя"""
        record = self.determine_extension(model)
        if record.type_info_initialized:
            return record

        type_name = TypeName(model.classname)
        record.type_info_initialized = True
        record.type_package_name = type_name.package_path(model_package)
        record.type_class_name = type_name.name
        record.relative_index_location = INDEX_TYPE_NAME.relative_file_location(
            type_name.pack
        )
        if model.parent is not None:
            parent_type = TypeName(model.parent)
            record.parent_package_name = parent_type.package_path(model_package)
            record.parent_class_name = parent_type.name

        logger.debug(f"Resolved model {model.classname} -> {type_name.name}")
        return record

    def determine_property_extension(
        self, property: CodegenProperty, model_package: str
    ) -> ExtensionRecord:
        """Однократное разрешение типа, на который ссылается свойство"""
        record = self.determine_extension(property)
        actual = property
        if property.is_map_container and property.items is not None:
            actual = property.items

        if (
            not record.type_info_initialized
            and not actual.is_enum
            and actual.complex_type is not None
        ):
            type_name = TypeName(actual.complex_type)
            record.type_package_name = type_name.package_path(model_package)
            record.type_class_name = type_name.name
            record.relative_index_location = INDEX_TYPE_NAME.relative_file_location(
                type_name.pack
            )
            record.is_type_reference = True

        record.type_info_initialized = True
        return record

    def flush(self) -> None:
        """Выгрузка всех записей обратно в мешки расширений владельцев"""
        for owner, record in self._records.values():
            bag_value = owner.vendor_extensions.get(self.extension_name)
            if not isinstance(bag_value, dict):
                bag_value = {}
            bag_value.update(record.to_bag())
            owner.vendor_extensions[self.extension_name] = bag_value

    def __iter__(self) -> Iterator[Tuple[Owner, ExtensionRecord]]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, owner: Any) -> bool:
        return id(owner) in self._records
