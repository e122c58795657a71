"""
Индекс экспортируемых объявлений

Каждое экспортируемое имя указывает ровно на одно расположение пакета.
После sort() записи идут так, что базовый класс (родитель или
extends дискриминатора) всегда раньше наследника.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ...exceptions import InheritanceCycleError, NameCollisionError
from ..types.codegen import CodegenModel
from .record import EXTENSION_NAME
from .store import ExtensionStore

logger = logging.getLogger(__name__)

INTERFACE_SUFFIX = "Interface"


@dataclass(eq=False)
class IndexEntry:
    file_location: str
    package_location: str
    model: CodegenModel
    exported_names: List[str] = field(default_factory=list)

    def add_exported_name(self, name: str) -> "IndexEntry":
        self.exported_names.append(name)
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(self.exported_names)


class Index:
    """Реестр объявлений: имя -> запись, плюс упорядоченный список записей"""

    def __init__(self, model_package: str, store: ExtensionStore):
        self.model_package = model_package
        self.store = store
        self._names: Dict[str, IndexEntry] = {}
        self._entries: List[IndexEntry] = []

    def add(self, *entries: IndexEntry) -> "Index":
        for entry in entries:
            if self.contains(entry):
                logger.debug(f"Skipping already indexed {entry.package_location}")
                continue
            for name in entry.exported_names:
                self._names[name] = entry
            self._entries.append(entry)
        return self

    def add_exported_name(self, entry: IndexEntry, name: str) -> "Index":
        """Дополнительное имя уже зарегистрированной записи"""
        existing = self._names.get(name)
        if existing is not None:
            if existing.package_location != entry.package_location:
                raise NameCollisionError(
                    name,
                    existing.package_location,
                    entry.package_location,
                    f"Задайте enumName в {EXTENSION_NAME} свойства, "
                    "чтобы вынести enum в отдельное объявление.",
                )
            if existing is entry:
                return self
        entry.add_exported_name(name)
        self._names[name] = entry
        return self

    def get(self, name: str) -> Optional[IndexEntry]:
        return self._names.get(name)

    def contains(self, entry: IndexEntry) -> bool:
        """
        Есть ли уже запись с одним из имен entry.

        То же имя в другом пакете - фатальный конфликт.
        """
        for name in entry.exported_names:
            existing = self._names.get(name)
            if existing is None:
                continue
            if existing.package_location != entry.package_location:
                raise NameCollisionError(
                    name, existing.package_location, entry.package_location
                )
            return True
        return False

    def sort(self) -> "Index":
        """Сначала зависимости: родитель и база extends раньше наследника"""
        ordered: List[IndexEntry] = []
        marks: Dict[IndexEntry, str] = {}
        for entry in list(self._entries):
            self._place(entry, ordered, marks, [])
        self._entries = ordered
        return self

    def _place(
        self,
        entry: IndexEntry,
        ordered: List[IndexEntry],
        marks: Dict[IndexEntry, str],
        trail: List[str],
    ) -> None:
        mark = marks.get(entry)
        if mark == _PLACED:
            return
        if mark == _VISITING:
            raise InheritanceCycleError(trail + [entry.package_location])

        marks[entry] = _VISITING
        record = self.store.determine_model_extension(entry.model, self.model_package)
        for base_name in (record.parent_class_name, record.extends):
            base = self._names.get(base_name) if base_name else None
            if base is not None:
                self._place(base, ordered, marks, trail + [entry.package_location])

        marks[entry] = _PLACED
        ordered.append(entry)

    @property
    def ordered_entries(self) -> List[IndexEntry]:
        return list(self._entries)

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


_VISITING = "visiting"
_PLACED = "placed"
