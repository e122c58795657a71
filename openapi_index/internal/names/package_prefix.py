"""
Правила префиксов пакетов

Конфигурация - JSON файл вида:

    {
        "packages": [
            {"prefix": "operation_", "location": "operation/", "preservePrefix": ["operation_id"]}
        ]
    }

Правила упорядочены, срабатывает первое подходящее.
"""

import json
import logging
import os
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class PackagePrefix(BaseModel):
    """Правило: префикс схемы -> расположение пакета"""

    model_config = ConfigDict(populate_by_name=True)

    prefix: str = ""
    location: str = ""
    preserve_prefix: List[str] = Field(default_factory=list, alias="preservePrefix")

    @property
    def file_location(self) -> str:
        return self.location

    @property
    def package_location(self) -> str:
        return self.location.replace("/", ".")

    def matches(self, identifier: str) -> bool:
        return identifier.startswith(self.prefix)

    def shall_preserve_prefix(self, identifier: str) -> bool:
        return identifier in self.preserve_prefix


class PackagePrefixTable:
    """Упорядоченная таблица правил префиксов"""

    def __init__(self, prefixes: Optional[List[PackagePrefix]] = None):
        self.prefixes = list(prefixes or [])

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "PackagePrefixTable":
        packages = config_data.get("packages") or []
        if not isinstance(packages, list):
            raise ValueError("packages must be a list")
        return cls([PackagePrefix.model_validate(package) for package in packages])

    @classmethod
    def from_file(cls, config_path: Optional[str]) -> "PackagePrefixTable":
        """
        Единственная точка загрузки правил.

        Отсутствующий или битый файл не ошибка - возвращается пустая таблица.
        """
        if not config_path or not os.path.exists(config_path):
            logger.debug(f"Prefix config not found: {config_path}")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = json.load(f)
            if not isinstance(config_data, dict):
                raise ValueError("top level must be an object")
            table = cls.from_dict(config_data)
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning(f"Ignoring prefix config {config_path}: {exc}")
            return cls()

        logger.debug(f"Loaded {len(table)} prefix rules from {config_path}")
        return table

    def match(self, identifier: str) -> Optional[PackagePrefix]:
        for prefix in self.prefixes:
            if prefix.matches(identifier):
                return prefix
        return None

    def __iter__(self) -> Iterator[PackagePrefix]:
        return iter(self.prefixes)

    def __len__(self) -> int:
        return len(self.prefixes)
