"""
Конфигурация для генерации индекса моделей
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import toml

from .internal.utils import validate_property_naming

logger = logging.getLogger(__name__)

CONFIG_FILE = "openapi-index.toml"


@dataclass
class IndexConfig:
    """Конфигурация генератора индекса моделей"""

    url: Optional[str] = None
    dirname: Optional[str] = None
    model_package: str = ""
    model_property_naming: str = "camelCase"
    prefix_config: Optional[str] = None

    def __post_init__(self):
        validate_property_naming(self.model_property_naming)

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE, search_dir: str = None
    ) -> Optional["IndexConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError) as e:
            logger.warning(f"Failed to read config {config_path}: {e}")
            return None

        # Путь к префиксам относительно файла конфига
        prefix_config = config_data.get("prefix_config")
        if prefix_config and not os.path.isabs(prefix_config):
            prefix_config = os.path.join(
                os.path.dirname(os.path.abspath(config_path)), prefix_config
            )

        return cls(
            url=config_data.get("url"),
            dirname=config_data.get("dirname", "models"),
            model_package=config_data.get("model_package", ""),
            model_property_naming=config_data.get("model_property_naming", "camelCase"),
            prefix_config=prefix_config,
        )

    def save_to_file(self, config_path: str = CONFIG_FILE) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "url": self.url,
            "dirname": self.dirname,
            "model_package": self.model_package,
            "model_property_naming": self.model_property_naming,
        }
        if self.prefix_config:
            config_data["prefix_config"] = self.prefix_config

        with open(config_path, "w") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "IndexConfig":
        """Объединение с аргументами командной строки"""
        return IndexConfig(
            url=args.url or self.url,
            dirname=args.dirname or self.dirname,
            model_package=args.model_package or self.model_package,
            model_property_naming=args.naming or self.model_property_naming,
            prefix_config=args.prefixes or self.prefix_config,
        )
