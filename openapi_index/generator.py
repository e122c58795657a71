"""
Главный модуль генератора - чистый интерфейс
"""

import json
import logging
import os
from typing import Any, Dict, Optional

import httpx

from .config import IndexConfig
from .exceptions import CodegenError
from .internal.extension import ExtensionStore, Index
from .internal.generator.index_renderer import IndexRenderer
from .internal.generator.post_processor import ModelPostProcessor
from .internal.names import PackagePrefixTable
from .internal.parser.openapi import OpenApiModelParser
from .internal.types.codegen import ModelGraph
from .internal.types.models import Project

logger = logging.getLogger(__name__)


def load_openapi(source: str) -> Dict[str, Any]:
    """Загрузка спецификации из локального файла или по URL"""
    if os.path.exists(source):
        with open(source, "r", encoding="utf-8") as f:
            return json.load(f)

    url = source if source.startswith(("http://", "https://")) else "https://" + source
    if not url.endswith(".json"):
        url = url + ("" if url.endswith("/") else "/") + "openapi.json"

    try:
        response = httpx.get(url=url)
        response.raise_for_status()
        return response.json()
    except (httpx.HTTPError, ValueError) as e:
        raise CodegenError(
            f"Не удалось загрузить спецификацию из {source}. Проверьте URL или путь к файлу."
        ) from e


class ModelIndexGenerator:
    """Чистый интерфейс для генерации индекса моделей"""

    def __init__(
        self,
        openapi_spec: Dict[str, Any],
        config: Optional[IndexConfig] = None,
        prefixes: Optional[PackagePrefixTable] = None,
    ):
        self.openapi_spec = openapi_spec
        self.config = config or IndexConfig()
        # Таблица префиксов читается один раз и передается дальше
        if prefixes is None:
            prefixes = (
                PackagePrefixTable.from_file(self.config.prefix_config)
                if self.config.prefix_config
                else PackagePrefixTable()
            )
        self.prefixes = prefixes
        logger.debug(f"Using {len(prefixes)} package prefix rules")
        self.store = ExtensionStore()
        self.graph: Optional[ModelGraph] = None
        self.index: Optional[Index] = None

    def process(self) -> Index:
        """Парсинг схем и единый проход постобработки"""
        parser = OpenApiModelParser(
            self.openapi_spec, self.prefixes, self.config.model_property_naming
        )
        self.graph = parser.parse()
        post_processor = ModelPostProcessor(
            self.config.model_package, self.prefixes, self.store
        )
        self.index = post_processor.process(self.graph)
        return self.index

    def generate(self) -> Project:
        """Генерация проекта: index.ts и metadata.json"""
        index = self.process()
        project = Project(name=self.config.dirname or "models")
        return IndexRenderer(index, self.store, self.graph).render(project)


def generate_index(
    openapi_spec: Dict[str, Any], config: Optional[IndexConfig] = None
) -> Project:
    """Создание индекса моделей из OpenAPI спецификации"""
    generator = ModelIndexGenerator(openapi_spec, config)
    return generator.generate()
