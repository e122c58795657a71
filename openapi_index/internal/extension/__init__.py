"""Метаданные расширений и индекс объявлений"""

from .enumeration import EnumerationDefinition
from .index import INTERFACE_SUFFIX, Index, IndexEntry
from .record import EXTENSION_NAME, ExtensionRecord
from .store import ExtensionStore

__all__ = [
    "EXTENSION_NAME",
    "INTERFACE_SUFFIX",
    "EnumerationDefinition",
    "ExtensionRecord",
    "ExtensionStore",
    "Index",
    "IndexEntry",
]
