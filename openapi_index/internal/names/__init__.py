"""Разрешение имен типов, моделей и пакетов"""

from .model_name import ModelName
from .package_prefix import PackagePrefix, PackagePrefixTable
from .type_name import TypeName

__all__ = [
    "ModelName",
    "PackagePrefix",
    "PackagePrefixTable",
    "TypeName",
]
