from typing import Optional

from .package_prefix import PackagePrefixTable


class ModelName:
    """Имя класса, пакета и файла для сырого имени схемы"""

    def __init__(self, path: str, prefixes: Optional[PackagePrefixTable] = None):
        class_name = path
        self._file_location = ""
        self._package_location = ""

        prefix = prefixes.match(path) if prefixes is not None else None
        if prefix is not None:
            if not prefix.shall_preserve_prefix(path):
                class_name = path[len(prefix.prefix) :]
            self._file_location = prefix.file_location
            self._package_location = prefix.package_location

        self.class_name = "".join(
            part[:1].upper() + part[1:] for part in class_name.split("_")
        )

    @property
    def file_name(self) -> str:
        return self._file_location + self.class_name

    @property
    def package_name(self) -> str:
        return self._package_location + self.class_name

    def __repr__(self):
        return f"ModelName({self.package_name!r})"
