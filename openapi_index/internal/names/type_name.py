from typing import List


class TypeName:
    """
    Квалифицированное имя типа: пакет через точку и простое имя.

    Из "admin.config.AdminConfig" получается пакет "admin.config"
    и имя "AdminConfig". Имя без точек целиком уходит в простое имя.
    """

    def __init__(self, model_name: str):
        pack, _, name = model_name.rpartition(".")
        self.model_name = model_name
        self.pack = pack
        self.name = name

    @classmethod
    def from_parts(cls, pack: str, name: str) -> "TypeName":
        type_name = cls.__new__(cls)
        type_name.pack = pack
        type_name.name = name
        type_name.model_name = type_name.package_location("")
        return type_name

    def package_path(self, base_path: str) -> str:
        if not base_path:
            return self.pack
        if not self.pack:
            return base_path
        return f"{base_path}.{self.pack}"

    def package_location(self, base_path: str) -> str:
        path = self.package_path(base_path)
        return f"{path}.{self.name}" if path else self.name

    def root_file_location(self) -> str:
        """Путь к файлу объявления относительно корня моделей"""
        segments = _segments(self.pack)
        if not segments:
            return f"./{self.name}"
        return "./" + "/".join(segments) + "/" + self.name

    def relative_file_path(self, base_path: str) -> str:
        """
        Лексический относительный путь от пакета base_path до собственного пакета.

        Файловая система не используется, сравниваются только сегменты.
        """
        if self.pack == base_path:
            return "."

        current = _segments(self.pack)
        target = _segments(base_path)

        common = 0
        while (
            common < len(current)
            and common < len(target)
            and current[common] == target[common]
        ):
            common += 1

        parts = [".."] * (len(target) - common) + current[common:]
        if not parts:
            return "."
        return "./" + "/".join(parts)

    def relative_file_location(self, base_path: str) -> str:
        path = self.relative_file_path(base_path)
        return f"{path}/{self.name}" if path else self.name

    def __eq__(self, other):
        if not isinstance(other, TypeName):
            return NotImplemented
        return self.pack == other.pack and self.name == other.name

    def __hash__(self):
        return hash((self.pack, self.name))

    def __repr__(self):
        return f"TypeName(pack={self.pack!r}, name={self.name!r})"


def _segments(pack: str) -> List[str]:
    return [segment for segment in pack.replace(".", "/").split("/") if segment]
