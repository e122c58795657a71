"""
Ошибки генерации индекса моделей

Все ошибки фатальны: они означают дефект схемы или конфигурации,
а не временный сбой, поэтому генерация прерывается сразу.
"""

from typing import List


class CodegenError(ValueError):
    """Базовая ошибка генератора"""


class NameCollisionError(CodegenError):
    """Одно экспортируемое имя объявлено в двух разных пакетах"""

    def __init__(
        self, name: str, existing_location: str, new_location: str, hint: str = None
    ):
        self.name = name
        self.existing_location = existing_location
        self.new_location = new_location
        message = f"{existing_location} и {new_location} конфликтуют по имени {name}!"
        super().__init__(f"{message} {hint}" if hint else message)


class ModelNotFoundError(CodegenError):
    """Модель не найдена в индексе после регистрации"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Модель {name} не найдена в индексе")


class InvalidOptionError(CodegenError):
    """Недопустимое значение опции генератора"""

    def __init__(self, option: str, value: str, allowed: List[str]):
        self.option = option
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Недопустимое значение {option} '{value}'. "
            f"Допустимо: {', '.join(repr(a) for a in allowed)}"
        )


class ExtractedEnumCollisionError(CodegenError):
    """Извлеченный enum совпадает с обычным объявлением"""

    def __init__(self, package_location: str):
        self.package_location = package_location
        super().__init__(
            f"Извлеченный enum {package_location} совпадает с обычным объявлением типа"
        )


class InheritanceCycleError(CodegenError):
    """Цикл наследования при сортировке индекса"""

    def __init__(self, cycle: List[str]):
        self.cycle = cycle
        super().__init__(f"Цикл наследования: {' -> '.join(cycle)}")
