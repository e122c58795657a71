"""
Тесты индекса экспортируемых объявлений
"""

import pytest

from openapi_index.exceptions import InheritanceCycleError, NameCollisionError
from openapi_index.internal.extension import (
    EXTENSION_NAME,
    ExtensionStore,
    Index,
    IndexEntry,
)
from openapi_index.internal.types.codegen import CodegenModel


def _entry(classname: str, parent: str = None, extends: str = None) -> IndexEntry:
    vendor_extensions = {EXTENSION_NAME: {"extends": extends}} if extends else {}
    model = CodegenModel(
        name=classname,
        classname=classname,
        parent=parent,
        vendor_extensions=vendor_extensions,
    )
    name = classname.rpartition(".")[2]
    return IndexEntry(
        "./" + classname.replace(".", "/"), classname, model, [name, name + "Interface"]
    )


class TestIndex:
    """Тесты регистрации и сортировки"""

    def test_add_identical_entry_twice(self):
        """Тест: одинаковая запись регистрируется один раз"""
        index = Index("", ExtensionStore())

        index.add(_entry("Pet"), _entry("Pet"))

        assert len(index) == 1
        assert index.get("PetInterface").package_location == "Pet"

    def test_collision_at_different_location(self):
        """Тест: одно имя в разных пакетах - ошибка"""
        index = Index("", ExtensionStore())
        index.add(_entry("shop.Color"))

        with pytest.raises(NameCollisionError) as exc_info:
            index.add(_entry("paint.Color"))

        assert exc_info.value.name == "Color"
        assert exc_info.value.existing_location == "shop.Color"

    def test_add_exported_name(self):
        """Тест дополнительного имени существующей записи"""
        index = Index("", ExtensionStore())
        entry = _entry("Pet")
        index.add(entry)

        index.add_exported_name(entry, "StatusEnum")
        index.add_exported_name(entry, "StatusEnum")

        assert entry.exported_names == ["Pet", "PetInterface", "StatusEnum"]
        assert index.get("StatusEnum") is entry

    def test_add_exported_name_collision(self):
        """Тест: дополнительное имя конфликтует с другим пакетом"""
        index = Index("", ExtensionStore())
        pet = _entry("Pet")
        index.add(pet, _entry("paint.Color"))

        with pytest.raises(NameCollisionError):
            index.add_exported_name(pet, "Color")

    def test_get_missing(self):
        """Тест поиска отсутствующего имени"""
        assert Index("", ExtensionStore()).get("Missing") is None

    def test_sort_parent_first(self):
        """Тест: родитель раньше наследника"""
        index = Index("", ExtensionStore())
        index.add(_entry("PetResponse", parent="PetBase"), _entry("PetBase"))

        index.sort()

        assert [entry.package_location for entry in index] == [
            "PetBase",
            "PetResponse",
        ]

    def test_sort_extends_first(self):
        """Тест: база extends раньше наследника"""
        index = Index("", ExtensionStore())
        index.add(_entry("Cat", extends="Animal"), _entry("Other"), _entry("Animal"))

        index.sort()

        locations = [entry.package_location for entry in index]
        assert locations.index("Animal") < locations.index("Cat")
        assert len(locations) == 3

    def test_sort_keeps_independent_order(self):
        """Тест: независимые записи сохраняют порядок добавления"""
        index = Index("", ExtensionStore())
        index.add(_entry("B"), _entry("A"), _entry("C"))

        index.sort()

        assert [entry.package_location for entry in index] == ["B", "A", "C"]

    def test_sort_deep_chain(self):
        """Тест цепочки наследования"""
        index = Index("", ExtensionStore())
        index.add(
            _entry("C", parent="B"),
            _entry("B", parent="A"),
            _entry("A"),
        )

        index.sort()

        assert [entry.package_location for entry in index] == ["A", "B", "C"]

    def test_sort_unknown_parent_ignored(self):
        """Тест: родитель вне индекса не мешает сортировке"""
        index = Index("", ExtensionStore())
        index.add(_entry("Pet", parent="External"))

        index.sort()

        assert len(index.ordered_entries) == 1

    def test_sort_cycle(self):
        """Тест: цикл наследования - ошибка со списком цикла"""
        index = Index("", ExtensionStore())
        index.add(_entry("A", parent="B"), _entry("B", parent="A"))

        with pytest.raises(InheritanceCycleError) as exc_info:
            index.sort()

        assert exc_info.value.cycle == ["A", "B", "A"]

    def test_inline_enum_collision_hint(self):
        """Тест: конфликт встроенного enum подсказывает enumName"""
        index = Index("", ExtensionStore())
        order = _entry("Order")
        invoice = _entry("billing.Invoice")
        index.add(order, invoice)
        index.add_exported_name(order, "StatusEnum")

        with pytest.raises(NameCollisionError) as exc_info:
            index.add_exported_name(invoice, "StatusEnum")

        assert "enumName" in str(exc_info.value)
        assert exc_info.value.new_location == "billing.Invoice"
