"""
Тесты построения графа моделей из OpenAPI
"""

import pytest

from openapi_index.exceptions import InvalidOptionError
from openapi_index.internal.names import PackagePrefix, PackagePrefixTable
from openapi_index.internal.parser.openapi import OpenApiModelParser
from openapi_index.internal.utils import to_var_name


def _spec(schemas):
    return {
        "openapi": "3.0.0",
        "info": {"title": "Test API", "version": "1.0.0"},
        "components": {"schemas": schemas},
    }


class TestOpenApiModelParser:
    """Тесты парсера схем"""

    def test_simple_model(self):
        """Тест простой модели со свойствами"""
        graph = OpenApiModelParser(
            _spec(
                {
                    "pet_info": {
                        "type": "object",
                        "description": "Питомец",
                        "properties": {
                            "pet_name": {"type": "string"},
                            "age": {"type": "integer"},
                            "born": {"type": "string", "format": "date-time"},
                        },
                    }
                }
            )
        ).parse()

        model = graph.models["PetInfo"]
        assert model.name == "pet_info"
        assert model.is_object is True
        assert model.description == "Питомец"
        assert [var.name for var in model.vars] == ["petName", "age", "born"]
        assert [var.datatype for var in model.vars] == ["string", "number", "Date"]
        assert graph.schemas["PetInfo"]["type"] == "object"

    def test_prefix_rules_applied(self):
        """Тест: имена моделей и ссылок проходят через правила префиксов"""
        prefixes = PackagePrefixTable(
            [PackagePrefix(prefix="shop_", location="shop/")]
        )
        graph = OpenApiModelParser(
            _spec(
                {
                    "shop_order": {
                        "type": "object",
                        "properties": {
                            "item": {"$ref": "#/components/schemas/shop_item"}
                        },
                    },
                    "shop_item": {"type": "object"},
                }
            ),
            prefixes,
        ).parse()

        assert set(graph.models) == {"shop.Order", "shop.Item"}
        item = graph.models["shop.Order"].vars[0]
        assert item.complex_type == "shop.Item"
        assert item.datatype == "Item"
        assert graph.models["shop.Order"].class_filename == "shop/Order"

    def test_array_property(self):
        """Тест массива ссылок"""
        graph = OpenApiModelParser(
            _spec(
                {
                    "Shelter": {
                        "type": "object",
                        "properties": {
                            "pets": {
                                "type": "array",
                                "items": {"$ref": "#/components/schemas/Pet"},
                            }
                        },
                    },
                    "Pet": {"type": "object"},
                }
            )
        ).parse()

        pets = graph.models["Shelter"].vars[0]
        assert pets.is_list_container is True
        assert pets.base_type == "array"
        assert pets.complex_type == "Pet"
        assert pets.datatype == "Array<Pet>"

    def test_array_of_enum(self):
        """Тест массива встроенного enum"""
        graph = OpenApiModelParser(
            _spec(
                {
                    "Pet": {
                        "type": "object",
                        "properties": {
                            "tags": {
                                "type": "array",
                                "items": {"type": "string", "enum": ["a", "b"]},
                            }
                        },
                    }
                }
            )
        ).parse()

        tags = graph.models["Pet"].vars[0]
        assert tags.is_enum is True
        assert tags.enum_name == "TagsEnum"
        assert tags.datatype_with_enum == "Array<TagsEnum>"
        assert tags.allowable_values["enumVars"] == [
            {"name": "A", "value": "'a'"},
            {"name": "B", "value": "'b'"},
        ]

    def test_enum_name_without_prefix_package(self):
        """Тест: имя встроенного enum - простое имя класса без пакета правила"""
        prefixes = PackagePrefixTable(
            [PackagePrefix(prefix="operation_", location="operation/")]
        )
        graph = OpenApiModelParser(
            _spec(
                {
                    "Task": {
                        "type": "object",
                        "properties": {
                            "operation_type": {"type": "string", "enum": ["a"]}
                        },
                    }
                }
            ),
            prefixes,
        ).parse()

        assert graph.models["Task"].vars[0].enum_name == "TypeEnum"

    def test_byte_array(self):
        """Тест строки в формате byte"""
        graph = OpenApiModelParser(
            _spec(
                {
                    "File": {
                        "type": "object",
                        "properties": {
                            "content": {"type": "string", "format": "byte"}
                        },
                    }
                }
            )
        ).parse()

        content = graph.models["File"].vars[0]
        assert content.is_byte_array is True
        assert content.datatype == "string"

    def test_parent_from_discriminator(self):
        """Тест: родитель - ссылка allOf на схему с дискриминатором"""
        graph = OpenApiModelParser(
            _spec(
                {
                    "Cat": {
                        "allOf": [
                            {"$ref": "#/components/schemas/Named"},
                            {"$ref": "#/components/schemas/Pet"},
                            {
                                "type": "object",
                                "properties": {"lives": {"type": "integer"}},
                            },
                        ]
                    },
                    "Named": {
                        "type": "object",
                        "properties": {"name": {"type": "string"}},
                    },
                    "Pet": {
                        "type": "object",
                        "properties": {"kind": {"type": "string"}},
                        "discriminator": {"propertyName": "kind"},
                    },
                }
            )
        ).parse()

        cat = graph.models["Cat"]
        assert cat.parent == "Pet"
        # Свойства не-родительской ссылки сливаются в модель
        assert [var.base_name for var in cat.vars] == ["name", "lives"]

    def test_merged_ref_keeps_nested_references(self):
        """Тест: ссылки внутри слитой схемы остаются ссылками"""
        graph = OpenApiModelParser(
            _spec(
                {
                    "Order": {
                        "allOf": [
                            {"$ref": "#/components/schemas/Owned"},
                            {"$ref": "#/components/schemas/Dated"},
                        ]
                    },
                    "Owned": {
                        "type": "object",
                        "properties": {
                            "owner": {"$ref": "#/components/schemas/Person"}
                        },
                    },
                    "Dated": {
                        "type": "object",
                        "properties": {"created": {"type": "string"}},
                    },
                    "Person": {"type": "object"},
                }
            )
        ).parse()

        order = graph.models["Order"]
        assert order.parent is None
        owner = order.vars[0]
        assert owner.base_name == "owner"
        assert owner.complex_type == "Person"

    def test_vendor_extensions_copied(self):
        """Тест копирования x- расширений"""
        schema = {
            "type": "object",
            "x-webpdf-codegen": {"extends": "Base"},
            "properties": {"id": {"type": "string", "x-internal": True}},
        }
        graph = OpenApiModelParser(_spec({"Pet": schema})).parse()

        model = graph.models["Pet"]
        assert model.vendor_extensions == {"x-webpdf-codegen": {"extends": "Base"}}
        assert model.vars[0].vendor_extensions == {"x-internal": True}

        model.vendor_extensions["x-webpdf-codegen"]["extends"] = "Changed"
        assert schema["x-webpdf-codegen"]["extends"] == "Base"

    def test_property_naming(self):
        """Тест соглашения имен свойств"""
        spec = _spec(
            {
                "Pet": {
                    "type": "object",
                    "properties": {"pet_name": {"type": "string"}},
                }
            }
        )

        pascal = OpenApiModelParser(spec, property_naming="PascalCase").parse()
        original = OpenApiModelParser(spec, property_naming="original").parse()

        assert pascal.models["Pet"].vars[0].name == "PetName"
        assert original.models["Pet"].vars[0].name == "pet_name"

    def test_invalid_property_naming(self):
        """Тест: недопустимое соглашение имен - ошибка"""
        with pytest.raises(InvalidOptionError):
            OpenApiModelParser(_spec({}), property_naming="kebab-case")

    def test_no_components(self):
        """Тест спецификации без схем"""
        graph = OpenApiModelParser({"openapi": "3.0.0", "paths": {}}).parse()

        assert graph.models == {}


class TestVarNames:
    """Тесты имен полей"""

    @pytest.mark.parametrize(
        "name,naming,expected",
        [
            ("pet_name", "camelCase", "petName"),
            ("petName", "snake_case", "pet_name"),
            ("pet-name", "camelCase", "petName"),
            ("class", "camelCase", "_class"),
            ("1st", "camelCase", "_1st"),
            ("ID", "camelCase", "ID"),
        ],
    )
    def test_to_var_name(self, name, naming, expected):
        """Тест преобразования имени свойства"""
        assert to_var_name(name, naming) == expected
