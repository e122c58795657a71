"""
Граф моделей, который поставляет генератор-хозяин

Каждый объект несет общий словарь vendor_extensions ("мешок расширений"),
куда по окончании прохода выгружаются вычисленные метаданные.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel


class Discriminator(BaseModel):
    property_name: Optional[str] = None
    mapping: Optional[Dict[str, str]] = None


class CodegenProperty(BaseModel):
    name: str
    base_name: Optional[str] = None
    base_type: Optional[str] = None
    complex_type: Optional[str] = None
    datatype: Optional[str] = None
    datatype_with_enum: Optional[str] = None
    description: Optional[str] = None
    default_value: Optional[str] = None

    is_enum: bool = False
    is_list_container: bool = False
    is_map_container: bool = False
    is_byte_array: bool = False
    is_primitive_type: bool = False

    enum_name: Optional[str] = None
    allowable_values: Dict[str, Any] = {}
    items: Optional["CodegenProperty"] = None

    vendor_extensions: Dict[str, Any] = {}


class CodegenModel(BaseModel):
    name: str
    classname: str
    class_filename: Optional[str] = None
    parent: Optional[str] = None
    description: Optional[str] = None
    discriminator: Optional[Discriminator] = None

    vars: List[CodegenProperty] = []

    is_enum: bool = False
    is_alias: bool = False
    is_object: bool = False
    data_type: Optional[str] = None
    default_value: Optional[str] = None

    imports: Set[str] = set()
    vendor_extensions: Dict[str, Any] = {}


CodegenProperty.model_rebuild()


@dataclass
class ModelGraph:
    """Нормализованный граф: classname -> модель и classname -> сырая схема"""

    models: Dict[str, CodegenModel] = field(default_factory=dict)
    schemas: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def add(self, model: CodegenModel, schema: Dict[str, Any]) -> CodegenModel:
        self.models[model.classname] = model
        self.schemas[model.classname] = schema
        return model
