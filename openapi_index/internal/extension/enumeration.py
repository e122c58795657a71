from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class EnumerationDefinition(BaseModel):
    """Члены извлеченного enum: имя -> литерал"""

    model_config = ConfigDict(populate_by_name=True)

    package_name: str = Field(alias="packageName")
    members: Dict[str, str] = Field(default_factory=dict, alias="enumValues")

    def put(self, key: str, value: str) -> "EnumerationDefinition":
        self.members[key] = value
        return self
