import json
from typing import Any, Dict

from ..extension import ExtensionStore, Index
from ..types.codegen import ModelGraph
from ..types.models import CodeBlock, CodeFile, Project

INDEX_FILE = "index.ts"
METADATA_FILE = "metadata.json"


class IndexRenderer:
    """Сборка агрегирующего index.ts и метаданных для шаблонов"""

    def __init__(self, index: Index, store: ExtensionStore, graph: ModelGraph):
        self.index = index
        self.store = store
        self.graph = graph

    def render(self, project: Project = None) -> Project:
        project = project or Project(name="models")
        project.add_file(self.render_index())
        project.add_file(self.render_metadata())
        return project

    def render_index(self) -> CodeFile:
        index_file = CodeFile(file_name=INDEX_FILE)
        index_file.header.append("// Auto-generated model index")
        for entry in self.index:
            index_file.add_code_block(
                CodeBlock(
                    code=f"export {{ {', '.join(entry.exported_names)} }} "
                    f"from '{entry.file_location}';"
                )
            )
        return index_file

    def render_metadata(self) -> CodeFile:
        metadata_file = CodeFile(file_name=METADATA_FILE)
        metadata_file.add_code_block(
            CodeBlock(code=json.dumps(self.metadata(), indent=2, ensure_ascii=False))
        )
        return metadata_file

    def metadata(self) -> Dict[str, Any]:
        """Упорядоченный индекс и записи расширений всех моделей"""
        models = {}
        for classname, model in self.graph.models.items():
            record = self.store.determine_extension(model)
            models[classname] = {
                "name": model.name,
                "isEnum": model.is_enum,
                "isAlias": model.is_alias,
                "dataType": model.data_type,
                "extension": record.to_bag(),
                "properties": {
                    var.base_name or var.name: self.store.determine_extension(
                        var
                    ).to_bag()
                    for var in model.vars
                },
            }

        return {
            "index": [
                {
                    "fileLocation": entry.file_location,
                    "packageLocation": entry.package_location,
                    "exportedNames": list(entry.exported_names),
                }
                for entry in self.index
            ],
            "models": models,
        }
