"""Текстовая модель генерируемых файлов"""

import os
from typing import List, Optional, Union

from pydantic import BaseModel


class CodeBlock(BaseModel):
    order: int = 0
    code: str = ""

    def __str__(self):
        return self.code.replace("\t", "  ")


class CodeFile(BaseModel):
    file_name: str

    header: List[str] = []
    code_blocks: List[CodeBlock] = []

    def __str__(self):
        # Блоки с большим order выше, равные - в порядке добавления
        blocks = sorted(self.code_blocks, key=lambda x: x.order, reverse=True)
        sections = ["\n".join(self.header), "\n".join(map(str, blocks))]
        return "\n\n".join(filter(bool, sections)) + "\n"

    def add_code_block(self, code_block: Union[CodeBlock, str], **kwargs) -> "CodeFile":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block, **kwargs)

        self.code_blocks.append(code_block)
        return self


class Project(BaseModel):
    name: str
    files: List[CodeFile] = []

    def add_file(self, code_file: Union[CodeFile, str], **kwargs) -> CodeFile:
        if isinstance(code_file, str):
            code_file = CodeFile(file_name=code_file, **kwargs)

        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional[CodeFile]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file
        return None

    def write(self, target_path: str) -> List[str]:
        """Запись всех файлов проекта, возвращает пути"""
        paths = []
        for code_file in self.files:
            path = os.path.join(target_path, code_file.file_name)
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

            with open(path, "w", encoding="utf-8") as f:
                f.write(str(code_file))
            paths.append(path)
        return paths
