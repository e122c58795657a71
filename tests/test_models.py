"""
Тесты текстовой модели файлов
"""

import os
import tempfile

from openapi_index.internal.types.models import CodeBlock, CodeFile, Project


class TestCodeFile:
    """Тесты сборки текста файла"""

    def test_header_and_blocks(self):
        """Тест заголовка и порядка блоков"""
        code_file = CodeFile(file_name="index.ts", header=["// header"])
        code_file.add_code_block("first").add_code_block("second")
        code_file.add_code_block(CodeBlock(order=1, code="top"))

        assert str(code_file) == "// header\n\ntop\nfirst\nsecond\n"

    def test_tabs_replaced(self):
        """Тест замены табуляции"""
        code_file = CodeFile(file_name="a.ts").add_code_block("\tx")

        assert str(code_file) == "  x\n"


class TestProject:
    """Тесты проекта"""

    def test_write(self):
        """Тест записи файлов на диск"""
        project = Project(name="models")
        project.add_file("index.ts").add_code_block("export {};")
        project.add_file("nested/meta.json").add_code_block("{}")

        with tempfile.TemporaryDirectory() as temp_dir:
            paths = project.write(temp_dir)

            assert len(paths) == 2
            with open(os.path.join(temp_dir, "nested", "meta.json")) as f:
                assert f.read() == "{}\n"

    def test_get_missing_file(self):
        """Тест поиска отсутствующего файла"""
        assert Project(name="models").get_file("index.ts") is None
