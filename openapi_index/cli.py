import argparse
import logging
import os
import sys

from openapi_index.config import CONFIG_FILE, IndexConfig
from openapi_index.exceptions import CodegenError
from openapi_index.generator import ModelIndexGenerator, load_openapi
from openapi_index.internal.types.models import Project
from openapi_index.internal.utils import PROPERTY_NAMING_OPTIONS


def confirm_choice(message: str) -> bool:
    """Запрос подтверждения у пользователя"""
    while True:
        choice = input(f"{message} (y/n): ").lower().strip()
        if choice in ["y", "yes", "да", ""]:
            return True
        elif choice in ["n", "no", "нет"]:
            return False
        print("Введите y/n")


def _generate_index_core(config: IndexConfig) -> Project:
    """Ядро генерации - только генерация без сохранения"""
    if not config.url:
        raise CodegenError("URL не указан в конфигурации")

    print(f"🚀 Генерация индекса моделей из {config.url}")

    print("📥 Загрузка OpenAPI спецификации...")
    openapi_spec = load_openapi(config.url)

    print("⚙️ Обработка моделей...")
    generator = ModelIndexGenerator(openapi_spec, config)
    project = generator.generate()
    print(f"📚 Моделей: {len(generator.graph.models)}, экспортов: {len(generator.index)}")
    return project


def _save_project_files(project: Project, target_path: str):
    """Сохранение файлов проекта"""
    print(f"💾 Сохранение {len(project.files)} файлов...")

    for path in project.write(target_path):
        print(f"   {path}")

    print("✅ Генерация завершена успешно!")
    print(f"📦 Индекс создан в: {os.path.abspath(target_path)}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Генерация индекса TypeScript моделей из OpenAPI"
    )
    parser.add_argument("--url", type=str, help="URL или путь к OpenAPI спецификации")
    parser.add_argument("--dirname", type=str, help="Директория для генерации индекса")
    parser.add_argument("--model-package", type=str, help="Базовый пакет моделей")
    parser.add_argument(
        "--naming",
        type=str,
        choices=PROPERTY_NAMING_OPTIONS,
        help="Соглашение имен свойств",
    )
    parser.add_argument(
        "--prefixes", type=str, help="JSON файл с правилами префиксов пакетов"
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help=f"Создать конфиг файл {CONFIG_FILE}",
    )
    parser.add_argument(
        "--force", action="store_true", help="Генерировать без подтверждения"
    )
    parser.add_argument("--verbose", action="store_true", help="Подробный лог")
    return parser


def generate():
    """Команда генерации индекса моделей"""
    args = _build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        # Инициализация конфига
        if args.init_config:
            config = IndexConfig(
                url=args.url,
                dirname=args.dirname or "models",
                model_package=args.model_package or "",
                model_property_naming=args.naming or "camelCase",
                prefix_config=args.prefixes,
            )
            config.save_to_file()
            print(f"✅ Создан конфиг файл {CONFIG_FILE}")
            return

        file_config = IndexConfig.from_file(search_dir=args.dirname)

        if file_config and args.url:
            print(f"🔧 Найден конфиг файл {CONFIG_FILE}:")
            print(f"   URL: {file_config.url}")
            print(f"   Директория: {file_config.dirname}")
            print()

            if args.force or confirm_choice("Использовать конфиг из файла?"):
                final_config = file_config
            else:
                final_config = file_config.merge_with_args(args)
        elif file_config:
            print(f"📋 Используется конфиг из {CONFIG_FILE}")
            final_config = file_config.merge_with_args(args)
        elif args.url:
            final_config = IndexConfig(
                url=args.url,
                dirname=args.dirname or "models",
                model_package=args.model_package or "",
                model_property_naming=args.naming or "camelCase",
                prefix_config=args.prefixes,
            )
        else:
            print("❌ Ошибка: Укажите URL или создайте конфиг с --init-config")
            sys.exit(1)

        if not final_config.url:
            print("❌ Ошибка: URL не указан ни в конфиге, ни в аргументах")
            sys.exit(1)

        project = _generate_index_core(final_config)
        _save_project_files(project, final_config.dirname or "models")

    except CodegenError as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    generate()
