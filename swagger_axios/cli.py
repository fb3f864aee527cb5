import argparse
import logging
import sys
from typing import List, Optional

import httpx

from swagger_axios.config import DEFAULT_CONFIG_PATH, SwaggerAxiosConfig
from swagger_axios.exceptions import CodegenError, UnsupportedSpecVersion
from swagger_axios.internal.generator.client_generator import ClientGenerator
from swagger_axios.internal.parser.swagger import (
    SUPPORTED_VERSION,
    SwaggerParser,
    load_document,
)
from swagger_axios.writer import save_project


def confirm_choice(message: str) -> bool:
    """Запрос подтверждения у пользователя"""
    while True:
        choice = input(f"{message} (y/n): ").lower().strip()
        if choice in ["y", "yes", "да", ""]:
            return True
        elif choice in ["n", "no", "нет"]:
            return False
        print("Введите y/n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swagger-axios",
        description="Генерация TypeScript клиента (axios) из Swagger 2.0",
    )
    parser.add_argument("-u", "--url", type=str, help="URL или путь к Swagger спецификации")
    parser.add_argument(
        "-o",
        "--out",
        type=str,
        help="Директория для генерации, будет полностью перезаписана",
    )
    parser.add_argument(
        "-i",
        "--include",
        action="append",
        help="Префикс путей API для включения (по умолчанию все)",
    )
    parser.add_argument(
        "-x", "--exclude", action="append", help="Префикс путей API для исключения"
    )
    parser.add_argument(
        "--skip-tags",
        action="store_true",
        default=None,
        help="Не раскладывать stub по папкам тегов",
    )
    parser.add_argument("--result-data-field", type=str, help="Поле данных в ответе")
    parser.add_argument("--result-error-field", type=str, help="Поле ошибки в ответе")
    parser.add_argument(
        "--js",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Скомпилировать код в JavaScript через tsc",
    )
    parser.add_argument(
        "--axios-instance-path",
        type=str,
        help="Путь к своему axios instance (auth, base url, распаковка ответа)",
    )
    parser.add_argument(
        "--empty-body-object",
        action="store_true",
        default=None,
        help="Передавать data: {} вместо undefined, если нет body",
    )
    parser.add_argument(
        "--config", type=str, default=DEFAULT_CONFIG_PATH, help="Файл конфигурации"
    )
    parser.add_argument(
        "-f", "--force", action="store_true", help="Генерировать без подтверждения"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Подробное логирование"
    )
    return parser


def _generate_client(config: SwaggerAxiosConfig, force: bool = False) -> bool:
    """Загрузка спецификации, генерация и сохранение клиента"""
    print(f"📥 Загрузка спецификации из {config.url}...")
    document = load_document(config.url)

    info = document.get("info") or {}
    print(
        f'📋 API: "{info.get("title")}", описание: "{info.get("description")}", '
        f"версия: {document.get('swagger')}"
    )
    if document.get("swagger") != SUPPORTED_VERSION:
        raise UnsupportedSpecVersion(document.get("swagger"))

    if not force and not confirm_choice(
        f'⚠️ Директория "{config.out}" будет удалена и сгенерирована заново. Продолжить?'
    ):
        print("🚫 Отменено")
        return False

    print("⚙️ Генерация кода...")
    spec = SwaggerParser(document).parse()
    project = ClientGenerator(spec, config).generate()

    print(f"💾 Сохранение {len(project.files)} файлов...")
    save_project(project, config.out, js=config.js)

    print("✅ Генерация завершена успешно!")
    print(f"📦 Клиент создан в: {config.out}")
    return True


def generate(argv: Optional[List[str]] = None):
    """Команда генерации TypeScript клиента"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    file_config = SwaggerAxiosConfig.from_file(args.config)
    if file_config:
        print(f"🔧 Используется конфиг из {args.config}")
    config = (file_config or SwaggerAxiosConfig()).merge_with_args(args)

    if not config.url:
        print("❌ Ошибка: URL не указан ни в конфиге, ни в аргументах")
        sys.exit(1)
    if not config.out:
        print("❌ Ошибка: директория вывода не указана ни в конфиге, ни в аргументах")
        sys.exit(1)

    try:
        generated = _generate_client(config, force=args.force)
        if generated and not file_config and (
            args.force or confirm_choice(f"Сохранить настройки в {args.config}?")
        ):
            config.save_to_file(args.config)
            print(f"💾 Конфиг сохранен в {args.config}")
    except (CodegenError, httpx.HTTPError, OSError, ValueError) as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    generate()
