"""
Сохранение сгенерированного проекта через временную директорию
"""

import json
import logging
import os
import shutil
import subprocess
from typing import Sequence

from .exceptions import OutputError
from .internal.generator.templates import templates
from .internal.types.models import Project

logger = logging.getLogger(__name__)

LOCK_DIR = ".swagger-axios"
TSC_COMMAND = ("npx", "tsc")


def save_project(
    project: Project,
    out: str,
    js: bool = False,
    lock_dir: str = LOCK_DIR,
    tsc_command: Sequence[str] = TSC_COMMAND,
) -> None:
    """
    Запись файлов проекта в ``out``.

    Файлы пишутся во временную директорию ``lock_dir``, которая одновременно
    служит блокировкой от параллельного запуска. Только после успешной
    записи (и компиляции в JavaScript, если нужно) старый каталог вывода
    удаляется и заменяется временным.
    """
    if os.path.exists(lock_dir):
        raise OutputError(
            f"Temp directory {lock_dir} exists, is there another process running?"
        )
    if os.path.isfile(out):
        raise OutputError(f'Output "{out}" is a file.')

    os.makedirs(lock_dir)
    try:
        for code_file in project.files:
            path = os.path.join(lock_dir, code_file.file_name)
            os.makedirs(os.path.dirname(path), exist_ok=True)

            with open(path, "w", encoding="utf-8") as f:
                f.write(str(code_file))

        logger.info("Staged %d files in %s", len(project.files), lock_dir)

        if js:
            compile_js(lock_dir, tsc_command)

        # Удаляем старый вывод и подменяем его временной директорией
        if os.path.exists(out):
            shutil.rmtree(out)
        parent = os.path.dirname(os.path.abspath(out))
        os.makedirs(parent, exist_ok=True)
        os.rename(lock_dir, out)
    finally:
        if os.path.exists(lock_dir):
            shutil.rmtree(lock_dir)


def compile_js(directory: str, tsc_command: Sequence[str] = TSC_COMMAND) -> None:
    """Компиляция TypeScript в JavaScript внешним tsc"""
    tsconfig_path = os.path.join(directory, "tsconfig.json")
    with open(tsconfig_path, "w", encoding="utf-8") as f:
        json.dump(templates.tsconfig, f)

    try:
        logger.info("Running %s in %s", " ".join(tsc_command), directory)
        try:
            result = subprocess.run(list(tsc_command), cwd=directory)
        except OSError as exc:
            raise OutputError(f"Unable to run {' '.join(tsc_command)}: {exc}") from exc

        if result.returncode != 0:
            raise OutputError(
                f"{' '.join(tsc_command)} exited with code {result.returncode}"
            )
    finally:
        if os.path.exists(tsconfig_path):
            os.unlink(tsconfig_path)
