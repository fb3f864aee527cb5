"""Раскладка сгенерированных файлов по папкам и относительные пути импорта"""

import os
import posixpath
from dataclasses import dataclass, field
from typing import List

from ...config import SwaggerAxiosConfig
from ..types.schema import Operation
from .naming import tag_folder

MODELS_MODULE = "models"
AXIOS_INSTANCE_MODULE = "axiosInstance"
STUB_EXTENSION = ".ts"


@dataclass
class StubLayout:
    """Куда положить stub и откуда он импортирует зависимости"""

    file_names: List[str] = field(default_factory=list)
    axios_instance_path: str = "./" + AXIOS_INSTANCE_MODULE
    model_path: str = "./" + MODELS_MODULE


def uses_tag_folders(operation: Operation, config: SwaggerAxiosConfig) -> bool:
    return not config.skip_tags and bool(operation.tags)


def resolve_axios_instance_path(
    configured_path: str, out: str, stub_dir: str = ""
) -> str:
    """
    Путь к пользовательскому axios instance относительно файла stub.

    Относительный путь задается от текущей директории и пересчитывается
    от каталога, в котором лежит stub (``out`` или ``out/<тег>``).
    Абсолютные пути и имена пакетов не меняются.
    """
    if not configured_path.startswith(("./", "../")):
        return configured_path

    target = os.path.abspath(configured_path)
    source = os.path.abspath(os.path.join(out or ".", stub_dir))
    resolved = os.path.relpath(target, source).replace(os.sep, "/")
    if not resolved.startswith(("./", "../")):
        resolved = "./" + resolved
    return resolved


def plan_stub_layout(
    operation: Operation, config: SwaggerAxiosConfig
) -> StubLayout:
    """Имена файлов и пути импорта для stub операции"""
    in_tag_folder = uses_tag_folders(operation, config)
    stub_name = f"{operation.operation_id}{STUB_EXTENSION}"

    if in_tag_folder:
        file_names = []
        for tag in operation.tags:
            file_name = posixpath.join(tag_folder(tag), stub_name)
            if file_name not in file_names:
                file_names.append(file_name)
        prefix = "../"
    else:
        file_names = [stub_name]
        prefix = "./"

    if config.axios_instance_path:
        axios_instance_path = resolve_axios_instance_path(
            config.axios_instance_path, config.out, posixpath.dirname(file_names[0])
        )
    else:
        axios_instance_path = prefix + AXIOS_INSTANCE_MODULE

    return StubLayout(
        file_names=file_names,
        axios_instance_path=axios_instance_path,
        model_path=prefix + MODELS_MODULE,
    )
