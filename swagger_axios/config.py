"""
Конфигурация для генерации TypeScript клиента
"""

import logging
import os
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional

import toml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "swagger-axios.toml"


@dataclass
class SwaggerAxiosConfig:
    """Конфигурация генератора"""

    url: Optional[str] = None
    out: Optional[str] = None

    # Префиксы путей API для включения/исключения
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)

    skip_tags: bool = False

    # Поля обертки ответа: {data: ..., error: ...}
    result_data_field: Optional[str] = None
    result_error_field: Optional[str] = None

    js: bool = False
    axios_instance_path: Optional[str] = None
    empty_body_object: bool = False

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "SwaggerAxiosConfig":
        """Создание конфигурации из словаря (ключи в kebab-case или snake_case)"""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in config_data.items():
            name = key.replace("-", "_")
            if name not in known:
                logger.warning("Unknown config key %r ignored", key)
                continue
            values[name] = value

        for name in ("include", "exclude"):
            if isinstance(values.get(name), str):
                values[name] = [values[name]]

        return cls(**values)

    @classmethod
    def from_file(
        cls, config_path: str = DEFAULT_CONFIG_PATH
    ) -> Optional["SwaggerAxiosConfig"]:
        """Загрузка конфигурации из файла"""
        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (toml.TomlDecodeError, OSError) as exc:
            logger.warning("Unable to read config %s: %s", config_path, exc)
            return None

        return cls.from_dict(config_data)

    def save_to_file(self, config_path: str = DEFAULT_CONFIG_PATH) -> None:
        """Сохранение конфигурации в файл"""
        # TOML не умеет хранить None
        config_data = {k: v for k, v in asdict(self).items() if v is not None}

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "SwaggerAxiosConfig":
        """Объединение с аргументами командной строки"""
        values = asdict(self)
        for f in fields(self):
            value = getattr(args, f.name, None)
            if value is not None:
                values[f.name] = value

        return SwaggerAxiosConfig(**values)
