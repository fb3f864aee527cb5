"""
Главный модуль генератора - чистый интерфейс
"""

from typing import Any, Dict, Optional

from .config import SwaggerAxiosConfig
from .internal.generator.client_generator import ClientGenerator
from .internal.parser.swagger import SwaggerParser
from .internal.types.models import Project


class ApiClientGenerator:
    """Чистый интерфейс для генерации TypeScript клиентов"""

    def __init__(
        self,
        swagger_spec: Dict[str, Any],
        config: Optional[SwaggerAxiosConfig] = None,
    ):
        self.parser = SwaggerParser(swagger_spec)
        self.config = config or SwaggerAxiosConfig()

    def generate(self) -> Project:
        """Генерация проекта клиента"""
        spec = self.parser.parse()
        return ClientGenerator(spec, self.config).generate()


def generate_client(
    swagger_spec: Dict[str, Any], config: Optional[SwaggerAxiosConfig] = None
) -> Project:
    """Создание TypeScript клиента из Swagger спецификации"""
    return ApiClientGenerator(swagger_spec, config).generate()
