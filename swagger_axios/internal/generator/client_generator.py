import logging
from typing import Dict, List, Optional

from ...config import SwaggerAxiosConfig
from ...exceptions import DuplicateOperationId, MissingOperationId
from ..types.models import CodeBlock, Project
from ..types.schema import Operation, Schema, SwaggerSpec
from ..types.schema_resolver import SchemaRegistry
from ..utils.layout import AXIOS_INSTANCE_MODULE, MODELS_MODULE, plan_stub_layout
from .http_client import generate_axios_instance
from .model_generator import generate_all
from .stub_generator import StubContext, generate_stub

logger = logging.getLogger(__name__)


class ClientGenerator:
    """Генератор TypeScript клиента из Swagger 2.0"""

    def __init__(
        self, spec: SwaggerSpec, config: Optional[SwaggerAxiosConfig] = None
    ):
        self.spec = spec
        self.config = config or SwaggerAxiosConfig()
        self.project = Project(name=spec.title or "api")
        self.registry = SchemaRegistry(spec.definitions)
        self.required_schemas: Dict[str, Schema] = {}

    def generate(self) -> Project:
        """Основная генерация: все файлы собираются в памяти"""
        operations = self._select_operations()
        self._check_operation_ids(operations)
        self._require_schemas(operations)
        self._generate_models()
        self._generate_axios_instance()
        self._generate_stubs(operations)
        return self.project

    def _select_operations(self) -> List[Operation]:
        """Операции путей, прошедших фильтры include/exclude"""
        include = self.config.include or []
        exclude = self.config.exclude or []

        operations = []
        for path, methods in self.spec.paths.items():
            if include and not any(path.startswith(prefix) for prefix in include):
                continue
            if exclude and any(path.startswith(prefix) for prefix in exclude):
                continue
            operations.extend(methods.values())

        logger.info("Selected %d operations", len(operations))
        return operations

    @staticmethod
    def _check_operation_ids(operations: List[Operation]):
        for op in operations:
            if not op.operation_id:
                raise MissingOperationId(op.path, op.method)

    def _require_schemas(self, operations: List[Operation]):
        """Замыкание схем, достижимых из параметров и ответов операций"""
        for op in operations:
            for node in op.schema_nodes():
                self.registry.require(node, self.required_schemas)

        logger.info(
            "Required %d of %d schemas", len(self.required_schemas), len(self.registry)
        )

    def _generate_models(self):
        self.project.add_file(f"{MODELS_MODULE}.ts").add_code_block(
            CodeBlock(code=generate_all(self.required_schemas))
        )

    def _generate_axios_instance(self):
        self.project.add_file(f"{AXIOS_INSTANCE_MODULE}.ts").add_code_block(
            CodeBlock(code=generate_axios_instance(self.spec, self.config))
        )

    def _generate_stubs(self, operations: List[Operation]):
        for op in operations:
            layout = plan_stub_layout(op, self.config)
            code = generate_stub(
                StubContext(
                    path=op.path,
                    method=op.method,
                    op=op,
                    axios_instance_path=layout.axios_instance_path,
                    model_path=layout.model_path,
                    data_field=self.config.result_data_field,
                    empty_body_object=self.config.empty_body_object,
                )
            )

            for file_name in layout.file_names:
                if self.project.get_file(file_name) is not None:
                    raise DuplicateOperationId(op.operation_id, file_name)
                self.project.add_file(file_name).add_code_block(CodeBlock(code=code))
