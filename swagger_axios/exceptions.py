"""
Ошибки генерации клиента
"""

import json
from typing import Any, Iterable, Optional


class CodegenError(Exception):
    """Базовая ошибка генератора"""


class InvalidReference(CodegenError):
    def __init__(self, ref: str):
        self.ref = ref
        super().__init__(f"Unexpected schema ref: {ref!r}")


class UnresolvedReference(CodegenError):
    def __init__(self, ref: str):
        self.ref = ref
        super().__init__(f"Unable to find schema {ref}")


class UnsupportedSchemaType(CodegenError):
    def __init__(self, schema_type: Optional[str], raw: Any):
        self.schema_type = schema_type
        self.raw = raw
        super().__init__(
            f"Unexpected schema type {schema_type}, raw: {_dump(raw)}"
        )


class MissingArrayItems(CodegenError):
    def __init__(self, raw: Any = None):
        self.raw = raw
        super().__init__(
            f"Schema items is required when type is array, raw: {_dump(raw)}"
        )


class MissingResponseSchema(CodegenError):
    def __init__(self, path: str, method: str):
        self.path = path
        self.method = method
        super().__init__(
            f"Expect response 200 of {method.upper()} {path} to include a schema"
        )


class MissingOperationId(CodegenError):
    def __init__(self, path: str, method: str):
        self.path = path
        self.method = method
        super().__init__(
            f"Operation path {path} method {method} does not have an operationId"
        )


class DuplicateOperationId(CodegenError):
    def __init__(self, operation_id: str, file_name: str):
        self.operation_id = operation_id
        self.file_name = file_name
        super().__init__(
            f"Operation id {operation_id!r} is used more than once ({file_name})"
        )


class CyclicSchema(CodegenError):
    def __init__(self, chain: Iterable[str]):
        self.chain = list(chain)
        super().__init__(f"Cyclic schema reference: {' -> '.join(self.chain)}")


class AmbiguousModelName(CodegenError):
    def __init__(self, name: str, refs: Iterable[str]):
        self.name = name
        self.refs = list(refs)
        super().__init__(
            f"Model name {name!r} is produced by several refs: {', '.join(self.refs)}"
        )


class UnsupportedSpecVersion(CodegenError):
    def __init__(self, version: Any):
        self.version = version
        super().__init__(
            f"Only swagger version 2.0 is currently supported, got {version!r}"
        )


class OutputError(CodegenError):
    """Ошибка записи сгенерированных файлов"""


def _dump(raw: Any) -> str:
    try:
        return json.dumps(raw, ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError):
        return repr(raw)
