import logging
from typing import Dict, Iterable, List, Optional

from ...exceptions import UnresolvedReference
from ..utils.naming import DEFINITIONS_PREFIX, normalize_model_name
from .schema import ReferenceSchema, Schema

logger = logging.getLogger(__name__)


def collect_references(schema: Schema, into: Optional[List[str]] = None) -> List[str]:
    """
    Сбор всех ссылок на схемы внутри узла (без разыменования).

    Ссылки добавляются в порядке обхода, без повторов.
    """
    if into is None:
        into = []

    if isinstance(schema, ReferenceSchema):
        if schema.target not in into:
            into.append(schema.target)
        return into

    for child in schema.children():
        collect_references(child, into)

    return into


class SchemaRegistry:
    """Реестр схем из раздела definitions"""

    def __init__(self, definitions: Dict[str, Schema]):
        self._schema_registry: Dict[str, Schema] = {
            DEFINITIONS_PREFIX + name: schema for name, schema in definitions.items()
        }

    def __contains__(self, ref: str) -> bool:
        return ref in self._schema_registry

    def __len__(self) -> int:
        return len(self._schema_registry)

    def resolve(self, ref: str) -> Schema:
        """Получение схемы по ссылке"""
        # Некорректная ссылка - ошибка раньше, чем отсутствующая
        normalize_model_name(ref)

        if ref not in self:
            raise UnresolvedReference(ref)

        return self._schema_registry[ref]

    def require(self, schema: Schema, required: Dict[str, Schema]) -> Dict[str, Schema]:
        """
        Транзитивное замыкание ссылок, достижимых из схемы.

        Найденные схемы добавляются в ``required`` в порядке обхода в глубину.
        Уже добавленные ссылки повторно не обходятся, поэтому циклы между
        схемами безопасны.
        """
        pending = [iter(collect_references(schema))]

        while pending:
            ref = next(pending[-1], None)
            if ref is None:
                pending.pop()
                continue

            if ref in required:
                continue

            body = self.resolve(ref)
            required[ref] = body
            logger.debug("Required schema %s", ref)
            pending.append(iter(collect_references(body)))

        return required

    def require_all(self, schemas: Iterable[Schema]) -> Dict[str, Schema]:
        required: Dict[str, Schema] = {}
        for schema in schemas:
            self.require(schema, required)
        return required
