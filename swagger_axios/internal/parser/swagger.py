import json
import logging
import os
from typing import Any, Dict, List, Optional

import httpx
import jsonref

from ...exceptions import (
    CyclicSchema,
    InvalidReference,
    UnresolvedReference,
    UnsupportedSchemaType,
    UnsupportedSpecVersion,
)
from ..types.schema import (
    ArraySchema,
    BodyParameter,
    ComposedSchema,
    ObjectSchema,
    Operation,
    Parameter,
    PathParameter,
    PrimitiveSchema,
    Property,
    QueryParameter,
    ReferenceSchema,
    Response,
    Schema,
    SwaggerSpec,
)

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = "2.0"
HTTP_METHODS = ("get", "post", "put", "delete", "options", "head", "patch")

# Разыменовываются только общие параметры и ответы, схемы остаются ссылками
SHARED_PREFIXES = ("#/parameters/", "#/responses/")

PARAMETER_CLASSES = {
    "path": PathParameter,
    "query": QueryParameter,
    "body": BodyParameter,
}


def load_document(url: str, timeout: float = 30.0) -> Dict[str, Any]:
    """Загрузка Swagger документа по URL или из локального файла"""
    if url.startswith(("http://", "https://")):
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.json()

    if os.path.exists(url):
        with open(url, "r", encoding="utf-8") as f:
            return json.load(f)

    raise FileNotFoundError(f"Не удалось найти спецификацию: {url}")


def _reference_of(node: Any) -> Optional[str]:
    """Ссылка узла: у прокси jsonref оригинал лежит в __reference__"""
    reference = getattr(node, "__reference__", None)
    if reference is not None:
        return reference["$ref"]
    if isinstance(node, dict) and isinstance(node.get("$ref"), str):
        return node["$ref"]
    return None


def _plain(node: Any) -> Any:
    """Копия узла без прокси jsonref (ссылки остаются ссылками)"""
    reference = getattr(node, "__reference__", None)
    if reference is not None:
        return dict(reference)
    if isinstance(node, dict):
        return {key: _plain(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_plain(value) for value in node]
    return node


class SwaggerParser:
    """Парсер Swagger 2.0 спецификации в типизированную модель"""

    def __init__(self, swagger_dict: Dict[str, Any]):
        self.swagger_dict = swagger_dict
        self._resolved: Dict[str, Any] = {}

    def parse(self) -> SwaggerSpec:
        version = self.swagger_dict.get("swagger")
        if version != SUPPORTED_VERSION:
            raise UnsupportedSpecVersion(version)

        # Ленивые прокси: ссылка загружается только при обращении к ней
        self._resolved = jsonref.replace_refs(self.swagger_dict)

        info = self._resolved.get("info") or {}
        spec = SwaggerSpec(
            swagger=version,
            title=info.get("title"),
            description=info.get("description"),
            version=info.get("version"),
            host=self._resolved.get("host"),
            base_path=self._resolved.get("basePath"),
            schemes=list(self._resolved.get("schemes") or []),
            definitions=self._parse_definitions(),
            paths=self._parse_paths(),
        )

        logger.info(
            "Parsed %d paths and %d definitions",
            len(spec.paths),
            len(spec.definitions),
        )
        return spec

    def _parse_definitions(self) -> Dict[str, Schema]:
        definitions = self._resolved.get("definitions") or {}
        return {name: self.parse_schema(raw) for name, raw in definitions.items()}

    def _parse_paths(self) -> Dict[str, Dict[str, Operation]]:
        paths = {}
        for path, path_item in (self._resolved.get("paths") or {}).items():
            path_item = self._deref(path_item)
            shared_parameters = path_item.get("parameters") or []

            operations = {}
            for method in HTTP_METHODS:
                if not path_item.get(method):
                    continue
                operations[method] = self._parse_operation(
                    path, method, path_item[method], shared_parameters
                )

            paths[path] = operations

        return paths

    def _parse_operation(
        self,
        path: str,
        method: str,
        raw: Dict[str, Any],
        shared_parameters: List[Any],
    ) -> Operation:
        return Operation(
            path=path,
            method=method,
            operation_id=raw.get("operationId"),
            summary=raw.get("summary"),
            description=raw.get("description"),
            deprecated=bool(raw.get("deprecated", False)),
            parameters=self._parse_parameters(
                path, method, shared_parameters, raw.get("parameters") or []
            ),
            responses=self._parse_responses(raw.get("responses") or {}),
            tags=list(raw.get("tags") or []),
        )

    def _parse_parameters(
        self, path: str, method: str, shared: List[Any], own: List[Any]
    ) -> List[Parameter]:
        """Параметры пути + параметры операции (последние имеют приоритет)"""
        merged: Dict[tuple, Dict[str, Any]] = {}
        for raw in list(shared) + list(own):
            raw = self._deref(raw)
            merged[(raw.get("name"), raw.get("in"))] = raw

        parameters = []
        has_body = False
        for raw in merged.values():
            parameter = self._parse_parameter(path, method, raw)
            if parameter is None:
                continue

            if isinstance(parameter, BodyParameter):
                if has_body:
                    logger.warning(
                        "Extra body parameter %r of %s %s ignored",
                        parameter.name,
                        method.upper(),
                        path,
                    )
                    continue
                has_body = True

            parameters.append(parameter)

        return parameters

    def _parse_parameter(
        self, path: str, method: str, raw: Dict[str, Any]
    ) -> Optional[Parameter]:
        location = raw.get("in")
        parameter_class = PARAMETER_CLASSES.get(location)
        if parameter_class is None:
            logger.warning(
                "Skipping %s parameter %r of %s %s",
                location,
                raw.get("name"),
                method.upper(),
                path,
            )
            return None

        if parameter_class is BodyParameter:
            if raw.get("schema") is None:
                raise UnsupportedSchemaType(None, _plain(raw))
            node = self.parse_schema(raw["schema"])
        else:
            # У path/query параметров тип описан прямо в параметре
            node = self.parse_schema(raw)

        kwargs = {"name": raw.get("name"), "node": node}
        if "required" in raw:
            kwargs["required"] = bool(raw["required"])

        return parameter_class(**kwargs)

    def _parse_responses(self, raw: Dict[Any, Any]) -> Dict[str, Response]:
        responses = {}
        for code, response in raw.items():
            response = self._deref(response)
            schema = response.get("schema")
            responses[str(code)] = Response(
                description=response.get("description"),
                node=self.parse_schema(schema) if schema is not None else None,
            )
        return responses

    def _deref(self, node: Any) -> Any:
        """Разыменование общих параметров/ответов"""
        seen = []
        while True:
            ref = _reference_of(node)
            if ref is None:
                return node

            if not ref.startswith(SHARED_PREFIXES):
                raise InvalidReference(ref)
            if ref in seen:
                raise CyclicSchema(seen + [ref])
            seen.append(ref)

            try:
                node = node.__subject__
            except jsonref.JsonRefError as exc:
                raise UnresolvedReference(ref) from exc

    def parse_schema(self, raw: Any) -> Schema:
        """Узел схемы из JSON Schema фрагмента"""
        ref = _reference_of(raw)
        if ref is not None:
            return ReferenceSchema(target=ref)

        if not isinstance(raw, dict):
            raise UnsupportedSchemaType(None, _plain(raw))

        all_of = raw.get("allOf") or []
        if all_of:
            parts = [self.parse_schema(part) for part in all_of]
            # Свойства рядом с allOf - еще одна часть пересечения
            if raw.get("properties") or raw.get("additionalProperties"):
                parts.append(self._parse_object(raw))
            return ComposedSchema(parts=parts)

        schema_type = raw.get("type")

        if schema_type == "array":
            return self._parse_array(raw)

        if schema_type == "object" or (
            schema_type is None
            and ("properties" in raw or "additionalProperties" in raw)
        ):
            return self._parse_object(raw)

        return PrimitiveSchema(
            type=schema_type if isinstance(schema_type, str) else None,
            raw=_plain(raw),
        )

    def _parse_array(self, raw: Dict[str, Any]) -> ArraySchema:
        items = raw.get("items")
        if items is None:
            return ArraySchema(raw=_plain(raw))

        if _reference_of(items) is None and isinstance(items, list):
            return ArraySchema(
                tuple_items=[self.parse_schema(item) for item in items],
                raw=_plain(raw),
            )

        return ArraySchema(items=self.parse_schema(items), raw=_plain(raw))

    def _parse_object(self, raw: Dict[str, Any]) -> ObjectSchema:
        required = raw.get("required")
        required_names = set(required) if isinstance(required, list) else set()

        properties = {}
        for name, prop in (raw.get("properties") or {}).items():
            node = self.parse_schema(prop)
            # Springfox иногда ставит required: true прямо в свойство
            own_required = (
                _reference_of(prop) is None
                and isinstance(prop, dict)
                and prop.get("required") is True
            )
            properties[name] = Property(
                node=node, required=name in required_names or own_required
            )

        additional = raw.get("additionalProperties")
        additional_node = None
        additional_any = False
        if _reference_of(additional) is not None:
            additional_node = self.parse_schema(additional)
        elif additional is True or additional == {}:
            additional_any = True
        elif isinstance(additional, dict):
            additional_node = self.parse_schema(additional)

        return ObjectSchema(
            properties=properties,
            additional=additional_node,
            additional_any=additional_any,
        )
