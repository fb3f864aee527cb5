"""
Модель Swagger 2.0 спецификации: узлы схем, параметры и операции
"""

from typing import Annotated, Any, Dict, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field


class SchemaNode(BaseModel):
    """Общий предок всех узлов схемы"""

    def children(self) -> List["Schema"]:
        return []


class ReferenceSchema(SchemaNode):
    kind: Literal["reference"] = "reference"
    target: str


class PrimitiveSchema(SchemaNode):
    kind: Literal["primitive"] = "primitive"
    type: Optional[str] = None

    # Исходная схема для диагностики неподдерживаемых типов
    raw: Dict[str, Any] = {}


class ArraySchema(SchemaNode):
    kind: Literal["array"] = "array"
    items: Optional["Schema"] = None
    tuple_items: Optional[List["Schema"]] = None

    raw: Dict[str, Any] = {}

    @property
    def is_tuple(self) -> bool:
        return self.tuple_items is not None

    def children(self) -> List["Schema"]:
        if self.tuple_items is not None:
            return list(self.tuple_items)
        return [self.items] if self.items is not None else []


class ComposedSchema(SchemaNode):
    """allOf: логическое И всех частей"""

    kind: Literal["composed"] = "composed"
    parts: List["Schema"] = []

    def children(self) -> List["Schema"]:
        return list(self.parts)


class Property(BaseModel):
    node: "Schema"
    required: bool = False


class ObjectSchema(SchemaNode):
    kind: Literal["object"] = "object"
    properties: Dict[str, Property] = {}

    # additionalProperties: схема значений либо флаг произвольных значений
    additional: Optional["Schema"] = None
    additional_any: bool = False

    def children(self) -> List["Schema"]:
        nodes = [prop.node for prop in self.properties.values()]
        if self.additional is not None:
            nodes.append(self.additional)
        return nodes


Schema = Annotated[
    Union[ReferenceSchema, PrimitiveSchema, ArraySchema, ComposedSchema, ObjectSchema],
    Field(discriminator="kind"),
]

ArraySchema.model_rebuild()
ComposedSchema.model_rebuild()
Property.model_rebuild()
ObjectSchema.model_rebuild()


class PathParameter(BaseModel):
    location: Literal["path"] = "path"
    name: str
    required: bool = True
    node: Schema


class QueryParameter(BaseModel):
    location: Literal["query"] = "query"
    name: str
    required: bool = False
    node: Schema


class BodyParameter(BaseModel):
    location: Literal["body"] = "body"
    name: str
    required: bool = False
    node: Schema


Parameter = Annotated[
    Union[PathParameter, QueryParameter, BodyParameter],
    Field(discriminator="location"),
]


class Response(BaseModel):
    description: Optional[str] = None
    node: Optional[Schema] = None


class Operation(BaseModel):
    path: str
    method: str
    operation_id: Optional[str] = None

    summary: Optional[str] = None
    description: Optional[str] = None
    deprecated: bool = False

    parameters: List[Parameter] = []
    responses: Dict[str, Response] = {}
    tags: List[str] = []

    @property
    def body_parameter(self) -> Optional[BodyParameter]:
        for parameter in self.parameters:
            if isinstance(parameter, BodyParameter):
                return parameter
        return None

    @property
    def argument_parameters(self) -> List[Union[PathParameter, QueryParameter]]:
        """path и query параметры в порядке объявления"""
        return [
            p for p in self.parameters if isinstance(p, (PathParameter, QueryParameter))
        ]

    @property
    def query_parameters(self) -> List[QueryParameter]:
        return [p for p in self.parameters if isinstance(p, QueryParameter)]

    def success_response(self) -> Optional[Response]:
        return self.responses.get("200")

    def schema_nodes(self) -> Iterator["Schema"]:
        """Все схемы параметров и ответов операции"""
        for parameter in self.parameters:
            yield parameter.node
        for response in self.responses.values():
            if response.node is not None:
                yield response.node


class SwaggerSpec(BaseModel):
    swagger: str = "2.0"

    title: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None

    host: Optional[str] = None
    base_path: Optional[str] = None
    schemes: List[str] = []

    # path -> method -> operation
    paths: Dict[str, Dict[str, Operation]] = {}
    definitions: Dict[str, Schema] = {}

    def operations(self) -> Iterator[Tuple[str, str, Operation]]:
        for path, methods in self.paths.items():
            for method, operation in methods.items():
                yield path, method, operation
