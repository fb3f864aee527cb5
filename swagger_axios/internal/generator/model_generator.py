from typing import Dict, List

from ...exceptions import (
    AmbiguousModelName,
    CyclicSchema,
    MissingArrayItems,
    UnsupportedSchemaType,
)
from ..types.schema import (
    ArraySchema,
    ComposedSchema,
    ObjectSchema,
    PrimitiveSchema,
    ReferenceSchema,
    Schema,
)
from ..utils.naming import normalize_model_name, property_key
from .templates import templates

NUMBER_TYPES = ("integer", "long", "float", "double", "number")
STRING_TYPES = ("string", "byte", "binary", "date", "dateTime", "password")
BOOLEAN_TYPE = "boolean"


def generate_schema(schema: Schema, indent: int = 0) -> str:
    """
    Рендер узла схемы в выражение типа TypeScript.

    ``indent`` - отступ, на котором стоит выражение: свойства объекта
    получают отступ ``indent + 2``, закрывающая скобка ``indent``.
    """
    if isinstance(schema, ReferenceSchema):
        return normalize_model_name(schema.target)

    if isinstance(schema, ComposedSchema) and schema.parts:
        rendered = " & ".join(generate_schema(part, indent + 2) for part in schema.parts)
        return rendered if len(schema.parts) == 1 else f"({rendered})"

    if isinstance(schema, PrimitiveSchema):
        if schema.type in NUMBER_TYPES:
            return "number"
        if schema.type in STRING_TYPES:
            return "string"
        if schema.type == BOOLEAN_TYPE:
            return "boolean"
        raise UnsupportedSchemaType(schema.type, schema.raw)

    if isinstance(schema, ArraySchema):
        return _generate_array(schema, indent)

    if isinstance(schema, ObjectSchema):
        return _generate_object(schema, indent)

    raise UnsupportedSchemaType(None, schema.model_dump())


def _generate_array(schema: ArraySchema, indent: int) -> str:
    if schema.is_tuple:
        if not schema.tuple_items:
            raise MissingArrayItems(schema.raw)
        items = " | ".join(generate_schema(item, indent) for item in schema.tuple_items)
        return f"({items})[]"

    if schema.items is None:
        raise MissingArrayItems(schema.raw)

    return f"{generate_schema(schema.items, indent)}[]"


def _generate_object(schema: ObjectSchema, indent: int) -> str:
    lines = ["{"]
    for name, prop in schema.properties.items():
        lines.append(
            f"  {property_key(name)}{'' if prop.required else '?'}: "
            f"{generate_schema(prop.node, indent + 2)};"
        )

    # Индексная сигнатура должна покрывать типы всех объявленных свойств
    if schema.additional is not None and not schema.properties:
        lines.append(f"  [key: string]: {generate_schema(schema.additional, indent + 2)};")
    elif schema.additional is not None or schema.additional_any:
        lines.append("  [key: string]: any;")

    lines.append("}")
    return ("\n" + " " * indent).join(lines)


def generate_model(name: str, schema: Schema) -> str:
    """Объявление одной модели: interface для объектов, type для остального"""
    body = generate_schema(schema, 0)
    if isinstance(schema, ObjectSchema):
        return templates.interface.format(name=name, body=body)
    return templates.type_alias.format(name=name, body=body)


def generate_all(schemas: Dict[str, Schema]) -> str:
    """Объявления всех моделей одним блоком текста"""
    names = _model_names(schemas)
    _check_cycles(schemas)

    blocks = [generate_model(names[ref], schema) for ref, schema in schemas.items()]
    return "\n\n".join(blocks)


def _model_names(schemas: Dict[str, Schema]) -> Dict[str, str]:
    names: Dict[str, str] = {}
    owners: Dict[str, str] = {}

    for ref in schemas:
        name = normalize_model_name(ref)
        if name in owners:
            raise AmbiguousModelName(name, [owners[name], ref])
        owners[name] = ref
        names[ref] = name

    return names


def _immediate_references(schema: Schema) -> List[str]:
    """Ссылки, которые раскрываются в объявлении типа без промежуточного объекта"""
    if isinstance(schema, ReferenceSchema):
        return [schema.target]

    refs: List[str] = []
    if isinstance(schema, ComposedSchema):
        for part in schema.parts:
            refs.extend(_immediate_references(part))
    return refs


def _check_cycles(schemas: Dict[str, Schema]) -> None:
    """
    Поиск циклов из псевдонимов и allOf (A = B, B = A).

    Рекурсия через свойства объектов и элементы массивов допустима,
    такие ссылки не раскрываются.
    """
    done = set()

    def visit(ref: str, rendering: List[str]) -> None:
        if ref in done:
            return
        if ref in rendering:
            raise CyclicSchema(rendering[rendering.index(ref) :] + [ref])

        schema = schemas.get(ref)
        if schema is None:
            return

        rendering.append(ref)
        for target in _immediate_references(schema):
            visit(target, rendering)
        rendering.pop()
        done.add(ref)

    for ref in schemas:
        visit(ref, [])
