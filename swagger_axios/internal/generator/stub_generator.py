import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from ...exceptions import MissingResponseSchema
from ..types.schema import ObjectSchema, Operation, Schema
from ..types.schema_resolver import collect_references
from ..utils.naming import binding, local_name, normalize_model_name, property_key
from .model_generator import generate_schema
from .templates import templates

logger = logging.getLogger(__name__)

_PATH_PLACEHOLDER = re.compile(r"\{([^}]+)\}")


@dataclass
class StubContext:
    """Все, что нужно для генерации одного stub"""

    path: str
    method: str
    op: Operation
    axios_instance_path: str
    model_path: str
    data_field: Optional[str] = None
    empty_body_object: bool = False


def get_response_schema(schema: Schema, data_field: Optional[str] = None) -> str:
    """Тип ответа, с распаковкой поля данных из обертки если оно есть"""
    if (
        data_field
        and isinstance(schema, ObjectSchema)
        and data_field in schema.properties
    ):
        return generate_schema(schema.properties[data_field].node, 0)
    return generate_schema(schema, 0)


def get_imports(op: Operation, response_schema: Schema) -> List[str]:
    """Прямые зависимости stub: схемы body параметра и ответа"""
    imports: List[str] = []
    body_parameter = op.body_parameter
    if body_parameter is not None:
        collect_references(body_parameter.node, imports)
    collect_references(response_schema, imports)
    return imports


def interpolate_path(path: str) -> str:
    """/pets/{pet-id} -> /pets/${pet_id} для шаблонной строки"""
    return _PATH_PLACEHOLDER.sub(lambda m: "${" + local_name(m.group(1)) + "}", path)


def _render_parameters(op: Operation) -> str:
    stub_parameters = []

    args = op.argument_parameters
    if args:
        bindings = ", ".join(binding(arg.name) for arg in args)
        parameter = "{ " + bindings + " }: {\n    "
        parameter += ",\n    ".join(
            f"{property_key(arg.name)}{'' if arg.required else '?'}: "
            f"{generate_schema(arg.node, 2)}"
            for arg in args
        )
        parameter += "\n  }"
        stub_parameters.append(parameter)

    body_parameter = op.body_parameter
    if body_parameter is not None:
        optional = "" if body_parameter.required else "?"
        stub_parameters.append(
            f"{local_name(body_parameter.name)}{optional}: "
            f"{generate_schema(body_parameter.node, 2)}"
        )

    if not stub_parameters:
        return ""
    return "\n  " + ",\n  ".join(stub_parameters) + "\n"


def _render_doc_comment(op: Operation) -> str:
    lines = []
    if op.summary:
        lines.extend(op.summary.strip().splitlines())
    if op.description:
        if lines:
            lines.append("")
        lines.extend(op.description.strip().splitlines())
    if op.deprecated:
        lines.append("@deprecated")

    if not lines:
        return ""

    body = "\n".join(
        (" * " + line.replace("*/", "*\\/")).rstrip() for line in lines
    )
    return f"/**\n{body}\n */\n"


def generate_stub(ctx: StubContext) -> str:
    """Исходный код модуля с функцией-оберткой одной операции"""
    op = ctx.op
    response = op.success_response()
    if response is None or response.node is None:
        raise MissingResponseSchema(ctx.path, ctx.method)

    imports = get_imports(op, response.node)
    model_import = ""
    if imports:
        model_import = templates.model_import.format(
            names=",".join(" " + normalize_model_name(ref) for ref in imports),
            model_path=ctx.model_path,
        )

    query_parameters = op.query_parameters
    if query_parameters:
        params = "{ " + ", ".join(binding(p.name) for p in query_parameters) + " }"
    else:
        params = "{}"

    body_parameter = op.body_parameter
    if body_parameter is not None:
        data = local_name(body_parameter.name)
    else:
        data = "{}" if ctx.empty_body_object else "undefined"

    logger.debug("Rendering stub %s for %s %s", op.operation_id, ctx.method, ctx.path)

    return templates.stub.format(
        axios_instance_path=ctx.axios_instance_path,
        model_import=model_import,
        doc_comment=_render_doc_comment(op),
        parameters=_render_parameters(op),
        response_type=get_response_schema(response.node, ctx.data_field),
        url=interpolate_path(ctx.path),
        method=ctx.method,
        params=params,
        data=data,
    )
