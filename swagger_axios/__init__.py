from .config import SwaggerAxiosConfig
from .generator import ApiClientGenerator, generate_client
from .internal.generator.client_generator import ClientGenerator
from .internal.generator.http_client import generate_axios_instance
from .internal.generator.model_generator import (
    generate_all,
    generate_model,
    generate_schema,
)
from .internal.generator.stub_generator import StubContext, generate_stub
from .internal.parser.swagger import SwaggerParser, load_document
from .internal.types.schema_resolver import SchemaRegistry, collect_references
from .internal.utils.naming import normalize_model_name

__all__ = [
    "SwaggerAxiosConfig",
    "ApiClientGenerator",
    "generate_client",
    "ClientGenerator",
    "generate_axios_instance",
    "generate_all",
    "generate_model",
    "generate_schema",
    "StubContext",
    "generate_stub",
    "SwaggerParser",
    "load_document",
    "SchemaRegistry",
    "collect_references",
    "normalize_model_name",
]
