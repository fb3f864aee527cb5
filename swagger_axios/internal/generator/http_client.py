from ...config import SwaggerAxiosConfig
from ..types.schema import SwaggerSpec
from ..utils.naming import member_access
from .templates import templates

BASE_URL_ENV = "API_BASE_URL"
DEFAULT_SCHEME = "http"
DEFAULT_HOST = "localhost"
REQUEST_TIMEOUT = 10000


def default_base_url(spec: SwaggerSpec) -> str:
    """{scheme}://{host}{basePath} по первой схеме спецификации"""
    scheme = (spec.schemes or [None])[0] or DEFAULT_SCHEME
    base_url = f"{scheme}://{spec.host or DEFAULT_HOST}{spec.base_path or ''}"
    return base_url.rstrip("/")


def generate_response_interceptor(config: SwaggerAxiosConfig) -> str:
    """Распаковка ответа {data, error}: только если заданы оба поля"""
    if not (config.result_data_field and config.result_error_field):
        return ""

    return templates.response_interceptor.format(
        data_field=member_access(config.result_data_field),
        error_field=member_access(config.result_error_field),
    )


def generate_axios_instance(spec: SwaggerSpec, config: SwaggerAxiosConfig) -> str:
    """Модуль с общим экземпляром axios: base URL, токен и распаковка ответа"""
    return templates.axios_instance.format(
        base_url_env=BASE_URL_ENV,
        base_url=default_base_url(spec),
        timeout=REQUEST_TIMEOUT,
        response_interceptor=generate_response_interceptor(config),
    )
