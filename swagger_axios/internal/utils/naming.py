"""Утилиты для работы с именами моделей, свойств и тегов"""

import json
import re

from ...exceptions import InvalidReference

DEFINITIONS_PREFIX = "#/definitions/"
CONTROLLER_SUFFIX = "-controller"

_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9_]")
_VALID_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Не могут быть именами переменных, но допустимы как ключи объекта
RESERVED_WORDS = frozenset(
    (
        "break", "case", "catch", "class", "const", "continue", "debugger",
        "default", "delete", "do", "else", "enum", "export", "extends", "false",
        "finally", "for", "function", "if", "import", "in", "instanceof", "new",
        "null", "return", "super", "switch", "this", "throw", "true", "try",
        "typeof", "var", "void", "while", "with", "yield", "let", "static",
        "implements", "interface", "package", "private", "protected", "public",
        "await", "arguments", "eval",
    )
)


def normalize_model_name(ref: str) -> str:
    """
    Превращает ссылку на схему в допустимое имя модели.

    Отрезает префикс ``#/definitions/``, заменяет все символы вне
    ``[A-Za-z0-9_]`` на ``_`` и убирает подчеркивания в конце. Если имя
    начинается с цифры, к нему добавляется ``_`` (``2fa`` -> ``_2fa``),
    иначе оно не было бы идентификатором TypeScript. Повторная нормализация
    такого имени его не меняет.

    Args:
        ref: Ссылка на схему (например, "#/definitions/Page«Pet»")

    Returns:
        Имя модели (например, "Page_Pet")

    Raises:
        InvalidReference: ссылка не указывает в definitions или имя пустое

    Examples:
        >>> normalize_model_name("#/definitions/Page«Pet»")
        'Page_Pet'
        >>> normalize_model_name("#/definitions/user-dto")
        'user_dto'
        >>> normalize_model_name("#/definitions/2fa")
        '_2fa'
    """
    if not isinstance(ref, str) or not ref.startswith(DEFINITIONS_PREFIX):
        raise InvalidReference(ref)

    name = _INVALID_NAME_CHARS.sub("_", ref[len(DEFINITIONS_PREFIX) :]).rstrip("_")
    if not name:
        raise InvalidReference(ref)

    # Идентификатор не может начинаться с цифры
    if name[0].isdigit():
        name = f"_{name}"

    return name


def is_identifier(name: str) -> bool:
    return bool(_VALID_IDENTIFIER.match(name))


def property_key(name: str) -> str:
    """Имя свойства в объектном типе, при необходимости в кавычках"""
    if is_identifier(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def local_name(name: str) -> str:
    """
    Имя локальной переменной для параметра операции.

    Допустимые имена остаются как есть, в остальных недопустимые символы
    заменяются на ``_``: ``pet-id`` -> ``pet_id``, ``delete`` -> ``_delete``.
    """
    if is_identifier(name) and name not in RESERVED_WORDS:
        return name

    local = _INVALID_NAME_CHARS.sub("_", name)
    if not local or local[0].isdigit() or local in RESERVED_WORDS:
        local = f"_{local}"
    return local


def binding(name: str) -> str:
    """Элемент деструктуризации и сокращенной записи объекта"""
    local = local_name(name)
    if local == name:
        return name
    return f"{property_key(name)}: {local}"


def member_access(name: str) -> str:
    """Доступ к полю объекта: ``.name`` или ``["name"]``"""
    if is_identifier(name):
        return f".{name}"
    return f"[{json.dumps(name, ensure_ascii=False)}]"


def tag_folder(tag: str) -> str:
    """Имя папки для тега (Springfox добавляет суффикс -controller)"""
    if tag.endswith(CONTROLLER_SUFFIX):
        return tag[: -len(CONTROLLER_SUFFIX)]
    return tag
