"""Утилиты для генератора"""

from .naming import (
    DEFINITIONS_PREFIX,
    normalize_model_name,
    is_identifier,
    property_key,
    member_access,
    tag_folder,
    local_name,
    binding,
)
from .layout import (
    StubLayout,
    plan_stub_layout,
    resolve_axios_instance_path,
)

__all__ = [
    "DEFINITIONS_PREFIX",
    "normalize_model_name",
    "is_identifier",
    "property_key",
    "member_access",
    "tag_folder",
    "local_name",
    "binding",
    "StubLayout",
    "plan_stub_layout",
    "resolve_axios_instance_path",
]
