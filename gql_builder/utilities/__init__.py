from .load_schema import load_schema
from .type_resolution import (
    get_field_type,
    get_fragment_target,
    get_root_type,
    has_field,
    is_fragment_target,
)

__all__ = [
    "load_schema",
    "get_field_type",
    "get_fragment_target",
    "get_root_type",
    "has_field",
    "is_fragment_target",
]
