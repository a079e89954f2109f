"""Utility modules"""

from .naming import (
    create_label,
    capitalize,
    pascal_case,
    camel_case,
    sanitize_identifier,
    route_segment,
    plural_route_segment,
)
from .logging import setup_logging

__all__ = [
    "create_label",
    "capitalize",
    "pascal_case",
    "camel_case",
    "sanitize_identifier",
    "route_segment",
    "plural_route_segment",
    "setup_logging",
]
