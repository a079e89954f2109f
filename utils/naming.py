"""Identifier and label helpers shared by the normalizer and renderers"""

import re


_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_NON_IDENTIFIER = re.compile(r"[^a-zA-Z0-9_]")


def create_label(field_name: str) -> str:
    """
    Build a human-readable label from a snake_case or camelCase name.

    A trailing ``_id`` is dropped from the label only, so ``role_id``
    becomes ``Role`` while the field keeps its original name.

    Args:
        field_name: Raw field name from the ``column`` cell

    Returns:
        Title-cased label, or an empty string for empty input
    """
    if not field_name:
        return ""

    name = field_name.strip()
    if name.lower().endswith("_id") and len(name) > 3:
        name = name[:-3]

    name = name.replace("_", " ")
    name = _CAMEL_BOUNDARY.sub(r"\1 \2", name)
    words = [word for word in name.split(" ") if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)


def capitalize(value: str) -> str:
    """Upper-case the first character only"""
    return value[:1].upper() + value[1:]


def pascal_case(value: str) -> str:
    """Convert a model or field name to PascalCase"""
    parts = re.split(r"[\s_\-]+", _CAMEL_BOUNDARY.sub(r"\1_\2", value.strip()))
    return "".join(capitalize(part) for part in parts if part)


def camel_case(value: str) -> str:
    pascal = pascal_case(value)
    return pascal[:1].lower() + pascal[1:]


def sanitize_identifier(name: str) -> str:
    """Replace characters that are not valid in a JS identifier"""
    sanitized = _NON_IDENTIFIER.sub("_", name)
    if sanitized and sanitized[0].isdigit():
        sanitized = f"_{sanitized}"
    return sanitized


def route_segment(model_name: str) -> str:
    """Singular route segment, e.g. ``/user/create``"""
    return re.sub(r"[^a-z0-9]+", "-", model_name.strip().lower()).strip("-")


def plural_route_segment(model_name: str) -> str:
    """Listing route segment, e.g. ``/users``"""
    return f"{route_segment(model_name)}s"
