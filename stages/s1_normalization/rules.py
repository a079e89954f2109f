"""Cell interpretation rules: widgets, semantic types, options, validation"""

import re
from typing import Callable, List, Optional, Union

from core.enums import UIType, ZodType, ValidationRuleType
from core.models import ValidationRule


# Raw ui_component value -> widget. Anything not listed falls back to a plain input.
UI_COMPONENT_MAP: dict[str, UIType] = {
    "dropdown": UIType.SELECT,
    "select": UIType.SELECT,
    "radio": UIType.RADIO,
    "switch": UIType.SWITCH,
    "toggle": UIType.SWITCH,
    "checkbox": UIType.CHECKBOX,
    "file_upload": UIType.FILE,
    "file": UIType.FILE,
    "tinymce": UIType.TEXTAREA,
    "textarea": UIType.TEXTAREA,
    "editor": UIType.TEXTAREA,
    "color_picker": UIType.COLOR,
    "color": UIType.COLOR,
    "datepicker": UIType.DATEPICKER,
    "date_picker": UIType.DATEPICKER,
    "date": UIType.DATEPICKER,
}

NUMERIC_TYPE_MARKERS = ("int", "decimal", "double")
DATE_TYPE_MARKERS = ("date", "time")

_OPTION_PATTERN = re.compile(r"""=>\s*['"]?([^,'"]+)['"]?""")


def map_ui_type(ui_component: Optional[str]) -> UIType:
    """Map a raw ui_component cell to a widget kind"""
    key = (ui_component or "").strip().lower()
    return UI_COMPONENT_MAP.get(key, UIType.INPUT)


def infer_zod_type(data_type: str, ui_type: UIType) -> ZodType:
    """
    Infer the semantic type of a field.

    Numeric column types win over widget hints; widget hints win over
    date column types for booleans only.
    """
    db_type = (data_type or "").lower()
    if any(marker in db_type for marker in NUMERIC_TYPE_MARKERS):
        return ZodType.NUMBER
    if ui_type in (UIType.SWITCH, UIType.CHECKBOX):
        return ZodType.BOOLEAN
    if any(marker in db_type for marker in DATE_TYPE_MARKERS) or ui_type == UIType.DATEPICKER:
        return ZodType.DATE
    if ui_type == UIType.FILE:
        return ZodType.ANY
    return ZodType.STRING


def parse_options_from_comments(comment: Optional[str]) -> Optional[List[str]]:
    """
    Extract select/radio options from a comments cell.

    ``"Y => Active, N => Inactive"`` yields ``["Active", "Inactive"]``.
    """
    if not comment or "=>" not in comment:
        return None
    options = [match.group(1).strip() for match in _OPTION_PATTERN.finditer(comment)]
    # options are never empty strings
    options = [option for option in options if option]
    return options or None


def is_yes(value: Optional[str]) -> bool:
    return (value or "").strip().upper() == "Y"


def is_required(is_null: Optional[str]) -> bool:
    """A field is required when its is_null cell says N"""
    return (is_null or "").strip().upper() == "N"


# ─────────────────────────────────────────────────────────────
# Validation rules
# ─────────────────────────────────────────────────────────────

RuleValue = Optional[Union[int, str]]


class _RulePattern:
    """One entry of the ordered validation pattern table"""

    def __init__(
        self,
        rule_type: ValidationRuleType,
        matcher: Callable[[str], Optional[RuleValue]],
        message: str,
    ):
        self.rule_type = rule_type
        self.matcher = matcher
        self.message = message


_MATCHED = object()


def _regex(pattern: str, numeric: bool = False, capture: bool = True):
    compiled = re.compile(pattern, re.IGNORECASE)

    def matcher(text: str):
        match = compiled.search(text)
        if match is None:
            return None
        if not capture:
            return _MATCHED
        value = match.group(1)
        return int(value) if numeric else value

    return matcher


def _substring(token: str):
    def matcher(text: str):
        return _MATCHED if token in text.lower() else None

    return matcher


# Order matters: rules are emitted in table order, not in input order.
# "min.*?(\d+)" deliberately also fires inside "minLength:5" (same for max).
VALIDATION_PATTERNS: List[_RulePattern] = [
    _RulePattern(ValidationRuleType.REQUIRED, _regex(r"\brequired\b", capture=False),
                 "{label} is required"),
    _RulePattern(ValidationRuleType.MIN_LENGTH, _regex(r"min(?:imum)?[\s_-]*length\D*?(\d+)", numeric=True),
                 "{label} must be at least {value} characters"),
    _RulePattern(ValidationRuleType.MAX_LENGTH, _regex(r"max(?:imum)?[\s_-]*length\D*?(\d+)", numeric=True),
                 "{label} must be at most {value} characters"),
    _RulePattern(ValidationRuleType.MIN, _regex(r"min.*?(\d+)", numeric=True),
                 "{label} must be at least {value}"),
    _RulePattern(ValidationRuleType.MAX, _regex(r"max.*?(\d+)", numeric=True),
                 "{label} must be at most {value}"),
    _RulePattern(ValidationRuleType.EMAIL, _regex(r"email", capture=False),
                 "{label} must be a valid email address"),
    _RulePattern(ValidationRuleType.URL, _regex(r"\burl\b", capture=False),
                 "{label} must be a valid URL"),
    _RulePattern(ValidationRuleType.REGEX, _regex(r"regex:\s*/(.+)/"),
                 "{label} has an invalid format"),
    _RulePattern(ValidationRuleType.UNIQUE, _substring("unique"),
                 "{label} must be unique"),
    _RulePattern(ValidationRuleType.FORMAT, _substring("format"),
                 "{label} has an invalid format"),
]


def parse_validation_rules(text: Optional[str], label: str) -> List[ValidationRule]:
    """
    Scan a validation_rule cell against the ordered pattern table.

    Every matching entry produces one rule; patterns are independent, so a
    single string can produce several rules. Unmatched text produces none.
    """
    if not text or not text.strip():
        return []

    rules = []
    for pattern in VALIDATION_PATTERNS:
        result = pattern.matcher(text)
        if result is None:
            continue
        value = None if result is _MATCHED else result
        rules.append(ValidationRule(
            type=pattern.rule_type,
            value=value,
            message=pattern.message.format(label=label, value=value),
        ))
    return rules
