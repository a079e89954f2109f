"""Core enumerations for PanelForge"""

from enum import Enum


class FileType(str, Enum):
    """Supported workbook types"""
    EXCEL_XLSX = "xlsx"
    EXCEL_XLSM = "xlsm"


class ZodType(str, Enum):
    """Semantic type of a field, used for schema generation"""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ANY = "any"


class UIType(str, Enum):
    """Input control rendered for a field"""
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    FILE = "file"
    COLOR = "color"
    DATEPICKER = "datepicker"
    SWITCH = "switch"


class ValidationRuleType(str, Enum):
    """Validation rule kinds recognized in the validation_rule column"""
    REQUIRED = "required"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    MIN = "min"
    MAX = "max"
    EMAIL = "email"
    URL = "url"
    REGEX = "regex"
    UNIQUE = "unique"
    FORMAT = "format"


class EmptyWidgetPolicy(str, Enum):
    """What to do with a row whose ui_component cell is empty"""
    DEFAULT = "default"  # fall back to a plain input
    OMIT = "omit"  # drop the field (primary keys, auto columns)
