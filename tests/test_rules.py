import pytest

from core.enums import UIType, ValidationRuleType as V, ZodType
from stages.s1_normalization.rules import (
    infer_zod_type,
    is_required,
    is_yes,
    map_ui_type,
    parse_options_from_comments,
    parse_validation_rules,
)


# (validation_rule text, expected [(type, value)] in table order)
VALIDATION_CASES = [
    ("required|min:5|email", [(V.REQUIRED, None), (V.MIN, 5), (V.EMAIL, None)]),
    ("email|required", [(V.REQUIRED, None), (V.EMAIL, None)]),
    ("minLength:5", [(V.MIN_LENGTH, 5), (V.MIN, 5)]),
    ("maxLength:20", [(V.MAX_LENGTH, 20), (V.MAX, 20)]),
    ("min_length 3, max_length 10", [(V.MIN_LENGTH, 3), (V.MAX_LENGTH, 10), (V.MIN, 3), (V.MAX, 10)]),
    ("minimum 3", [(V.MIN, 3)]),
    ("Required", [(V.REQUIRED, None)]),
    ("url", [(V.URL, None)]),
    ("website url", [(V.URL, None)]),
    ("regex:/^[A-Z]+$/", [(V.REGEX, "^[A-Z]+$")]),
    ("unique", [(V.UNIQUE, None)]),
    ("email format", [(V.EMAIL, None), (V.FORMAT, None)]),
    ("nothing to see", []),
    ("", []),
    (None, []),
]


@pytest.mark.parametrize("text, expected", VALIDATION_CASES)
def test_validation_pattern_table(text, expected):
    rules = parse_validation_rules(text, "Name")
    assert [(rule.type, rule.value) for rule in rules] == expected


def test_validation_messages_use_label():
    rules = parse_validation_rules("required|minLength:5", "First Name")
    messages = {rule.type: rule.message for rule in rules}
    assert messages[V.REQUIRED] == "First Name is required"
    assert messages[V.MIN_LENGTH] == "First Name must be at least 5 characters"
    assert messages[V.MIN] == "First Name must be at least 5"


@pytest.mark.parametrize(
    "comment, options",
    [
        ("Y => Active, N => Inactive", ["Active", "Inactive"]),
        ("1 => 'Admin', 2 => 'User'", ["Admin", "User"]),
        ('a=>"One",b=>"Two"', ["One", "Two"]),
        ("A => , B => x", ["x"]),
        ("Y => ", None),
        ("free text description", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_options_from_comments(comment, options):
    assert parse_options_from_comments(comment) == options


@pytest.mark.parametrize(
    "raw, ui_type",
    [
        ("dropdown", UIType.SELECT),
        ("radio", UIType.RADIO),
        ("switch", UIType.SWITCH),
        ("checkbox", UIType.CHECKBOX),
        ("file_upload", UIType.FILE),
        ("tinymce", UIType.TEXTAREA),
        ("textarea", UIType.TEXTAREA),
        ("color_picker", UIType.COLOR),
        ("datepicker", UIType.DATEPICKER),
        ("Date_Picker", UIType.DATEPICKER),
        (" dropdown ", UIType.SELECT),
        ("text", UIType.INPUT),
        ("something_new", UIType.INPUT),
        ("", UIType.INPUT),
        (None, UIType.INPUT),
    ],
)
def test_map_ui_type(raw, ui_type):
    assert map_ui_type(raw) == ui_type


@pytest.mark.parametrize(
    "data_type, ui_type, zod_type",
    [
        ("int(11)", UIType.INPUT, ZodType.NUMBER),
        ("decimal(10,2)", UIType.INPUT, ZodType.NUMBER),
        ("double", UIType.INPUT, ZodType.NUMBER),
        # numeric column type beats widget hint
        ("tinyint", UIType.CHECKBOX, ZodType.NUMBER),
        ("varchar", UIType.SWITCH, ZodType.BOOLEAN),
        ("varchar", UIType.CHECKBOX, ZodType.BOOLEAN),
        ("date", UIType.SWITCH, ZodType.BOOLEAN),
        ("datetime", UIType.INPUT, ZodType.DATE),
        ("timestamp", UIType.INPUT, ZodType.DATE),
        ("varchar", UIType.DATEPICKER, ZodType.DATE),
        ("varchar", UIType.FILE, ZodType.ANY),
        ("varchar", UIType.INPUT, ZodType.STRING),
        ("", UIType.SELECT, ZodType.STRING),
    ],
)
def test_zod_type_precedence(data_type, ui_type, zod_type):
    assert infer_zod_type(data_type, ui_type) == zod_type


@pytest.mark.parametrize(
    "value, required",
    [("N", True), (" n ", True), ("Y", False), ("", False), (None, False), ("NO", False)],
)
def test_is_required(value, required):
    assert is_required(value) is required


def test_is_yes():
    assert is_yes("Y")
    assert is_yes(" y")
    assert not is_yes("yes")
    assert not is_yes(None)
