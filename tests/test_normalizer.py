import pytest

from core.enums import UIType, ValidationRuleType, ZodType
from core.models import RawRow, RawSheet, WorkbookMetadata, WorkbookResult
from stages.s1_normalization import ModelNormalizer


def make_sheet(name: str, rows: list[RawRow], **flags) -> RawSheet:
    return RawSheet(sheet_name=name, display_name=name, rows=rows, **flags)


def make_workbook(*sheets: RawSheet) -> WorkbookResult:
    metadata = WorkbookMetadata(
        file_path="/tmp/models.xlsx",
        file_name="models.xlsx",
        file_type="xlsx",
        file_size_bytes=0,
    )
    return WorkbookResult(metadata=metadata, sheets=list(sheets))


def test_normalize_row_populates_field():
    row = RawRow(
        row_number=3,
        column="status",
        type="VARCHAR(20)",
        ui_component="dropdown",
        is_null="N",
        comments="A => Active, I => Inactive",
        validation_rule="required",
        sortable="Y",
        hidden="N",
        is_in_listing="y",
        is_remove_in_edit_form="Y",
    )

    field = ModelNormalizer().normalize_row(row)

    assert field.field_name == "status"
    assert field.label == "Status"
    assert field.data_type == "varchar(20)"
    assert field.ui_type == UIType.SELECT
    assert field.zod_type == ZodType.STRING
    assert field.required is True
    assert field.options == ["Active", "Inactive"]
    assert field.description is None
    assert field.placeholder == "Enter Status..."
    assert [rule.type for rule in field.validation_rules] == [ValidationRuleType.REQUIRED]
    assert field.sortable and field.is_in_listing and field.is_remove_in_edit_form
    assert not field.hidden


def test_comments_without_options_become_description():
    row = RawRow(row_number=3, column="bio", ui_component="textarea", comments="Short bio")

    field = ModelNormalizer().normalize_row(row)

    assert field.options is None
    assert field.description == "Short bio"
    assert field.required is False


@pytest.mark.parametrize("column", [None, "", "   "])
def test_rows_without_column_are_dropped(column):
    assert ModelNormalizer().normalize_row(RawRow(row_number=4, column=column)) is None


def test_empty_ui_component_default_policy():
    field = ModelNormalizer(empty_widget_policy="default").normalize_row(
        RawRow(row_number=3, column="id", type="int")
    )
    assert field.ui_type == UIType.INPUT
    assert field.zod_type == ZodType.NUMBER


def test_empty_ui_component_omit_policy():
    normalizer = ModelNormalizer(empty_widget_policy="omit")

    assert normalizer.normalize_row(RawRow(row_number=3, column="id", type="int")) is None
    assert normalizer.normalize_row(RawRow(row_number=4, column="name", ui_component="text")) is not None


def test_field_count_excludes_blank_columns():
    rows = [
        RawRow(row_number=3, column="name", ui_component="text"),
        RawRow(row_number=4, column=" "),
        RawRow(row_number=5, column="email", ui_component="text"),
        RawRow(row_number=6),
    ]

    model = ModelNormalizer().build_model(make_sheet("User", rows))

    assert [field.field_name for field in model.fields] == ["name", "email"]


def test_build_model_carries_flags():
    rows = [RawRow(row_number=3, column="label", ui_component="text")]

    model = ModelNormalizer().build_model(make_sheet("Tag", rows, is_popup=True))

    assert model.name == "Tag"
    assert model.is_popup is True


def test_sheet_without_fields_is_dropped():
    workbook = make_workbook(
        make_sheet("User", [RawRow(row_number=3, column="name", ui_component="text")]),
        make_sheet("Blank", [RawRow(row_number=3, type="varchar")]),
    )

    result = ModelNormalizer().normalize(workbook)

    assert list(result.models) == ["User"]
    assert result.dropped_sheets == ["Blank"]


def test_no_crud_sheet_never_becomes_model():
    workbook = make_workbook(
        make_sheet("Lookup", [RawRow(row_number=3, column="code", ui_component="text")], no_crud=True),
    )

    assert ModelNormalizer().normalize(workbook).models == {}


def test_duplicate_model_name_later_sheet_wins():
    first = make_sheet("User", [RawRow(row_number=3, column="name", ui_component="text")])
    second = make_sheet("User", [RawRow(row_number=3, column="email", ui_component="text")])

    result = ModelNormalizer().normalize(make_workbook(first, second))

    assert [field.field_name for field in result.models["User"].fields] == ["email"]


def test_duplicate_field_names_later_row_wins():
    rows = [
        RawRow(row_number=3, column="name", ui_component="text", is_null="Y"),
        RawRow(row_number=4, column="name", ui_component="text", is_null="N"),
    ]

    model = ModelNormalizer().build_model(make_sheet("User", rows))

    assert len(model.fields) == 2
    assert model.field_map()["name"].required is True


def test_listing_fields_prefers_flagged_columns():
    rows = [
        RawRow(row_number=3, column="id", type="int", ui_component="text"),
        RawRow(row_number=4, column="name", ui_component="text", is_in_listing="Y"),
        RawRow(row_number=5, column="secret", ui_component="text", hidden="Y", is_in_listing="Y"),
        RawRow(row_number=6, column="email", ui_component="text"),
    ]
    model = ModelNormalizer().build_model(make_sheet("User", rows))

    assert [f.field_name for f in model.listing_fields()] == ["name"]
    assert [f.field_name for f in model.form_fields()] == ["id", "name", "email"]


def test_listing_fields_falls_back_to_first_visible():
    rows = [
        RawRow(row_number=3 + i, column=f"col_{i}", ui_component="text") for i in range(10)
    ]
    model = ModelNormalizer().build_model(make_sheet("Wide", rows))

    assert [f.field_name for f in model.listing_fields(limit=3)] == ["col_0", "col_1", "col_2"]


@pytest.mark.asyncio
async def test_execute_returns_parse_result():
    workbook = make_workbook(
        make_sheet("User", [RawRow(row_number=3, column="name", ui_component="text")]),
    )
    normalizer = ModelNormalizer()

    assert normalizer.validate_input(workbook)
    result = await normalizer.execute(workbook)

    assert result.model_names == ["User"]
