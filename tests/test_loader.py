from pathlib import Path

import pytest
from openpyxl import Workbook

from core.exceptions import FileParseError
from stages.s0_loading import WorkbookLoader


@pytest.mark.asyncio
async def test_loader_reads_display_name_and_rows(make_workbook):
    path = make_workbook([
        {
            "title": "users_sheet",
            "row1": [None, "User"],
            "rows": [
                ["name", "varchar", "text", "N", None],
                ["email", "varchar", "text", "Y", "Contact address"],
            ],
        }
    ])

    result = await WorkbookLoader().execute(str(path))

    assert len(result.sheets) == 1
    sheet = result.sheets[0]
    assert sheet.sheet_name == "users_sheet"
    assert sheet.display_name == "User"
    assert not sheet.is_popup
    assert [row.column for row in sheet.rows] == ["name", "email"]
    assert sheet.rows[0].row_number == 3
    assert sheet.rows[0].is_null == "N"
    assert sheet.rows[0].comments is None
    assert sheet.rows[1].comments == "Contact address"


def test_display_name_falls_back_to_sheet_name(make_workbook):
    path = make_workbook([
        {"title": "Product", "row1": [None, None], "rows": [["title", "varchar", "text", "N"]]},
    ])

    result = WorkbookLoader().load(str(path))

    assert result.sheets[0].display_name == "Product"


def test_popup_flag_in_first_two_rows(make_workbook):
    path = make_workbook([
        {
            "title": "Tag",
            "row1": ["IS_POPUP ", "Tag"],
            "rows": [["label", "varchar", "text", "N"]],
        },
        {
            "title": "Note",
            "row1": [None, "Note"],
            "headers": ["column", "type", "ui_component", "is_null", "comments", "is_popup"],
            "rows": [["body", "text", "textarea", "Y"]],
        },
    ])

    result = WorkbookLoader().load(str(path))

    flags = {sheet.display_name: sheet.is_popup for sheet in result.sheets}
    assert flags == {"Tag": True, "Note": True}


def test_no_crud_sheet_is_skipped(make_workbook, user_sheet):
    path = make_workbook([
        user_sheet,
        {
            "title": "Lookup",
            "row1": ["no_crud", "Lookup"],
            "rows": [["code", "varchar", "text", "N"]],
        },
    ])

    result = WorkbookLoader().load(str(path))

    assert [sheet.display_name for sheet in result.sheets] == ["User"]
    assert result.skipped_sheets == ["Lookup"]


def test_blank_rows_and_unknown_headers(make_workbook):
    path = make_workbook([
        {
            "title": "Order",
            "headers": ["Column", " TYPE ", "ui_component", "is_null", "notes"],
            "rows": [
                ["number", "int", "text", "N", "ignored"],
                [None, None, None, None, None],
                ["total", "decimal", "text", "Y", None],
            ],
        }
    ])

    sheet = WorkbookLoader().load(str(path)).sheets[0]

    assert [row.column for row in sheet.rows] == ["number", "total"]
    assert sheet.rows[0].type == "int"
    assert sheet.rows[1].row_number == 5


def test_sheet_without_data_rows_is_skipped(make_workbook, user_sheet):
    path = make_workbook([user_sheet, {"title": "Empty", "rows": []}])

    result = WorkbookLoader().load(str(path))

    assert [sheet.display_name for sheet in result.sheets] == ["User"]
    assert "Empty" in result.skipped_sheets


def test_empty_workbook_yields_no_sheets(tmp_path: Path):
    workbook = Workbook()
    path = tmp_path / "blank.xlsx"
    workbook.save(path)

    result = WorkbookLoader().load(str(path))

    assert result.sheets == []


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileParseError, match="File not found"):
        WorkbookLoader().load(str(tmp_path / "missing.xlsx"))


def test_unsupported_extension(tmp_path: Path):
    path = tmp_path / "models.csv"
    path.write_text("column,type\n", encoding="utf-8")

    with pytest.raises(FileParseError, match="Unsupported file type"):
        WorkbookLoader().load(str(path))


def test_corrupt_workbook(tmp_path: Path):
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"not a zip archive")

    with pytest.raises(FileParseError):
        WorkbookLoader().load(str(path))
