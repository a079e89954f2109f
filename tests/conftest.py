from pathlib import Path

import pytest
from openpyxl import Workbook

HEADERS = ["column", "type", "ui_component", "is_null", "comments"]


def build_workbook(path: Path, sheets: list[dict]) -> Path:
    """
    Write a model workbook.

    Each sheet dict has ``title`` and optional ``row1`` (flag/name row),
    ``headers`` and ``rows``.
    """
    workbook = Workbook()
    workbook.remove(workbook.active)
    for sheet_def in sheets:
        sheet = workbook.create_sheet(sheet_def["title"])
        sheet.append(sheet_def.get("row1", [None, sheet_def["title"]]))
        sheet.append(sheet_def.get("headers", HEADERS))
        for row in sheet_def.get("rows", []):
            sheet.append(row)
    workbook.save(path)
    return path


@pytest.fixture
def make_workbook(tmp_path: Path):
    def _make(sheets: list[dict], name: str = "models.xlsx") -> Path:
        return build_workbook(tmp_path / name, sheets)

    return _make


@pytest.fixture
def user_sheet() -> dict:
    return {
        "title": "User",
        "row1": [None, "User"],
        "rows": [["name", "varchar", "text", "N", None]],
    }
