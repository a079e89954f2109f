"""Excel model-sheet reader"""

from pathlib import Path
from typing import Any, List, Optional

import pandas as pd
import structlog

from core.models import RawRow, RawSheet, WorkbookMetadata, WorkbookResult
from core.enums import FileType
from core.exceptions import FileParseError
from .base import WorkbookReader


logger = structlog.get_logger(__name__)

# Sheet layout: flags live in rows 0-1, row 1 holds the headers, data from row 2
FLAG_SCAN_ROWS = 2
HEADER_ROW = 1
DATA_START_ROW = 2

NO_CRUD_TOKEN = "no_crud"
IS_POPUP_TOKEN = "is_popup"

RECOGNIZED_HEADERS = (
    "column",
    "type",
    "ui_component",
    "is_null",
    "comments",
    "validation_rule",
    "sortable",
    "hidden",
    "is_in_listing",
    "is_remove_in_edit_form",
)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value)


class ExcelReader(WorkbookReader):
    """Reader for model-definition workbooks (.xlsx, .xlsm)"""

    @property
    def supported_extensions(self) -> List[str]:
        return [".xlsx", ".xlsm"]

    def read(self, file_path: str) -> WorkbookResult:
        """Read every sheet into a RawSheet"""
        path = Path(file_path)

        if not path.exists():
            raise FileParseError(f"File not found: {file_path}", file_path)

        if path.suffix.lower() == ".xlsm":
            file_type = FileType.EXCEL_XLSM
        else:
            file_type = FileType.EXCEL_XLSX

        try:
            sheets: List[RawSheet] = []
            skipped: List[str] = []

            with pd.ExcelFile(path, engine="openpyxl") as excel_file:
                metadata = WorkbookMetadata(
                    file_path=str(path.absolute()),
                    file_name=path.name,
                    file_type=file_type,
                    file_size_bytes=path.stat().st_size,
                    sheets=[str(name) for name in excel_file.sheet_names],
                )
                logger.info("Sheets found", sheets=metadata.sheets)

                for sheet_name in excel_file.sheet_names:
                    if not str(sheet_name).strip():
                        skipped.append(str(sheet_name))
                        continue

                    df = pd.read_excel(
                        excel_file,
                        sheet_name=sheet_name,
                        header=None,
                        dtype=str,
                        keep_default_na=False,
                    )
                    sheet = self._read_sheet(str(sheet_name), df)
                    if sheet is None:
                        skipped.append(str(sheet_name))
                    else:
                        sheets.append(sheet)

            return WorkbookResult(metadata=metadata, sheets=sheets, skipped_sheets=skipped)

        except FileParseError:
            raise
        except Exception as e:
            raise FileParseError(
                f"Failed to parse Excel file: {e}",
                file_path
            ) from e

    def _read_sheet(self, sheet_name: str, df: pd.DataFrame) -> Optional[RawSheet]:
        """Apply the flag/header/data row convention to one sheet"""
        logger.info("Processing sheet", sheet=sheet_name.strip())

        no_crud, is_popup = self._scan_flags(df)
        display_name = self._display_name(sheet_name, df)

        if no_crud:
            logger.info("Sheet is marked no_crud, skipping", sheet=display_name)
            return None

        if len(df) <= HEADER_ROW:
            logger.warning("Sheet is empty or could not be read, skipping", sheet=display_name)
            return None

        headers = [_cell_text(v).strip().lower() for v in df.iloc[HEADER_ROW].tolist()]
        rows = self._rows(df, headers)

        if not rows:
            logger.warning("Sheet is empty or could not be read, skipping", sheet=display_name)
            return None

        logger.debug("Header keys", sheet=display_name, headers=[h for h in headers if h])
        return RawSheet(
            sheet_name=sheet_name,
            display_name=display_name,
            is_popup=is_popup,
            no_crud=no_crud,
            headers=headers,
            rows=rows,
        )

    def _scan_flags(self, df: pd.DataFrame) -> tuple[bool, bool]:
        """Look for no_crud / is_popup tokens in the first two rows"""
        no_crud = False
        is_popup = False
        for row_idx in range(min(FLAG_SCAN_ROWS, len(df))):
            for value in df.iloc[row_idx].tolist():
                token = _cell_text(value).strip().lower()
                if token == NO_CRUD_TOKEN:
                    no_crud = True
                elif token == IS_POPUP_TOKEN:
                    is_popup = True
        return no_crud, is_popup

    def _display_name(self, sheet_name: str, df: pd.DataFrame) -> str:
        """Cell B1 overrides the sheet name"""
        if len(df) > 0 and len(df.columns) > 1:
            b1 = _cell_text(df.iat[0, 1]).strip()
            if b1:
                return b1
        return sheet_name.strip()

    def _rows(self, df: pd.DataFrame, headers: List[str]) -> List[RawRow]:
        rows = []
        for row_idx in range(DATA_START_ROW, len(df)):
            values = [_cell_text(v) for v in df.iloc[row_idx].tolist()]
            if not any(v.strip() for v in values):
                continue

            cells = {}
            for header, value in zip(headers, values):
                # first occurrence wins for repeated headers
                if header in RECOGNIZED_HEADERS and header not in cells and value.strip():
                    cells[header] = value
            rows.append(RawRow(row_number=row_idx + 1, **cells))
        return rows
