"""Stage 0: Workbook loading - read model sheets from a spreadsheet"""

from pathlib import Path

from core.interfaces import Stage
from core.models import WorkbookResult
from core.exceptions import StageError, FileParseError
from .readers import ExcelReader


class WorkbookLoader(Stage[str, WorkbookResult]):
    """Stage 0: Load a workbook and split it into raw model sheets"""

    @property
    def name(self) -> str:
        return "Workbook Loading"

    @property
    def stage_number(self) -> int:
        return 0

    def __init__(self):
        self.readers = {
            ".xlsx": ExcelReader(),
            ".xlsm": ExcelReader(),
        }

    def validate_input(self, input_data: str) -> bool:
        """Validate file path"""
        return isinstance(input_data, str) and bool(input_data)

    async def execute(self, input_data: str) -> WorkbookResult:
        """Execute loading stage"""
        return self.load(input_data)

    def load(self, file_path: str) -> WorkbookResult:
        """Synchronous entry point, shared by execute() and parse_workbook()"""
        path = Path(file_path)

        if not path.exists():
            raise FileParseError(f"File not found: {file_path}", file_path)

        ext = path.suffix.lower()
        if ext not in self.readers:
            raise FileParseError(
                f"Unsupported file type: {ext or '(none)'}. "
                f"Supported: {', '.join(self.readers.keys())}",
                file_path
            )

        reader = self.readers[ext]

        try:
            return reader.read(str(path))
        except FileParseError:
            raise
        except Exception as e:
            raise StageError(
                self.stage_number,
                f"Unexpected error reading workbook: {e}"
            ) from e
