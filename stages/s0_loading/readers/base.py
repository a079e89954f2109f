"""Base workbook reader"""

from abc import ABC, abstractmethod
from core.interfaces import WorkbookReader as IWorkbookReader
from core.models import WorkbookResult


class WorkbookReader(IWorkbookReader, ABC):
    """Abstract base class for workbook readers"""

    @abstractmethod
    def read(self, file_path: str) -> WorkbookResult:
        """Read workbook and return WorkbookResult"""
        pass
