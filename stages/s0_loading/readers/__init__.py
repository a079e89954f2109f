"""Workbook readers"""

from .base import WorkbookReader
from .excel import ExcelReader

__all__ = ["WorkbookReader", "ExcelReader"]
