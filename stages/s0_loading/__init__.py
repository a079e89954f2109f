"""Stage 0: Workbook loading"""

from .loader import WorkbookLoader

__all__ = ["WorkbookLoader"]
