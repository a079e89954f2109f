"""Stage 3: File output"""

from .writer import FileWriter

__all__ = ["FileWriter"]
