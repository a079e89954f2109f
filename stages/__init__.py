"""Pipeline stages"""

from .s0_loading import WorkbookLoader
from .s1_normalization import ModelNormalizer
from .s2_generation import CodeGenerator
from .s3_output import FileWriter
from .s4_scaffold import Scaffolder

__all__ = [
    "WorkbookLoader",
    "ModelNormalizer",
    "CodeGenerator",
    "FileWriter",
    "Scaffolder",
]
