"""Core abstractions for PanelForge pipeline"""

from .models import *
from .enums import *
from .exceptions import *
from .interfaces import *

__all__ = [
    # Models
    "RawRow",
    "RawSheet",
    "WorkbookMetadata",
    "WorkbookResult",
    "ValidationRule",
    "Field",
    "ModelConfig",
    "ParseResult",
    "GeneratedFile",
    "GeneratedProject",
    "WriteResult",
    "ScaffoldResult",
    # Enums
    "FileType",
    "ZodType",
    "UIType",
    "ValidationRuleType",
    "EmptyWidgetPolicy",
    # Exceptions
    "PanelForgeError",
    "PipelineError",
    "StageError",
    "FileParseError",
    "NoModelsFoundError",
    "TemplateRenderError",
    "ScaffoldError",
    # Interfaces
    "Stage",
    "WorkbookReader",
    "ArtifactRenderer",
]
