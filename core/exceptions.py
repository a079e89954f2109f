"""Custom exceptions for PanelForge"""


class PanelForgeError(Exception):
    """Base exception for all PanelForge errors"""
    pass


class PipelineError(PanelForgeError):
    """Error in pipeline execution"""
    def __init__(self, message: str, stage: int = None):
        super().__init__(message)
        self.stage = stage


class StageError(PanelForgeError):
    """Error in a specific stage"""
    def __init__(self, stage: int, message: str):
        super().__init__(f"Stage {stage}: {message}")
        self.stage = stage
        self.message = message


class FileParseError(PanelForgeError):
    """Error parsing file"""
    def __init__(self, message: str, file_path: str = None):
        super().__init__(message)
        self.file_path = file_path


class NoModelsFoundError(PanelForgeError):
    """Workbook parsed but yielded no usable models"""
    def __init__(self, message: str = "No models found.", file_path: str = None):
        super().__init__(message)
        self.file_path = file_path


class TemplateRenderError(PanelForgeError):
    """A renderer failed to produce its artifacts"""
    def __init__(self, renderer: str, message: str):
        super().__init__(f"Renderer '{renderer}': {message}")
        self.renderer = renderer
        self.message = message


class ScaffoldError(PanelForgeError):
    """A scaffolding step (npm, vite, shadcn) failed"""
    def __init__(self, step: str, message: str):
        super().__init__(f"Scaffold step '{step}' failed: {message}")
        self.step = step
        self.message = message
