"""Abstract base classes for PanelForge components"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class Stage(ABC, Generic[InputT, OutputT]):
    """Abstract base class for all pipeline stages"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable stage name"""
        pass

    @property
    @abstractmethod
    def stage_number(self) -> int:
        """Stage number (0-4)"""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """Execute the stage"""
        pass

    @abstractmethod
    def validate_input(self, input_data: InputT) -> bool:
        """Validate input before processing"""
        pass


class WorkbookReader(ABC):
    """Abstract base class for workbook readers"""

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """List of supported file extensions"""
        pass

    @abstractmethod
    def read(self, file_path: str) -> "WorkbookResult":
        """Read workbook and return WorkbookResult"""
        pass


class ArtifactRenderer(ABC):
    """Abstract base class for text-template renderers"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key for this renderer"""
        pass

    @abstractmethod
    def render(self, models: dict) -> list["GeneratedFile"]:
        """Render files from the full model mapping"""
        pass
