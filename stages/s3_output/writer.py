"""Stage 3: Write generated files to the frontend tree."""

from pathlib import Path
from typing import Optional, Union

import structlog

from config import settings
from core.exceptions import StageError
from core.interfaces import Stage
from core.models import GeneratedProject, WriteResult

logger = structlog.get_logger(__name__)


class FileWriter(Stage[GeneratedProject, WriteResult]):
    """Write every generated file below the output directory."""

    def __init__(self, output_dir: Optional[Union[str, Path]] = None):
        self.output_dir = Path(output_dir).resolve() if output_dir else None

    @property
    def name(self) -> str:
        return "File Output"

    @property
    def stage_number(self) -> int:
        return 3

    def validate_input(self, input_data: GeneratedProject) -> bool:
        if not isinstance(input_data, GeneratedProject):
            return False
        return isinstance(input_data.files, dict)

    async def execute(self, input_data: GeneratedProject) -> WriteResult:
        return self.write(input_data)

    def write(self, project: GeneratedProject) -> WriteResult:
        root = self.output_dir or settings.get_frontend_path()
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StageError(self.stage_number, f"Cannot create {root}: {exc}") from exc

        written = []
        for rel_path, content in project.files.items():
            if not isinstance(rel_path, str) or not rel_path:
                raise StageError(self.stage_number, f"Invalid file path: {rel_path!r}")
            target_path = (root / rel_path).resolve()
            if root not in target_path.parents:
                raise StageError(self.stage_number, f"Path traversal detected: {rel_path}")
            if content is None:
                content = ""
            if not isinstance(content, str):
                raise StageError(
                    self.stage_number,
                    f"File content must be string for {rel_path}, got {type(content).__name__}",
                )
            try:
                target_path.parent.mkdir(parents=True, exist_ok=True)
                target_path.write_text(content, encoding="utf-8")
            except OSError as exc:
                raise StageError(self.stage_number, f"Failed to write {rel_path}: {exc}") from exc
            logger.debug("Wrote file", path=str(target_path))
            written.append(rel_path)

        logger.info("Wrote files", count=len(written), output_dir=str(root))
        return WriteResult(output_dir=str(root), written_files=sorted(written))
