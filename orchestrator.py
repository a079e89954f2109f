"""Pipeline orchestrator"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from core.models import (
    GeneratedProject,
    ModelConfig,
    ParseResult,
    ScaffoldResult,
    WorkbookResult,
    WriteResult,
)
from core.exceptions import FileParseError, NoModelsFoundError, PipelineError, StageError
from stages import WorkbookLoader, ModelNormalizer, CodeGenerator, FileWriter, Scaffolder
from ui.progress import ProgressTracker
from config import settings


@dataclass
class PipelineContext:
    """Shared context passed through pipeline"""
    file_path: str
    workbook: Optional[WorkbookResult] = None
    parse: Optional[ParseResult] = None
    generated_project: Optional[GeneratedProject] = None
    write: Optional[WriteResult] = None
    scaffold: Optional[ScaffoldResult] = None

    @property
    def models(self) -> dict[str, ModelConfig]:
        return self.parse.models if self.parse else {}


class Orchestrator:
    """Pipeline coordinator"""

    def __init__(
        self,
        progress: ProgressTracker,
        output_dir: Optional[Union[str, Path]] = None,
        scaffold: Optional[bool] = None,
        dry_run: bool = False,
        generator: Optional[CodeGenerator] = None,
        scaffolder: Optional[Scaffolder] = None,
    ):
        self.progress = progress
        self.output_dir = Path(output_dir).resolve() if output_dir else settings.get_frontend_path()
        self.scaffold_enabled = settings.SCAFFOLD_ENABLED if scaffold is None else scaffold
        self.dry_run = dry_run

        # Initialize stages
        self.stages = {
            0: WorkbookLoader(),
            1: ModelNormalizer(),
            2: generator or CodeGenerator(),
            3: FileWriter(self.output_dir),
            4: scaffolder or Scaffolder(),
        }

    async def run(self, file_path: str) -> PipelineContext:
        """Execute full pipeline"""
        ctx = PipelineContext(file_path=file_path)

        try:
            # Stage 0: Loading
            ctx.workbook = await self._execute_stage(0, file_path)

            # Stage 1: Normalization
            ctx.parse = await self._execute_stage(1, ctx.workbook)
            if not ctx.parse.models:
                await self._notify("fail", 1, "No models found.")
                raise NoModelsFoundError(file_path=file_path)

            # Stage 2: Code generation
            ctx.generated_project = await self._execute_stage(2, ctx.parse)

            if not self.dry_run:
                # Stage 4 runs first so generated files replace the template defaults
                if self.scaffold_enabled:
                    ctx.scaffold = await self._execute_stage(4, str(self.output_dir))

                # Stage 3: Output
                ctx.write = await self._execute_stage(3, ctx.generated_project)

            await self._notify("complete")
            return ctx

        except FileParseError as e:
            await self._notify("fail", 0, str(e))
            raise
        except StageError as e:
            await self._notify("fail", e.stage, str(e))
            raise PipelineError(f"Pipeline failed at stage {e.stage}: {e}", stage=e.stage) from e

    async def _execute_stage(self, stage_num: int, input_data) -> any:
        """Execute a single stage with progress tracking"""
        stage = self.stages[stage_num]

        await self._notify("start_stage", stage_num, stage.name)

        if not stage.validate_input(input_data):
            raise StageError(stage_num, "Invalid input")

        result = await stage.execute(input_data)

        await self._notify("complete_stage", stage_num)

        return result

    async def _notify(self, event: str, *args):
        # Handle both sync and async progress trackers
        result = getattr(self.progress, event)(*args)
        if hasattr(result, '__await__'):
            await result


def parse_workbook(file_path: Union[str, Path]) -> dict[str, ModelConfig]:
    """Load and normalize a workbook in one synchronous call"""
    workbook = WorkbookLoader().load(str(file_path))
    return ModelNormalizer().normalize(workbook).models
