"""Stage 2: Code generation."""

from typing import Optional

import structlog

from core.exceptions import StageError, TemplateRenderError
from core.interfaces import Stage
from core.models import GeneratedProject, ParseResult
from .registry import RendererRegistry, default_registry

logger = structlog.get_logger(__name__)


class CodeGenerator(Stage[ParseResult, GeneratedProject]):
    """Run every registered renderer over the parsed models."""

    def __init__(self, registry: Optional[RendererRegistry] = None):
        self.registry = registry or default_registry()

    @property
    def name(self) -> str:
        return "Code Generation"

    @property
    def stage_number(self) -> int:
        return 2

    def validate_input(self, input_data: ParseResult) -> bool:
        return isinstance(input_data, ParseResult)

    async def execute(self, input_data: ParseResult) -> GeneratedProject:
        try:
            return self.generate(input_data)
        except TemplateRenderError as exc:
            raise StageError(self.stage_number, str(exc)) from exc

    def generate(self, parse_result: ParseResult) -> GeneratedProject:
        files: dict[str, str] = {}
        owners: dict[str, str] = {}
        for renderer in self.registry:
            try:
                rendered = renderer.render(parse_result.models)
            except Exception as exc:
                logger.exception("Renderer failed", renderer=renderer.name)
                raise TemplateRenderError(renderer.name, str(exc)) from exc

            for generated in rendered:
                if generated.path in files:
                    raise TemplateRenderError(
                        renderer.name,
                        f"{generated.path} already emitted by {owners[generated.path]}",
                    )
                files[generated.path] = generated.content
                owners[generated.path] = renderer.name
            logger.debug("Renderer emitted files", renderer=renderer.name, count=len(rendered))

        logger.info("Generated files", files=len(files), models=len(parse_result.models))
        return GeneratedProject(
            files=files,
            model_names=parse_result.model_names,
            renderers=self.registry.names(),
        )
