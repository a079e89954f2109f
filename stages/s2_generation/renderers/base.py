"""Renderer base classes and text helpers"""

import json
from abc import abstractmethod
from typing import Any

from core.interfaces import ArtifactRenderer
from core.models import GeneratedFile, ModelConfig
from utils.naming import pascal_case


class ModelArtifactRenderer(ArtifactRenderer):
    """Renderer that emits files once per model"""

    def render(self, models: dict[str, ModelConfig]) -> list[GeneratedFile]:
        files = []
        for model in models.values():
            files.extend(self.render_model(model, models))
        return files

    @abstractmethod
    def render_model(
        self, model: ModelConfig, models: dict[str, ModelConfig]
    ) -> list[GeneratedFile]:
        """Render files for a single model"""
        pass


def js(value: Any) -> str:
    """Encode a Python value as a JS/TS literal"""
    return json.dumps(value, ensure_ascii=False)


def t_call(key: str, default: str) -> str:
    """i18next lookup with an inline default"""
    return f"t({js(key)}, {js(default)})"


def model_dir(model: ModelConfig) -> str:
    return f"src/pages/{pascal_case(model.name)}"


def model_key(model: ModelConfig) -> str:
    """Translation namespace key for a model"""
    return f"models.{pascal_case(model.name)}"


def dedent_block(text: str) -> str:
    """Strip the leading newline of a triple-quoted template"""
    return text[1:] if text.startswith("\n") else text
