"""Stage 2: Code generation"""

from .generator import CodeGenerator
from .registry import RendererRegistry, default_registry

__all__ = ["CodeGenerator", "RendererRegistry", "default_registry"]
