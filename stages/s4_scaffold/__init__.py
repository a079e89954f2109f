"""Stage 4: Frontend scaffolding"""

from .scaffolder import Scaffolder, load_jsonc

__all__ = ["Scaffolder", "load_jsonc"]
