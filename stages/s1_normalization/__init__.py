"""Stage 1: Field / model normalization"""

from .normalizer import ModelNormalizer
from .rules import (
    map_ui_type,
    infer_zod_type,
    parse_options_from_comments,
    parse_validation_rules,
)

__all__ = [
    "ModelNormalizer",
    "map_ui_type",
    "infer_zod_type",
    "parse_options_from_comments",
    "parse_validation_rules",
]
