"""Blocs email : modèle, définitions par kind, validation."""
from .base import (
    BLOCK_KINDS,
    BOX_KINDS,
    BlockKind,
    EmailBlock,
    VisualTemplate,
    empty_template,
    generate_block_id,
    is_known_kind,
)
from .definitions import BLOCK_DEFINITIONS, DEFAULT_FOOTER, default_properties, new_block
from .validation import REQUIRED_PROPERTIES, ensure_valid, validate_block, validate_template

__all__ = [
    # Modèle
    "BLOCK_KINDS", "BOX_KINDS", "BlockKind",
    "EmailBlock", "VisualTemplate",
    "empty_template", "generate_block_id", "is_known_kind",
    # Définitions
    "BLOCK_DEFINITIONS", "DEFAULT_FOOTER", "default_properties", "new_block",
    # Validation
    "REQUIRED_PROPERTIES", "ensure_valid", "validate_block", "validate_template",
]
