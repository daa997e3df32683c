"""
Validation de forme des blocs, avant sauvegarde.

Seul `button` a une propriété requise (url non vide). Les erreurs sont
retournées en liste ; ensure_valid() lève la première.
"""
from typing import List

from ..core.errors import InvalidBlock, MissingBlockProperty, UnknownBlockKind
from .base import EmailBlock, VisualTemplate, is_known_kind

REQUIRED_PROPERTIES = {
    "button": ("url",),
}


def validate_block(block: EmailBlock) -> List[InvalidBlock]:
    if not is_known_kind(block.kind):
        return [UnknownBlockKind(block.id, block.kind)]
    return [
        MissingBlockProperty(block.id, block.kind, key)
        for key in REQUIRED_PROPERTIES.get(block.kind, ())
        if not block.prop(key)
    ]


def validate_template(template: VisualTemplate) -> List[InvalidBlock]:
    errors: List[InvalidBlock] = []
    for block in template.blocks:
        errors.extend(validate_block(block))
    return errors


def ensure_valid(template: VisualTemplate) -> None:
    errors = validate_template(template)
    if errors:
        raise errors[0]
