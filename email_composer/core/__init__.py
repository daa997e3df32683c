"""Core : erreurs, placeholders, réglages."""
from .errors import (
    EmailComposerError,
    ErrorCodes,
    InvalidBlock,
    MissingBlockProperty,
    TemplateIncomplete,
    UnknownBlockKind,
)
from .placeholders import (
    PLACEHOLDER_RE,
    extract_ordered,
    extract_variables,
    format_placeholder,
    substitute,
    unresolved_variables,
)

__all__ = [
    "EmailComposerError", "ErrorCodes", "InvalidBlock",
    "MissingBlockProperty", "TemplateIncomplete", "UnknownBlockKind",
    "PLACEHOLDER_RE", "extract_ordered", "extract_variables",
    "format_placeholder", "substitute", "unresolved_variables",
]
