"""
email_composer : composition de templates email transactionnels.

Usage :
    >>> from email_composer import instantiate, render_email, extract_variables, substitute
    >>> visual = instantiate("payment-received")
    >>> html = render_email(visual)
    >>> sorted(extract_variables(html))[:2]
    ['amount', 'grossAmount']
    >>> substitute("Hi {{userName}}", {"userName": "Ada"})
    'Hi Ada'
"""
__version__ = "0.1.0"

from .blocks import (
    BLOCK_DEFINITIONS,
    BLOCK_KINDS,
    EmailBlock,
    VisualTemplate,
    empty_template,
    ensure_valid,
    new_block,
    validate_block,
    validate_template,
)
from .catalog import (
    SAMPLE_VALUES,
    VARIABLES,
    DefaultComposition,
    instantiate,
    list_compositions,
    lookup,
    reconcile,
    slug_for_notification_type,
    variables_for_slug,
)
from .core import (
    EmailComposerError,
    InvalidBlock,
    MissingBlockProperty,
    TemplateIncomplete,
    UnknownBlockKind,
    extract_ordered,
    extract_variables,
    substitute,
    unresolved_variables,
)
from .records import EmailTemplateRecord
from .renderer import RenderResult, RenderWarning, render_block, render_email, render_email_with_warnings
from .templates import (
    CompiledTemplate,
    EmailPreview,
    ProcessedEmail,
    build_record,
    compile_template,
    preview,
    preview_record,
    process_record,
)

__all__ = [
    # Blocs
    "BLOCK_DEFINITIONS", "BLOCK_KINDS", "EmailBlock", "VisualTemplate",
    "empty_template", "ensure_valid", "new_block", "validate_block", "validate_template",
    # Catalogue
    "SAMPLE_VALUES", "VARIABLES", "DefaultComposition",
    "instantiate", "list_compositions", "lookup", "reconcile",
    "slug_for_notification_type", "variables_for_slug",
    # Core
    "EmailComposerError", "InvalidBlock", "MissingBlockProperty",
    "TemplateIncomplete", "UnknownBlockKind",
    "extract_ordered", "extract_variables", "substitute", "unresolved_variables",
    # Renderer
    "RenderResult", "RenderWarning", "render_block", "render_email", "render_email_with_warnings",
    # Flux
    "EmailTemplateRecord", "CompiledTemplate", "EmailPreview", "ProcessedEmail",
    "build_record", "compile_template", "preview", "preview_record", "process_record",
]
