"""Catalogue des kinds : libellé, description, contenu par défaut, propriétés sélectionnables."""
from typing import Dict, Optional

from .base import EmailBlock, generate_block_id, is_known_kind

DEFAULT_FOOTER = (
    "This is an automated notification from AffiliateXchange.\n"
    "Update your notification preferences anytime."
)

# Propriété "select" → options (la première est la valeur par défaut),
# propriété "text" → options None.
BLOCK_DEFINITIONS: Dict[str, dict] = {
    "greeting": {
        "label":           "Greeting",
        "description":     "Personal greeting with user name",
        "default_content": "Hi {{userName}},",
        "properties":      {},
    },
    "text": {
        "label":           "Text Paragraph",
        "description":     "Regular text content",
        "default_content": "Enter your message here...",
        "properties":      {},
    },
    "heading": {
        "label":           "Heading",
        "description":     "Section heading",
        "default_content": "Section Title",
        "properties":      {"size": ["medium", "large", "small"]},
    },
    "success-box": {
        "label":           "Success Message",
        "description":     "Green success/confirmation box",
        "default_content": "Your action was successful!",
        "properties":      {},
    },
    "warning-box": {
        "label":           "Warning Message",
        "description":     "Yellow warning/attention box",
        "default_content": "Please note this important information.",
        "properties":      {},
    },
    "error-box": {
        "label":           "Error Message",
        "description":     "Red error/alert box",
        "default_content": "An error or issue occurred.",
        "properties":      {},
    },
    "info-box": {
        "label":           "Info Box",
        "description":     "Blue information box",
        "default_content": "Here is some helpful information.",
        "properties":      {},
    },
    "button": {
        "label":           "Action Button",
        "description":     "Call-to-action button",
        "default_content": "Click Here",
        "properties":      {
            "url":   None,
            "color": ["primary", "success", "warning", "danger", "gray"],
        },
    },
    "amount-display": {
        "label":           "Amount Display",
        "description":     "Large amount/price display",
        "default_content": "{{amount}}",
        "properties":      {
            "label": None,
            "style": ["default", "success", "warning"],
        },
    },
    "details-table": {
        "label":           "Details Table",
        "description":     "Key-value pairs table",
        "default_content": "Amount:{{amount}}\nOffer:{{offerTitle}}\nTransaction ID:{{transactionId}}",
        "properties":      {},
    },
    "numbered-list": {
        "label":           "Numbered List",
        "description":     "Ordered numbered list",
        "default_content": "First step\nSecond step\nThird step",
        "properties":      {},
    },
    "footer": {
        "label":           "Footer",
        "description":     "Standard email footer",
        "default_content": DEFAULT_FOOTER,
        "properties":      {},
    },
}

# Valeur initiale des propriétés texte
_TEXT_PROPERTY_DEFAULTS = {"url": "{{linkUrl}}", "label": ""}


def default_properties(kind: str) -> Dict[str, str]:
    """Propriétés initiales d'un nouveau bloc : 1re option pour un select, défaut texte sinon."""
    definition = BLOCK_DEFINITIONS.get(kind) or {}
    props = {}
    for key, options in definition.get("properties", {}).items():
        props[key] = options[0] if options else _TEXT_PROPERTY_DEFAULTS.get(key, "")
    return props


def new_block(kind: str, content: Optional[str] = None) -> EmailBlock:
    """Crée un bloc prêt à éditer (id neuf, contenu et propriétés par défaut)."""
    if not is_known_kind(kind):
        raise ValueError(f"Kind inconnu : {kind!r}. Kinds : {list(BLOCK_DEFINITIONS)}")
    definition = BLOCK_DEFINITIONS[kind]
    return EmailBlock(
        id=generate_block_id(),
        kind=kind,
        content=definition["default_content"] if content is None else content,
        properties=default_properties(kind),
    )
