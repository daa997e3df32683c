"""
Palettes et styles inline du renderer email.

Tout est inline : les clients mail ignorent ou filtrent les feuilles de style.
Les palettes des encadrés sont fixes par kind, non configurables.
"""
from typing import Dict

FONT_STACK = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif"

PAGE_BG      = "#f4f4f4"
CARD_BG      = "#ffffff"
TEXT_COLOR   = "#333333"
MUTED_COLOR  = "#666666"
BORDER_COLOR = "#E5E7EB"

HEADING_SIZES: Dict[str, str] = {
    "large":  "font-size:24px;margin:20px 0 15px 0;",
    "medium": "font-size:20px;margin:18px 0 12px 0;",
    "small":  "font-size:16px;margin:15px 0 10px 0;",
}
DEFAULT_HEADING_SIZE = "medium"

BUTTON_COLORS: Dict[str, str] = {
    "primary": "#4F46E5",
    "success": "#10B981",
    "warning": "#F59E0B",
    "danger":  "#EF4444",
    "gray":    "#6B7280",
}
DEFAULT_BUTTON_COLOR = "primary"
NEUTRAL_BUTTON_COLOR = "gray"

# kind → (fond, bordure gauche, texte)
BOX_PALETTES: Dict[str, Dict[str, str]] = {
    "success-box": {"bg": "#ECFDF5", "border": "#10B981", "text": "#065F46"},
    "info-box":    {"bg": "#EFF6FF", "border": "#3B82F6", "text": "#1E40AF"},
    "warning-box": {"bg": "#FEF3C7", "border": "#F59E0B", "text": "#92400E"},
    "error-box":   {"bg": "#FEE2E2", "border": "#EF4444", "text": "#991B1B"},
}

AMOUNT_STYLES: Dict[str, Dict[str, str]] = {
    "default": {"bg": "#F3F4F6", "label": "#6B7280", "amount": "#111827"},
    "success": {"bg": "#ECFDF5", "label": "#065F46", "amount": "#047857"},
    "warning": {"bg": "#FEF3C7", "label": "#92400E", "amount": "#D97706"},
}
DEFAULT_AMOUNT_STYLE = "default"
DEFAULT_AMOUNT_LABEL = "Amount"

TABLE_BG         = "#F3F4F6"
TABLE_ROW_BORDER = "#D1D5DB"
TABLE_LABEL      = "#6B7280"
TABLE_VALUE      = "#111827"

LIST_COLOR = "#374151"
