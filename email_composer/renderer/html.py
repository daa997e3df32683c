"""
Renderer HTML email : VisualTemplate → document HTML complet.

Dispatch par kind via _RENDERERS. Le renderer ne lève jamais sur un contenu
mal formé : il dégrade et note un RenderWarning.
  - kind inconnu         → rien n'est émis
  - bouton sans url      → libellé en texte simple
  - taille/couleur/style inconnus → valeur par défaut
Les blocs footer sont toujours rendus en pied de document, après les autres.
"""
import html
import logging
import re
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from ..blocks.base import BOX_KINDS, EmailBlock, VisualTemplate
from ..core import settings
from . import styles as st

log = logging.getLogger(__name__)

HEADER_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")
_UNSAFE_URL_SCHEMES = ("javascript:", "vbscript:", "data:")


class RenderWarning(BaseModel):
    """Dégradation appliquée pendant le rendu (entrée mal formée)."""
    code: str
    message: str
    block_id: Optional[str] = None
    kind: Optional[str] = None


class RenderResult(BaseModel):
    html: str
    warnings: List[RenderWarning] = Field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)


# ── Échappement ─────────────────────────────────────────────────────────────
# html.escape ne touche pas aux accolades : {{name}} survit tel quel et reste
# substituable après rendu.

def _text(value: str) -> str:
    return html.escape(value, quote=False)


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _lines(value: str) -> List[str]:
    return value.replace("\r\n", "\n").split("\n")


def _multiline(value: str) -> str:
    return "<br>".join(_text(line) for line in _lines(value))


def _warn(warnings: List[RenderWarning], code: str, b: EmailBlock, message: str) -> None:
    log.debug("Rendu dégradé [%s] bloc %s (%s) : %s", code, b.id, b.kind, message)
    warnings.append(RenderWarning(code=code, message=message, block_id=b.id, kind=b.kind))


def _is_unsafe_url(url: str) -> bool:
    compact = re.sub(r"\s", "", url).lower()
    return compact.startswith(_UNSAFE_URL_SCHEMES)


# ── Renderers par kind ──────────────────────────────────────────────────────

def render_paragraph(b: EmailBlock, warnings: List[RenderWarning]) -> str:
    return f'<p style="margin:0 0 16px 0;">{_multiline(b.content)}</p>'


def render_heading(b: EmailBlock, warnings: List[RenderWarning]) -> str:
    size = b.prop("size") or st.DEFAULT_HEADING_SIZE
    if size not in st.HEADING_SIZES:
        _warn(warnings, "unknown_heading_size", b, f"taille {size!r} → {st.DEFAULT_HEADING_SIZE}")
        size = st.DEFAULT_HEADING_SIZE
    return (
        f'<h3 style="{st.HEADING_SIZES[size]}font-weight:600;color:#111827;">'
        f'{_multiline(b.content)}</h3>'
    )


def render_button(b: EmailBlock, warnings: List[RenderWarning]) -> str:
    color_key = b.prop("color") or st.DEFAULT_BUTTON_COLOR
    if color_key not in st.BUTTON_COLORS:
        _warn(warnings, "unknown_button_color", b, f"couleur {color_key!r} → {st.NEUTRAL_BUTTON_COLOR}")
        color_key = st.NEUTRAL_BUTTON_COLOR
    color = st.BUTTON_COLORS[color_key]
    label = _text(b.content)

    url = b.prop("url")
    if url and _is_unsafe_url(url):
        _warn(warnings, "unsafe_button_url", b, "schéma d'url interdit, bouton rendu sans lien")
        url = ""
    elif not url:
        _warn(warnings, "missing_button_url", b, "bouton sans url, rendu sans lien")

    if not url:
        return (
            f'<div style="text-align:center;margin:30px 0;">'
            f'<span style="display:inline-block;padding:12px 30px;border:1px solid {color};'
            f'color:{color};border-radius:6px;font-weight:600;">{label}</span></div>'
        )
    return (
        f'<div style="text-align:center;margin:30px 0;">'
        f'<a href="{_attr(url)}" style="display:inline-block;padding:12px 30px;'
        f'background-color:{color};color:#ffffff;text-decoration:none;border-radius:6px;'
        f'font-weight:600;">{label}</a></div>'
    )


def render_box(b: EmailBlock, warnings: List[RenderWarning]) -> str:
    p = st.BOX_PALETTES[b.kind]
    return (
        f'<div style="background-color:{p["bg"]};border-left:4px solid {p["border"]};'
        f'padding:15px;margin:20px 0;border-radius:4px;">'
        f'<p style="margin:0;color:{p["text"]};">{_multiline(b.content)}</p></div>'
    )


def render_details_table(b: EmailBlock, warnings: List[RenderWarning]) -> str:
    rows = []
    for line in _lines(b.content):
        if not line.strip():
            continue
        label, sep, value = line.partition(":")
        if not sep:
            # pas de ":" → ligne pleine largeur plutôt qu'une erreur
            rows.append(
                f'<tr style="border-bottom:1px solid {st.TABLE_ROW_BORDER};">'
                f'<td colspan="2" style="padding:12px 0;color:{st.TABLE_VALUE};">{_text(line.strip())}</td></tr>'
            )
            continue
        rows.append(
            f'<tr style="border-bottom:1px solid {st.TABLE_ROW_BORDER};">'
            f'<td style="padding:12px 0;color:{st.TABLE_LABEL};">{_text(label.strip())}</td>'
            f'<td style="padding:12px 0;font-weight:600;color:{st.TABLE_VALUE};text-align:right;">'
            f'{_text(value.strip())}</td></tr>'
        )
    return (
        f'<div style="background-color:{st.TABLE_BG};padding:20px;border-radius:8px;margin:20px 0;">'
        f'<table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0" '
        f'style="width:100%;border-collapse:collapse;">{"".join(rows)}</table></div>'
    )


def render_amount(b: EmailBlock, warnings: List[RenderWarning]) -> str:
    style_key = b.prop("style") or st.DEFAULT_AMOUNT_STYLE
    if style_key not in st.AMOUNT_STYLES:
        _warn(warnings, "unknown_amount_style", b, f"style {style_key!r} → {st.DEFAULT_AMOUNT_STYLE}")
        style_key = st.DEFAULT_AMOUNT_STYLE
    s = st.AMOUNT_STYLES[style_key]
    label = b.prop("label") or st.DEFAULT_AMOUNT_LABEL
    return (
        f'<div style="background-color:{s["bg"]};padding:20px;border-radius:8px;margin:20px 0;text-align:center;">'
        f'<p style="margin:0 0 5px 0;font-size:14px;color:{s["label"]};">{_text(label)}</p>'
        f'<p style="margin:0;font-size:32px;font-weight:bold;color:{s["amount"]};">{_text(b.content)}</p></div>'
    )


def render_numbered_list(b: EmailBlock, warnings: List[RenderWarning]) -> str:
    # une ligne non vide = un item ; "- sous-point" reste le texte de l'item
    items = "".join(
        f'<li style="margin-bottom:8px;">{_text(line.strip())}</li>'
        for line in _lines(b.content)
        if line.strip()
    )
    return f'<ol style="margin:15px 0;padding-left:20px;color:{st.LIST_COLOR};">{items}</ol>'


def render_footer(b: EmailBlock, warnings: List[RenderWarning]) -> str:
    lines = "".join(
        f'<p style="margin:0 0 4px 0;">{_text(line.strip())}</p>'
        for line in _lines(b.content)
        if line.strip()
    )
    return f"<div>{lines}</div>"


_RENDERERS: Dict[str, Callable[[EmailBlock, List[RenderWarning]], str]] = {
    "greeting":       render_paragraph,
    "text":           render_paragraph,
    "heading":        render_heading,
    "button":         render_button,
    "details-table":  render_details_table,
    "amount-display": render_amount,
    "numbered-list":  render_numbered_list,
    "footer":         render_footer,
    **{kind: render_box for kind in BOX_KINDS},
}


def render_block(block: EmailBlock, warnings: Optional[List[RenderWarning]] = None) -> str:
    """Fragment HTML d'un bloc ("" pour un kind inconnu)."""
    if warnings is None:
        warnings = []
    renderer = _RENDERERS.get(block.kind)
    if renderer is None:
        log.warning("Bloc ignoré : kind inconnu %r (id=%s)", block.kind, block.id)
        warnings.append(RenderWarning(
            code="unknown_kind",
            message=f"kind {block.kind!r} non supporté, bloc ignoré",
            block_id=block.id,
            kind=block.kind,
        ))
        return ""
    return renderer(block, warnings)


# ── Document ────────────────────────────────────────────────────────────────

def _header_color(template: VisualTemplate, warnings: List[RenderWarning]) -> str:
    color = (template.header_color or "").strip()
    if HEADER_COLOR_RE.match(color):
        return color
    warnings.append(RenderWarning(
        code="invalid_header_color",
        message=f"couleur {template.header_color!r} → {settings.DEFAULT_COLOR}",
    ))
    return settings.DEFAULT_COLOR


def render_email_with_warnings(template: VisualTemplate) -> RenderResult:
    """Rend le document et retourne aussi la liste des dégradations appliquées."""
    warnings: List[RenderWarning] = []
    color = _header_color(template, warnings)
    title = _text(template.header_title.strip() or settings.DEFAULT_TITLE)
    width = settings.CONTENT_WIDTH

    body_parts: List[str] = []
    footer_parts: List[str] = []
    for block in template.blocks:
        fragment = render_block(block, warnings)
        if not fragment:
            continue
        (footer_parts if block.kind == "footer" else body_parts).append(fragment)

    body = "\n".join(body_parts)
    footer_row = ""
    if footer_parts:
        footer_row = f"""
          <tr>
            <td style="text-align:center;padding:20px;color:{st.MUTED_COLOR};font-size:14px;border-top:1px solid {st.BORDER_COLOR};">
{"".join(footer_parts)}
            </td>
          </tr>"""

    document = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
</head>
<body style="margin:0;padding:0;background-color:{st.PAGE_BG};">
  <table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0" style="background-color:{st.PAGE_BG};">
    <tr>
      <td align="center" style="padding:20px 0;">
        <table role="presentation" width="{width}" cellpadding="0" cellspacing="0" border="0" style="width:{width}px;max-width:{width}px;background-color:{st.CARD_BG};font-family:{st.FONT_STACK};line-height:1.6;color:{st.TEXT_COLOR};">
          <tr>
            <td style="background-color:{color};color:#ffffff;padding:30px 20px;text-align:center;border-radius:8px 8px 0 0;">
              <h1 style="margin:0;font-size:24px;">{title}</h1>
            </td>
          </tr>
          <tr>
            <td style="padding:30px 20px;">
{body}
            </td>
          </tr>{footer_row}
        </table>
      </td>
    </tr>
  </table>
</body>
</html>"""
    return RenderResult(html=document, warnings=warnings)


def render_email(template: VisualTemplate) -> str:
    """Document HTML complet, déterministe, pour sauvegarde ou aperçu."""
    return render_email_with_warnings(template).html
