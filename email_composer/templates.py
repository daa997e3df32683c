"""
Flux template : sauvegarde, aperçu, traitement à l'envoi.

    compile_template()  → valide, rend le HTML, extrait available_variables
    preview()           → rend + substitue les valeurs d'exemple (sujet + HTML)
    process_record()    → substitue les vraies données dans un enregistrement actif
"""
import logging
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .blocks.base import VisualTemplate, empty_template
from .blocks.validation import ensure_valid
from .catalog.variables import SAMPLE_VALUES
from .core.errors import TemplateIncomplete
from .core.placeholders import extract_ordered, substitute
from .records import EmailTemplateRecord, TemplateCategory
from .renderer.html import render_email

log = logging.getLogger(__name__)


class CompiledTemplate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    html_content: str
    available_variables: List[str]


class EmailPreview(BaseModel):
    subject: str
    html: str


class ProcessedEmail(BaseModel):
    slug: str
    subject: str
    html: str


# ── Sauvegarde ──────────────────────────────────────────────────────────────

def compile_template(subject: str, visual: VisualTemplate) -> CompiledTemplate:
    """
    Prépare un template pour la sauvegarde.

    Refuse (TemplateIncomplete) un sujet vide ou une liste de blocs vide, lève
    le premier InvalidBlock sinon. Pas de sauvegarde partielle.
    """
    if not (subject or "").strip():
        raise TemplateIncomplete("subject")
    if not visual.blocks:
        raise TemplateIncomplete("blocks")
    ensure_valid(visual)

    html_content = render_email(visual)
    variables = extract_ordered(subject, html_content)
    log.debug("Template compilé : %d blocs, variables=%s", len(visual.blocks), variables)
    return CompiledTemplate(html_content=html_content, available_variables=variables)


def build_record(
    slug: str,
    subject: str,
    visual: VisualTemplate,
    name: str = "",
    category: TemplateCategory = "system",
    description: Optional[str] = None,
    is_active: bool = True,
    is_system: bool = False,
) -> EmailTemplateRecord:
    """Enregistrement prêt à persister (HTML compilé + variables dérivées)."""
    compiled = compile_template(subject, visual)
    log.info("Template %r prêt à sauvegarder (%d variables)", slug, len(compiled.available_variables))
    return EmailTemplateRecord(
        slug=slug,
        name=name,
        category=category,
        subject=subject,
        html_content=compiled.html_content,
        visual_data=visual,
        description=description,
        available_variables=compiled.available_variables,
        is_active=is_active,
        is_system=is_system,
    )


# ── Aperçu ──────────────────────────────────────────────────────────────────

def preview(
    subject: str,
    visual: VisualTemplate,
    values: Optional[Mapping[str, Any]] = None,
) -> EmailPreview:
    """Rendu + substitution des valeurs d'exemple dans le sujet et le HTML."""
    data = SAMPLE_VALUES if values is None else values
    return EmailPreview(
        subject=substitute(subject, data),
        html=substitute(render_email(visual), data),
    )


def preview_record(record: EmailTemplateRecord, values: Optional[Mapping[str, Any]] = None) -> EmailPreview:
    """Aperçu d'un enregistrement ; sans blocs, bandeau seul (jamais le HTML historique)."""
    visual = record.visual_data if record.visual_data is not None else empty_template()
    return preview(record.subject, visual, values)


# ── Envoi ───────────────────────────────────────────────────────────────────

def process_record(record: EmailTemplateRecord, data: Mapping[str, Any]) -> Optional[ProcessedEmail]:
    """
    Sujet + HTML avec les données réelles, à partir du HTML stocké.

    None si le template est inactif : l'appelant retombe sur son email par défaut.
    """
    if not record.is_active:
        log.info("Template %r inactif, ignoré", record.slug)
        return None
    return ProcessedEmail(
        slug=record.slug,
        subject=substitute(record.subject, data),
        html=substitute(record.html_content, data),
    )
