"""
Router FastAPI : endpoints email_composer.

POST /email-templates/render                 → VisualTemplate → HTMLResponse
POST /email-templates/validate               → {"valid": bool, "errors": [...]}
POST /email-templates/preview                → {"subject", "html"} avec valeurs d'exemple
POST /email-templates/compile                → {"htmlContent", "availableVariables"} (422 si incomplet)
POST /email-templates/reconcile              → EmailTemplateRecord → VisualTemplate
GET  /email-templates/catalog                → compositions par défaut
GET  /email-templates/catalog/{slug}         → nouvelle instance pour un slug
GET  /email-templates/variables              → descripteurs de variables (?slug=)
GET  /email-templates/blocks                 → palette des kinds (définitions)
POST /email-templates/blocks/{kind}          → nouveau bloc avec valeurs par défaut
GET  /email-templates/notification-types/{t} → slug associé à un type
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .blocks.base import VisualTemplate
from .blocks.definitions import BLOCK_DEFINITIONS, new_block
from .blocks.validation import validate_template
from .catalog import (
    CATEGORIES,
    instantiate,
    list_compositions,
    lookup,
    reconcile,
    slug_for_notification_type,
    variables_for_slug,
)
from .core.errors import EmailComposerError
from .records import EmailTemplateRecord
from .renderer.html import render_email_with_warnings
from .templates import compile_template, preview

router = APIRouter(prefix="/email-templates", tags=["email_templates"])


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompileRequest(_CamelModel):
    subject: str = ""
    visual_data: VisualTemplate


class PreviewRequest(CompileRequest):
    values: Optional[Dict[str, Any]] = Field(default=None, description="Valeurs ; défaut = SAMPLE_VALUES")


@router.post("/render", response_class=HTMLResponse, summary="Rend un template visuel en HTML")
def render(template: VisualTemplate) -> HTMLResponse:
    result = render_email_with_warnings(template)
    headers = {"X-Render-Warnings": str(len(result.warnings))}
    return HTMLResponse(content=result.html, headers=headers)


@router.post("/validate", summary="Valide les blocs sans sauvegarder")
def validate(template: VisualTemplate) -> dict:
    errors = validate_template(template)
    warnings = render_email_with_warnings(template).warnings
    return {
        "valid": not errors,
        "errors": [e.to_dict() for e in errors],
        "warnings": [w.model_dump() for w in warnings],
    }


@router.post("/preview", summary="Aperçu avec données d'exemple")
def preview_template(req: PreviewRequest) -> dict:
    return preview(req.subject, req.visual_data, req.values).model_dump()


@router.post("/compile", summary="HTML + variables pour la sauvegarde")
def compile_(req: CompileRequest) -> dict:
    try:
        compiled = compile_template(req.subject, req.visual_data)
    except EmailComposerError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())
    return compiled.model_dump(by_alias=True)


@router.post("/reconcile", summary="Vue en blocs d'un enregistrement (historique compris)")
def reconcile_record(record: EmailTemplateRecord) -> dict:
    return reconcile(record).model_dump(by_alias=True)


@router.get("/catalog", summary="Compositions par défaut disponibles")
def catalog() -> dict:
    return {
        "categories": CATEGORIES,
        "templates": [
            {
                "slug":        c.slug,
                "name":        c.name,
                "category":    c.category,
                "subject":     c.subject,
                "headerTitle": c.header_title,
                "headerColor": c.header_color,
                "blockCount":  len(c.blocks),
            }
            for c in list_compositions()
        ],
    }


@router.get("/catalog/{slug}", summary="Nouvelle instance de la composition d'un slug")
def catalog_instance(slug: str) -> dict:
    composition = lookup(slug)
    return {
        "slug":       slug,
        "isDefault":  composition is not None,
        "subject":    composition.subject if composition else "",
        "visualData": instantiate(slug).model_dump(by_alias=True),
    }


@router.get("/variables", summary="Variables disponibles (globales ou par slug)")
def variables(slug: Optional[str] = None) -> dict:
    return {"variables": [v.model_dump(exclude_none=True) for v in variables_for_slug(slug)]}


@router.get("/notification-types/{notification_type}", summary="Slug associé à un type de notification")
def notification_type_slug(notification_type: str) -> dict:
    slug = slug_for_notification_type(notification_type)
    if slug is None:
        raise HTTPException(status_code=404, detail=f"Type '{notification_type}' sans template")
    return {"type": notification_type, "slug": slug}


@router.get("/blocks", summary="Palette des kinds de blocs")
def block_palette() -> dict:
    return {"blocks": [{"kind": kind, **definition} for kind, definition in BLOCK_DEFINITIONS.items()]}


@router.post("/blocks/{kind}", summary="Nouveau bloc pré-rempli pour un kind")
def create_block(kind: str) -> dict:
    try:
        block = new_block(kind)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return block.model_dump(by_alias=True)
