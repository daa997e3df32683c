"""
Registre des compositions par défaut : lookup / instantiate / reconcile.

Construit une seule fois à l'import depuis DEFAULT_COMPOSITIONS, exposé en
lecture seule (MappingProxyType). Aucune écriture à l'exécution.
"""
import logging
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..blocks.base import EmailBlock, VisualTemplate, empty_template, generate_block_id
from ..records import EmailTemplateRecord, TemplateCategory
from .defaults import DEFAULT_COMPOSITIONS

log = logging.getLogger(__name__)


class DefaultComposition(BaseModel):
    """Composition canonique d'un slug. Ne jamais éditer : passer par instantiate()."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    slug: str
    name: str
    category: TemplateCategory
    header_title: str
    header_color: str
    subject: str
    blocks: Tuple[EmailBlock, ...]

    def to_visual(self) -> VisualTemplate:
        """Copie profonde, chaque bloc reçoit un id neuf."""
        return VisualTemplate(
            blocks=[b.model_copy(deep=True, update={"id": generate_block_id()}) for b in self.blocks],
            header_title=self.header_title,
            header_color=self.header_color,
        )


def _build_block(slug: str, index: int, row: tuple) -> EmailBlock:
    kind, content = row[0], row[1]
    properties = dict(row[2]) if len(row) > 2 else {}
    return EmailBlock(id=f"{slug}-{index}", kind=kind, content=content, properties=properties)


def _build_registry() -> Mapping[str, DefaultComposition]:
    registry = {}
    for entry in DEFAULT_COMPOSITIONS:
        slug = entry["slug"]
        if slug in registry:
            raise ValueError(f"Slug dupliqué dans le catalogue : {slug!r}")
        registry[slug] = DefaultComposition(
            slug=slug,
            name=entry["name"],
            category=entry["category"],
            header_title=entry["header_title"],
            header_color=entry["header_color"],
            subject=entry["subject"],
            blocks=tuple(_build_block(slug, i, row) for i, row in enumerate(entry["blocks"], 1)),
        )
    log.info("Catalogue email chargé : %d compositions", len(registry))
    return MappingProxyType(registry)


_REGISTRY: Mapping[str, DefaultComposition] = _build_registry()


# ── API publique ────────────────────────────────────────────────────────────

def lookup(slug: str) -> Optional[DefaultComposition]:
    """Copie profonde de la composition : l'entrée du registre n'est jamais exposée."""
    composition = _REGISTRY.get(slug)
    return composition.model_copy(deep=True) if composition is not None else None


def has_default(slug: str) -> bool:
    return slug in _REGISTRY


def list_compositions() -> List[DefaultComposition]:
    return [c.model_copy(deep=True) for c in _REGISTRY.values()]


def instantiate(slug: str) -> VisualTemplate:
    """Nouveau template pour un slug : copie du défaut (ids neufs), sinon template vide."""
    composition = _REGISTRY.get(slug)
    if composition is None:
        log.debug("Pas de composition par défaut pour %r, template vide", slug)
        return empty_template()
    return composition.to_visual()


def reconcile(record: EmailTemplateRecord) -> VisualTemplate:
    """
    Vue en blocs d'un enregistrement persisté.

    Avec visual_data : copie de ses propres blocs. Sans (historique, HTML seul) :
    on repart de la composition par défaut du slug. Le HTML n'est jamais
    reparsé en blocs.
    """
    if record.visual_data is not None:
        return record.visual_data.model_copy(deep=True)
    log.info("Template historique %r sans blocs : reprise depuis la composition par défaut", record.slug)
    return instantiate(record.slug)
