"""
Modèle de blocs email : EmailBlock + VisualTemplate.

Kind fermé, properties ouvertes. Le kind est stocké en str pour qu'un bloc
inconnu (donnée corrompue ou version future) reste représentable : la
validation le signale, le renderer l'ignore.
"""
import uuid
from typing import Any, Dict, List, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..core import settings

BlockKind = Literal[
    "greeting",
    "heading",
    "text",
    "button",
    "success-box",
    "info-box",
    "warning-box",
    "error-box",
    "details-table",
    "amount-display",
    "numbered-list",
    "footer",
]

BLOCK_KINDS: tuple = get_args(BlockKind)
BOX_KINDS: tuple = ("success-box", "info-box", "warning-box", "error-box")


def generate_block_id() -> str:
    return f"block-{uuid.uuid4().hex[:12]}"


def is_known_kind(kind: str) -> bool:
    return kind in BLOCK_KINDS


class EmailBlock(BaseModel):
    """Une unité de contenu (paragraphe, bouton, encadré...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=generate_block_id)
    kind: str
    content: str = ""
    properties: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_type_key(cls, data: Any) -> Any:
        # visual_data historique : {"type": "greeting", ...}
        if isinstance(data, dict) and "kind" not in data and "type" in data:
            data = {**data, "kind": data["type"]}
            data.pop("type")
        return data

    def prop(self, key: str, default: str = "") -> str:
        """Valeur de propriété nettoyée (chaîne vide si absente)."""
        value = self.properties.get(key)
        return value.strip() if value else default


class VisualTemplate(BaseModel):
    """Composition : blocs ordonnés + bandeau (titre, couleur)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    blocks: List[EmailBlock] = Field(default_factory=list)
    header_title: str = settings.DEFAULT_TITLE
    header_color: str = settings.DEFAULT_COLOR

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    def block_ids(self) -> List[str]:
        return [b.id for b in self.blocks]


def empty_template() -> VisualTemplate:
    """Template vide explicite : aucun bloc, bandeau par défaut."""
    return VisualTemplate(
        blocks=[],
        header_title=settings.DEFAULT_TITLE,
        header_color=settings.DEFAULT_COLOR,
    )
