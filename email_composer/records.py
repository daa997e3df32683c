"""
Enregistrement de template persisté, tel que le fournit la couche stockage.

Objet valeur uniquement : la persistance reste chez l'appelant.
`visual_data` est absent sur les enregistrements historiques (HTML seul).
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .blocks.base import VisualTemplate

TemplateCategory = Literal[
    "application", "payment", "offer", "company", "system", "moderation", "authentication",
]


class EmailTemplateRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    slug: str
    name: str = ""
    category: TemplateCategory = "system"
    subject: str = ""
    html_content: str = ""
    visual_data: Optional[VisualTemplate] = None
    description: Optional[str] = None
    available_variables: List[str] = Field(default_factory=list)
    is_active: bool = True
    is_system: bool = False

    @property
    def is_legacy(self) -> bool:
        """HTML compilé sans représentation en blocs."""
        return self.visual_data is None
