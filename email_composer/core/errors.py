"""
Erreurs du composer : taxonomie InvalidBlock + TemplateIncomplete.

Le renderer ne lève jamais : ces erreurs sont produites à la validation
(avant sauvegarde) et remontées à l'auteur du template.
"""
from typing import Any, Dict


class EmailComposerError(Exception):
    """Erreur de base, porte un code stable + un contexte sérialisable."""

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, **self.context}


class InvalidBlock(EmailComposerError):
    """Bloc invalide : kind inconnu ou propriété requise absente."""

    def __init__(self, code: str, block_id: str, kind: str, **context: Any) -> None:
        self.block_id = block_id
        self.kind = kind
        super().__init__(code, block_id=block_id, kind=kind, **context)


class UnknownBlockKind(InvalidBlock):
    def __init__(self, block_id: str, kind: str) -> None:
        super().__init__(ErrorCodes.UNKNOWN_BLOCK_KIND, block_id, kind)


class MissingBlockProperty(InvalidBlock):
    def __init__(self, block_id: str, kind: str, prop: str) -> None:
        self.prop = prop
        super().__init__(ErrorCodes.MISSING_BLOCK_PROPERTY, block_id, kind, property=prop)


class TemplateIncomplete(EmailComposerError):
    """Champ requis manquant à la sauvegarde (subject, blocks)."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(ErrorCodes.TEMPLATE_INCOMPLETE, field=field)


class ErrorCodes:
    """Codes stables exposés aux appelants (API, UI)."""

    # === Validation blocs ===
    UNKNOWN_BLOCK_KIND     = "UNKNOWN_BLOCK_KIND"
    MISSING_BLOCK_PROPERTY = "MISSING_BLOCK_PROPERTY"

    # === Sauvegarde ===
    TEMPLATE_INCOMPLETE = "TEMPLATE_INCOMPLETE"
