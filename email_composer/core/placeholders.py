"""
Placeholders {{identifier}} : extraction + substitution.

Syntaxe stricte : identifiant en caractères de mot uniquement (lettres,
chiffres, underscore). Pas d'accolades imbriquées, pas de valeur par défaut,
pas de chemin pointé. Tout ce qui ne matche pas est du texte inerte.
"""
import re
from typing import Any, Iterable, List, Mapping, Optional, Set

PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def format_placeholder(name: str) -> str:
    """"amount" → "{{amount}}"."""
    return "{{" + name + "}}"


def extract_variables(text: Optional[str]) -> Set[str]:
    """Ensemble des noms de variables présents dans le texte."""
    if not text:
        return set()
    return set(PLACEHOLDER_RE.findall(text))


def extract_ordered(*texts: Optional[str]) -> List[str]:
    """Noms distincts, dans l'ordre de première apparition sur les textes concaténés."""
    seen: List[str] = []
    for text in texts:
        if not text:
            continue
        for name in PLACEHOLDER_RE.findall(text):
            if name not in seen:
                seen.append(name)
    return seen


def _to_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def substitute(text: Optional[str], values: Optional[Mapping[str, Any]] = None) -> str:
    """
    Remplace chaque {{name}} par values[name].

    Les noms absents (ou à None) restent intacts : un placeholder non résolu
    doit rester visible. Une seule passe, le texte substitué n'est jamais
    re-scanné.
    """
    if not text:
        return text or ""
    if not values:
        return text

    def replacer(match: "re.Match[str]") -> str:
        value = values.get(match.group(1))
        if value is None:
            return match.group(0)
        return _to_text(value)

    return PLACEHOLDER_RE.sub(replacer, text)


def unresolved_variables(text: Optional[str], known: Iterable[str] = ()) -> Set[str]:
    """Variables restantes après substitution (hors noms `known`)."""
    return extract_variables(text) - set(known)
