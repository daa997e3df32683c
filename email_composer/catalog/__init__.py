"""Catalogue : compositions par défaut, variables, types de notification."""
from .notification_types import CATEGORIES, NOTIFICATION_TYPE_SLUGS, slug_for_notification_type
from .registry import DefaultComposition, has_default, instantiate, list_compositions, lookup, reconcile
from .variables import SAMPLE_VALUES, VARIABLES, VariableDescriptor, variables_for_slug

__all__ = [
    # Registre
    "DefaultComposition", "has_default", "instantiate", "list_compositions", "lookup", "reconcile",
    # Variables
    "SAMPLE_VALUES", "VARIABLES", "VariableDescriptor", "variables_for_slug",
    # Types
    "CATEGORIES", "NOTIFICATION_TYPE_SLUGS", "slug_for_notification_type",
]
