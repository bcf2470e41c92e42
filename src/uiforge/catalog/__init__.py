"""
Catalog package: the static table of element variants and their defaults.
"""

from .registry import (
    CATEGORIES,
    CATEGORY_METADATA,
    REGISTRY,
    get_definition,
    is_known_variant,
    list_components,
    components_by_category,
    search_components,
    container_variants,
    materialize,
)
from .defaults import DEFAULTS, get_defaults

__all__ = [
    "CATEGORIES",
    "CATEGORY_METADATA",
    "REGISTRY",
    "get_definition",
    "is_known_variant",
    "list_components",
    "components_by_category",
    "search_components",
    "container_variants",
    "materialize",
    "DEFAULTS",
    "get_defaults",
]
