"""
Component registry: the static catalog of element variants.

Each definition carries UI metadata, default attributes/styles and whether the
variant can hold children.
"""

import copy
from typing import Dict, List, Optional

from uiforge.logging_config import logger
from uiforge.schemas import ComponentDefinition, Node, StyleGroups

from .defaults import get_defaults

CATEGORIES = ("buttons", "cards", "navigation", "forms", "sections", "layout", "media", "text")

CATEGORY_METADATA: Dict[str, Dict[str, str]] = {
    "buttons": {"label": "Buttons", "icon": "MousePointer", "description": "Interactive button elements"},
    "cards": {"label": "Cards", "icon": "LayoutGrid", "description": "Content card containers"},
    "navigation": {"label": "Navigation", "icon": "Menu", "description": "Navigation and menu components"},
    "forms": {"label": "Forms", "icon": "FormInput", "description": "Form inputs and controls"},
    "sections": {"label": "Sections", "icon": "LayoutTemplate", "description": "Full-width page sections"},
    "layout": {"label": "Layout", "icon": "LayoutGrid", "description": "Structural layout components"},
    "media": {"label": "Media", "icon": "Image", "description": "Images, videos, and icons"},
    "text": {"label": "Text", "icon": "Type", "description": "Typography components"},
}


def _define(variant: str, name: str, category: str, icon: str, container: bool = False) -> ComponentDefinition:
    defaults = get_defaults(variant)
    return ComponentDefinition(
        variant=variant,
        name=name,
        category=category,
        icon=icon,
        default_attributes=defaults["attributes"],
        default_styles=StyleGroups(**defaults["styles"]),
        is_container=container,
        accepts_children=container,
    )


# (variant, name, category, icon, container)
_ENTRIES = [
    ("primary-button", "Primary Button", "buttons", "MousePointer", False),
    ("secondary-button", "Secondary Button", "buttons", "Square", False),
    ("outline-button", "Outline Button", "buttons", "SquareDashed", False),
    ("ghost-button", "Ghost Button", "buttons", "Ghost", False),
    ("icon-button", "Icon Button", "buttons", "CircleDot", False),
    ("loading-button", "Loading Button", "buttons", "Loader2", False),
    ("gradient-button", "Gradient Button", "buttons", "Sparkles", False),
    ("button-group", "Button Group", "buttons", "RectangleHorizontal", True),

    ("simple-card", "Simple Card", "cards", "Square", True),
    ("product-card", "Product Card", "cards", "ShoppingBag", False),
    ("pricing-card", "Pricing Card", "cards", "DollarSign", False),
    ("testimonial-card", "Testimonial Card", "cards", "Quote", False),
    ("profile-card", "Profile Card", "cards", "User", False),
    ("blog-card", "Blog Card", "cards", "FileText", False),
    ("stats-card", "Stats Card", "cards", "TrendingUp", False),
    ("feature-card", "Feature Card", "cards", "Zap", False),
    ("image-card", "Image Card", "cards", "ImageIcon", False),
    ("horizontal-card", "Horizontal Card", "cards", "RectangleHorizontal", False),

    ("navbar", "Navbar", "navigation", "Menu", True),
    ("mobile-menu", "Mobile Menu", "navigation", "MenuSquare", True),
    ("footer", "Footer", "navigation", "PanelBottom", True),
    ("breadcrumb", "Breadcrumb", "navigation", "ChevronRight", False),
    ("tabs", "Tabs", "navigation", "Layers", True),
    ("pagination", "Pagination", "navigation", "MoreHorizontal", False),

    ("input-field", "Input Field", "forms", "TextCursor", False),
    ("textarea", "Textarea", "forms", "AlignLeft", False),
    ("select-dropdown", "Select Dropdown", "forms", "ChevronDown", False),
    ("checkbox", "Checkbox", "forms", "CheckSquare", False),
    ("radio-group", "Radio Group", "forms", "Circle", False),
    ("toggle-switch", "Toggle Switch", "forms", "ToggleLeft", False),
    ("login-form", "Login Form", "forms", "LogIn", True),
    ("signup-form", "Signup Form", "forms", "UserPlus", True),
    ("contact-form", "Contact Form", "forms", "Mail", True),
    ("search-bar", "Search Bar", "forms", "Search", False),
    ("newsletter-form", "Newsletter Form", "forms", "Newspaper", False),
    ("file-upload", "File Upload", "forms", "Upload", False),

    ("hero-section", "Hero Section", "sections", "Sparkles", True),
    ("hero-with-image", "Hero with Image", "sections", "ImageIcon", True),
    ("feature-section", "Feature Section", "sections", "Grid3x3", True),
    ("cta-section", "CTA Section", "sections", "Megaphone", True),
    ("stats-section", "Stats Section", "sections", "BarChart3", True),
    ("testimonials-section", "Testimonials Section", "sections", "MessageSquareQuote", True),
    ("team-section", "Team Section", "sections", "Users", True),
    ("faq-section", "FAQ Section", "sections", "HelpCircle", True),
    ("pricing-section", "Pricing Section", "sections", "CreditCard", True),
    ("contact-section", "Contact Section", "sections", "Phone", True),

    ("container", "Container", "layout", "Box", True),
    ("grid-2-col", "2 Column Grid", "layout", "LayoutGrid", True),
    ("grid-3-col", "3 Column Grid", "layout", "Grid3x3", True),
    ("grid-4-col", "4 Column Grid", "layout", "LayoutGrid", True),
    ("flex-row", "Flex Row", "layout", "ArrowRightLeft", True),
    ("flex-column", "Flex Column", "layout", "ArrowUpDown", True),
    ("divider", "Divider", "layout", "Minus", False),
    ("spacer", "Spacer", "layout", "MoveVertical", False),

    ("image", "Image", "media", "Image", False),
    ("avatar", "Avatar", "media", "CircleUser", False),
    ("icon", "Icon", "media", "Star", False),
    ("video", "Video", "media", "Play", False),

    ("heading", "Heading", "text", "Heading", False),
    ("paragraph", "Paragraph", "text", "AlignLeft", False),
    ("badge", "Badge", "text", "Tag", False),
    ("link", "Link", "text", "Link2", False),
    ("list", "List", "text", "List", False),
]

REGISTRY: Dict[str, ComponentDefinition] = {
    entry[0]: _define(*entry) for entry in _ENTRIES
}


def get_definition(variant: str) -> Optional[ComponentDefinition]:
    return REGISTRY.get(variant)


def is_known_variant(variant: str) -> bool:
    return variant in REGISTRY


def list_components(category: Optional[str] = None) -> List[ComponentDefinition]:
    """All definitions in catalog order, optionally filtered by category."""
    if category is None:
        return list(REGISTRY.values())
    return [d for d in REGISTRY.values() if d.category == category]


def components_by_category() -> Dict[str, List[ComponentDefinition]]:
    return {category: list_components(category) for category in CATEGORIES}


def search_components(query: str) -> List[ComponentDefinition]:
    """Case-insensitive match on display name or variant; blank query returns everything."""
    needle = query.lower().strip()
    if not needle:
        return list_components()
    return [d for d in REGISTRY.values() if needle in d.name.lower() or needle in d.variant.lower()]


def container_variants() -> List[str]:
    return [d.variant for d in REGISTRY.values() if d.accepts_children]


def materialize(variant: str, display_name: Optional[str] = None) -> Node:
    """
    Build a brand-new node for a variant from its catalog defaults.

    The node has no id yet; the engine assigns one on insert. Unknown variants
    are materialised with empty defaults so the serializer's fallback applies.

    Args:
        variant: Variant tag
        display_name: Human label (defaults to the catalog name)

    Returns:
        Node ready to insert
    """
    definition = REGISTRY.get(variant)
    if definition is None:
        logger.warning(f"Variant '{variant}' is not in the catalog, using empty defaults")
        return Node(variant=variant, display_name=display_name or variant)

    return Node(
        variant=variant,
        display_name=display_name or definition.name,
        attributes=copy.deepcopy(definition.default_attributes),
        styles=definition.default_styles.model_copy(deep=True),
    )
