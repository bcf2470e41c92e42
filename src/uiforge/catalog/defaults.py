"""
Default attributes and style groups per variant.

Styles are kept as plain dicts of bucket -> tokens; the registry turns them
into StyleGroups when building a ComponentDefinition.
"""

from typing import Any, Dict, List

PLACEHOLDER = "https://via.placeholder.com"


def _styles(**buckets: List[str]) -> Dict[str, Any]:
    return {
        "layout": buckets.get("layout", []),
        "spacing": buckets.get("spacing", []),
        "typography": buckets.get("typography", []),
        "colors": buckets.get("colors", []),
        "borders": buckets.get("borders", []),
        "effects": buckets.get("effects", []),
        "responsive": {"sm": [], "md": [], "lg": []},
    }


_BUTTON_BASE = ["inline-flex", "items-center", "justify-center"]
_CARD_BORDER = ["rounded-lg", "border", "border-gray-200"]
_FORM_CARD = dict(
    spacing=["p-8", "space-y-6"],
    colors=["bg-white"],
    borders=["rounded-xl", "border", "border-gray-200"],
    effects=["shadow-lg"],
)


DEFAULTS: Dict[str, Dict[str, Any]] = {
    # Buttons
    "primary-button": {
        "attributes": {"text": "Button", "href": ""},
        "styles": _styles(
            layout=_BUTTON_BASE,
            spacing=["px-4", "py-2"],
            typography=["text-sm", "font-medium"],
            colors=["bg-blue-600", "text-white", "hover:bg-blue-700"],
            borders=["rounded-md"],
            effects=["transition-colors", "focus:outline-none", "focus:ring-2",
                     "focus:ring-blue-500", "focus:ring-offset-2"],
        ),
    },
    "secondary-button": {
        "attributes": {"text": "Button", "href": ""},
        "styles": _styles(
            layout=_BUTTON_BASE,
            spacing=["px-4", "py-2"],
            typography=["text-sm", "font-medium"],
            colors=["bg-gray-200", "text-gray-900", "hover:bg-gray-300"],
            borders=["rounded-md"],
            effects=["transition-colors"],
        ),
    },
    "outline-button": {
        "attributes": {"text": "Button", "href": ""},
        "styles": _styles(
            layout=_BUTTON_BASE,
            spacing=["px-4", "py-2"],
            typography=["text-sm", "font-medium"],
            colors=["bg-transparent", "text-blue-600", "hover:bg-blue-50"],
            borders=["border", "border-blue-600", "rounded-md"],
            effects=["transition-colors"],
        ),
    },
    "ghost-button": {
        "attributes": {"text": "Button", "href": ""},
        "styles": _styles(
            layout=_BUTTON_BASE,
            spacing=["px-4", "py-2"],
            typography=["text-sm", "font-medium"],
            colors=["bg-transparent", "text-gray-700", "hover:bg-gray-100"],
            borders=["rounded-md"],
            effects=["transition-colors"],
        ),
    },
    "icon-button": {
        "attributes": {"icon": "Plus", "ariaLabel": "Icon button"},
        "styles": _styles(
            layout=_BUTTON_BASE,
            spacing=["p-2"],
            colors=["bg-gray-100", "text-gray-700", "hover:bg-gray-200"],
            borders=["rounded-md"],
            effects=["transition-colors"],
        ),
    },
    "loading-button": {
        "attributes": {"text": "Loading...", "isLoading": True},
        "styles": _styles(
            layout=_BUTTON_BASE,
            spacing=["px-4", "py-2", "gap-2"],
            typography=["text-sm", "font-medium"],
            colors=["bg-blue-600", "text-white"],
            borders=["rounded-md"],
            effects=["opacity-75", "cursor-not-allowed"],
        ),
    },
    "gradient-button": {
        "attributes": {"text": "Button", "href": ""},
        "styles": _styles(
            layout=_BUTTON_BASE,
            spacing=["px-6", "py-3"],
            typography=["text-sm", "font-semibold"],
            colors=["bg-gradient-to-r", "from-purple-600", "to-blue-600", "text-white",
                    "hover:from-purple-700", "hover:to-blue-700"],
            borders=["rounded-lg"],
            effects=["transition-all", "shadow-lg", "hover:shadow-xl"],
        ),
    },
    "button-group": {
        "attributes": {},
        "styles": _styles(
            layout=["inline-flex"],
            borders=["rounded-md", "overflow-hidden"],
            effects=["shadow-sm"],
        ),
    },

    # Cards
    "simple-card": {
        "attributes": {"title": "Card Title", "description": "Card description goes here."},
        "styles": _styles(
            layout=["w-full"],
            spacing=["p-6"],
            colors=["bg-white"],
            borders=_CARD_BORDER,
            effects=["shadow-sm"],
        ),
    },
    "product-card": {
        "attributes": {
            "image": f"{PLACEHOLDER}/300x200",
            "title": "Product Name",
            "price": "$99.00",
            "description": "Product description",
        },
        "styles": _styles(
            layout=["w-full", "max-w-sm", "overflow-hidden"],
            colors=["bg-white"],
            borders=_CARD_BORDER,
            effects=["shadow-sm", "hover:shadow-md", "transition-shadow"],
        ),
    },
    "pricing-card": {
        "attributes": {
            "tier": "Pro",
            "price": "$29",
            "period": "/month",
            "features": ["Feature 1", "Feature 2", "Feature 3"],
            "ctaText": "Get Started",
            "highlighted": False,
        },
        "styles": _styles(
            layout=["w-full", "max-w-sm"],
            spacing=["p-8"],
            colors=["bg-white"],
            borders=["rounded-xl", "border", "border-gray-200"],
            effects=["shadow-lg"],
        ),
    },
    "testimonial-card": {
        "attributes": {
            "quote": "This is an amazing product that has changed my life.",
            "author": "John Doe",
            "role": "CEO, Company",
            "avatar": f"{PLACEHOLDER}/48",
        },
        "styles": _styles(
            layout=["w-full"],
            spacing=["p-6"],
            colors=["bg-white"],
            borders=_CARD_BORDER,
            effects=["shadow-sm"],
        ),
    },
    "profile-card": {
        "attributes": {
            "name": "Jane Smith",
            "role": "Designer",
            "bio": "Creative designer with 5+ years of experience.",
            "avatar": f"{PLACEHOLDER}/96",
            "social": {"twitter": "#", "linkedin": "#"},
        },
        "styles": _styles(
            layout=["w-full", "max-w-sm"],
            spacing=["p-6"],
            colors=["bg-white"],
            borders=["rounded-xl", "border", "border-gray-200"],
            effects=["shadow-md"],
        ),
    },
    "blog-card": {
        "attributes": {
            "image": f"{PLACEHOLDER}/400x200",
            "date": "Dec 1, 2024",
            "title": "Blog Post Title",
            "excerpt": "A short excerpt from the blog post...",
        },
        "styles": _styles(
            layout=["w-full", "max-w-md", "overflow-hidden"],
            colors=["bg-white"],
            borders=_CARD_BORDER,
            effects=["shadow-sm", "hover:shadow-md", "transition-shadow"],
        ),
    },
    "stats-card": {
        "attributes": {"value": "100+", "label": "Happy Customers", "icon": "Users"},
        "styles": _styles(
            layout=["w-full"],
            spacing=["p-6"],
            colors=["bg-white"],
            borders=_CARD_BORDER,
            effects=["shadow-sm"],
        ),
    },
    "feature-card": {
        "attributes": {
            "icon": "Zap",
            "title": "Feature Title",
            "description": "Feature description goes here.",
        },
        "styles": _styles(
            layout=["w-full"],
            spacing=["p-6"],
            colors=["bg-white"],
            borders=_CARD_BORDER,
            effects=["shadow-sm"],
        ),
    },
    "image-card": {
        "attributes": {
            "image": f"{PLACEHOLDER}/400x300",
            "title": "Card Title",
            "subtitle": "Card subtitle",
        },
        "styles": _styles(
            layout=["w-full", "max-w-sm", "relative", "overflow-hidden"],
            borders=["rounded-xl"],
            effects=["shadow-lg"],
        ),
    },
    "horizontal-card": {
        "attributes": {
            "image": f"{PLACEHOLDER}/200x150",
            "title": "Card Title",
            "description": "Card description text goes here.",
        },
        "styles": _styles(
            layout=["w-full", "flex", "flex-col", "md:flex-row", "overflow-hidden"],
            colors=["bg-white"],
            borders=_CARD_BORDER,
            effects=["shadow-sm"],
        ),
    },

    # Navigation
    "navbar": {
        "attributes": {
            "logo": "Logo",
            "links": [
                {"text": "Home", "href": "#"},
                {"text": "About", "href": "#"},
                {"text": "Services", "href": "#"},
                {"text": "Contact", "href": "#"},
            ],
            "ctaText": "Get Started",
        },
        "styles": _styles(
            layout=["w-full", "flex", "items-center", "justify-between"],
            spacing=["px-6", "py-4"],
            colors=["bg-white"],
            borders=["border-b", "border-gray-200"],
        ),
    },
    "mobile-menu": {
        "attributes": {"isOpen": False},
        "styles": _styles(layout=["fixed", "inset-0", "z-50"], colors=["bg-white"]),
    },
    "footer": {
        "attributes": {
            "columns": [
                {"title": "Company", "links": ["About", "Careers", "Press"]},
                {"title": "Product", "links": ["Features", "Pricing", "FAQ"]},
                {"title": "Resources", "links": ["Blog", "Docs", "Support"]},
            ],
            "copyright": "© 2024 Company. All rights reserved.",
        },
        "styles": _styles(
            layout=["w-full"],
            spacing=["px-6", "py-12"],
            colors=["bg-gray-900", "text-white"],
        ),
    },
    "breadcrumb": {
        "attributes": {
            "items": [
                {"text": "Home", "href": "#"},
                {"text": "Products", "href": "#"},
                {"text": "Current Page"},
            ],
        },
        "styles": _styles(
            layout=["flex", "items-center"],
            spacing=["gap-2"],
            typography=["text-sm"],
            colors=["text-gray-600"],
        ),
    },
    "tabs": {
        "attributes": {"tabs": ["Tab 1", "Tab 2", "Tab 3"], "activeTab": 0},
        "styles": _styles(layout=["w-full"], borders=["border-b", "border-gray-200"]),
    },
    "pagination": {
        "attributes": {"currentPage": 1, "totalPages": 10},
        "styles": _styles(layout=["flex", "items-center", "justify-center"], spacing=["gap-2"]),
    },

    # Forms
    "input-field": {
        "attributes": {"label": "Label", "placeholder": "Enter text...", "helperText": ""},
        "styles": _styles(layout=["w-full"], spacing=["space-y-1"]),
    },
    "textarea": {
        "attributes": {"label": "Message", "placeholder": "Enter your message...", "rows": 4},
        "styles": _styles(layout=["w-full"], spacing=["space-y-1"]),
    },
    "select-dropdown": {
        "attributes": {"label": "Select an option", "options": ["Option 1", "Option 2", "Option 3"]},
        "styles": _styles(layout=["w-full"], spacing=["space-y-1"]),
    },
    "checkbox": {
        "attributes": {"label": "Check this box", "checked": False},
        "styles": _styles(layout=["flex", "items-center"], spacing=["gap-2"]),
    },
    "radio-group": {
        "attributes": {
            "label": "Choose an option",
            "options": ["Option A", "Option B", "Option C"],
            "selected": "Option A",
        },
        "styles": _styles(layout=["w-full"], spacing=["space-y-2"]),
    },
    "toggle-switch": {
        "attributes": {"label": "Enable feature", "enabled": False},
        "styles": _styles(layout=["flex", "items-center", "justify-between"]),
    },
    "login-form": {
        "attributes": {"title": "Sign In", "forgotPasswordLink": "#", "signupLink": "#"},
        "styles": _styles(layout=["w-full", "max-w-md"], **_FORM_CARD),
    },
    "signup-form": {
        "attributes": {"title": "Create Account", "loginLink": "#"},
        "styles": _styles(layout=["w-full", "max-w-md"], **_FORM_CARD),
    },
    "contact-form": {
        "attributes": {"title": "Contact Us", "submitText": "Send Message"},
        "styles": _styles(layout=["w-full", "max-w-lg"], **_FORM_CARD),
    },
    "search-bar": {
        "attributes": {"placeholder": "Search...", "buttonText": "Search"},
        "styles": _styles(
            layout=["w-full", "max-w-xl", "flex"],
            borders=["rounded-lg", "overflow-hidden", "border", "border-gray-300"],
        ),
    },
    "newsletter-form": {
        "attributes": {"placeholder": "Enter your email", "buttonText": "Subscribe"},
        "styles": _styles(layout=["w-full", "max-w-md", "flex"], spacing=["gap-2"]),
    },
    "file-upload": {
        "attributes": {"label": "Upload a file", "accept": "*"},
        "styles": _styles(
            layout=["w-full"],
            spacing=["p-6"],
            colors=["bg-gray-50"],
            borders=["border-2", "border-dashed", "border-gray-300", "rounded-lg"],
        ),
    },

    # Sections
    "hero-section": {
        "attributes": {
            "headline": "Build Something Amazing",
            "subtext": "Create beautiful websites with our easy-to-use drag and drop builder.",
            "ctaText": "Get Started",
            "ctaLink": "#",
        },
        "styles": _styles(layout=["w-full"], spacing=["py-24", "px-6"], colors=["bg-white"]),
    },
    "hero-with-image": {
        "attributes": {
            "headline": "Build Something Amazing",
            "subtext": "Create beautiful websites with our easy-to-use drag and drop builder.",
            "ctaText": "Get Started",
            "image": f"{PLACEHOLDER}/600x400",
        },
        "styles": _styles(
            layout=["w-full"],
            spacing=["py-24", "px-6"],
            colors=["bg-gradient-to-br", "from-blue-50", "to-indigo-100"],
        ),
    },
    "feature-section": {
        "attributes": {
            "title": "Our Features",
            "subtitle": "Everything you need to succeed",
            "features": [
                {"icon": "Zap", "title": "Fast", "description": "Lightning fast performance"},
                {"icon": "Shield", "title": "Secure", "description": "Enterprise-grade security"},
                {"icon": "Smile", "title": "Easy", "description": "Simple to use interface"},
            ],
        },
        "styles": _styles(layout=["w-full"], spacing=["py-24", "px-6"], colors=["bg-gray-50"]),
    },
    "cta-section": {
        "attributes": {
            "headline": "Ready to get started?",
            "description": "Join thousands of satisfied customers.",
            "ctaText": "Start Free Trial",
        },
        "styles": _styles(layout=["w-full"], spacing=["py-16", "px-6"], colors=["bg-blue-600", "text-white"]),
    },
    "stats-section": {
        "attributes": {
            "stats": [
                {"value": "10K+", "label": "Customers"},
                {"value": "99%", "label": "Satisfaction"},
                {"value": "24/7", "label": "Support"},
                {"value": "100+", "label": "Countries"},
            ],
        },
        "styles": _styles(layout=["w-full"], spacing=["py-16", "px-6"], colors=["bg-white"]),
    },
    "testimonials-section": {
        "attributes": {
            "title": "What Our Customers Say",
            "testimonials": [
                {"quote": "Amazing product!", "author": "John Doe", "role": "CEO"},
                {"quote": "Highly recommended!", "author": "Jane Smith", "role": "Designer"},
            ],
        },
        "styles": _styles(layout=["w-full"], spacing=["py-24", "px-6"], colors=["bg-gray-50"]),
    },
    "team-section": {
        "attributes": {
            "title": "Meet Our Team",
            "members": [
                {"name": "John Doe", "role": "CEO", "avatar": f"{PLACEHOLDER}/150"},
                {"name": "Jane Smith", "role": "CTO", "avatar": f"{PLACEHOLDER}/150"},
            ],
        },
        "styles": _styles(layout=["w-full"], spacing=["py-24", "px-6"], colors=["bg-white"]),
    },
    "faq-section": {
        "attributes": {
            "title": "Frequently Asked Questions",
            "faqs": [
                {"question": "What is this?", "answer": "This is an amazing product."},
                {"question": "How does it work?", "answer": "It works magically."},
            ],
        },
        "styles": _styles(layout=["w-full", "max-w-3xl", "mx-auto"], spacing=["py-24", "px-6"]),
    },
    "pricing-section": {
        "attributes": {
            "title": "Choose Your Plan",
            "plans": [
                {"tier": "Basic", "price": "$9", "features": ["Feature 1", "Feature 2"]},
                {"tier": "Pro", "price": "$29", "features": ["All Basic", "Feature 3", "Feature 4"],
                 "highlighted": True},
                {"tier": "Enterprise", "price": "$99", "features": ["All Pro", "Feature 5", "Feature 6"]},
            ],
        },
        "styles": _styles(layout=["w-full"], spacing=["py-24", "px-6"], colors=["bg-white"]),
    },
    "contact-section": {
        "attributes": {
            "title": "Get in Touch",
            "email": "contact@example.com",
            "phone": "+1 234 567 890",
            "address": "123 Main St, City, Country",
        },
        "styles": _styles(layout=["w-full"], spacing=["py-24", "px-6"], colors=["bg-gray-50"]),
    },

    # Layout
    "container": {
        "attributes": {},
        "styles": _styles(layout=["max-w-7xl", "mx-auto", "w-full"], spacing=["px-4", "sm:px-6", "lg:px-8"]),
    },
    "grid-2-col": {
        "attributes": {},
        "styles": _styles(layout=["grid", "grid-cols-1", "md:grid-cols-2"], spacing=["gap-6"]),
    },
    "grid-3-col": {
        "attributes": {},
        "styles": _styles(layout=["grid", "grid-cols-1", "md:grid-cols-2", "lg:grid-cols-3"], spacing=["gap-6"]),
    },
    "grid-4-col": {
        "attributes": {},
        "styles": _styles(layout=["grid", "grid-cols-1", "sm:grid-cols-2", "lg:grid-cols-4"], spacing=["gap-6"]),
    },
    "flex-row": {
        "attributes": {},
        "styles": _styles(layout=["flex", "flex-row", "flex-wrap", "items-center"], spacing=["gap-4"]),
    },
    "flex-column": {
        "attributes": {},
        "styles": _styles(layout=["flex", "flex-col"], spacing=["gap-4"]),
    },
    "divider": {
        "attributes": {},
        "styles": _styles(layout=["w-full"], spacing=["my-8"], borders=["border-t", "border-gray-200"]),
    },
    "spacer": {
        "attributes": {"size": "md"},
        "styles": _styles(layout=["w-full"], spacing=["h-16"]),
    },

    # Media
    "image": {
        "attributes": {"src": f"{PLACEHOLDER}/400x300", "alt": "Image"},
        "styles": _styles(layout=["w-full", "h-auto"], borders=["rounded-lg"]),
    },
    "avatar": {
        "attributes": {"src": f"{PLACEHOLDER}/48", "alt": "Avatar", "size": "md"},
        "styles": _styles(layout=["w-12", "h-12"], borders=["rounded-full"]),
    },
    "icon": {
        "attributes": {"name": "Star", "size": 24},
        "styles": _styles(colors=["text-gray-600"]),
    },
    "video": {
        "attributes": {"src": "https://www.youtube.com/embed/dQw4w9WgXcQ", "aspectRatio": "16/9"},
        "styles": _styles(layout=["w-full", "aspect-video"], borders=["rounded-lg", "overflow-hidden"]),
    },

    # Text
    "heading": {
        "attributes": {"text": "Heading Text", "level": "h2"},
        "styles": _styles(typography=["text-3xl", "font-bold"], colors=["text-gray-900"]),
    },
    "paragraph": {
        "attributes": {"text": "This is a paragraph of text. Add your content here."},
        "styles": _styles(typography=["text-base"], colors=["text-gray-600"], spacing=["leading-relaxed"]),
    },
    "badge": {
        "attributes": {"text": "Badge", "variant": "primary"},
        "styles": _styles(
            layout=["inline-flex", "items-center"],
            spacing=["px-2.5", "py-0.5"],
            typography=["text-xs", "font-medium"],
            colors=["bg-blue-100", "text-blue-800"],
            borders=["rounded-full"],
        ),
    },
    "link": {
        "attributes": {"text": "Click here", "href": "#"},
        "styles": _styles(
            typography=["text-base"],
            colors=["text-blue-600", "hover:text-blue-800"],
            effects=["underline", "cursor-pointer"],
        ),
    },
    "list": {
        "attributes": {"items": ["Item 1", "Item 2", "Item 3"], "ordered": False},
        "styles": _styles(layout=["list-disc", "list-inside"], spacing=["space-y-2"], colors=["text-gray-600"]),
    },
}


def get_defaults(variant: str) -> Dict[str, Any]:
    """Default attributes and styles for a variant (empty for unknown variants)."""
    return DEFAULTS.get(variant, {"attributes": {}, "styles": _styles()})
