from ..sections.types import PropField, SectionDefinition

_LINK_FIELDS = [
    PropField("label", "Label", "text"),
    PropField("url", "URL", "url"),
]

_LINKS = [
    {"label": "Home", "url": "/"},
    {"label": "Features", "url": "/features"},
    {"label": "Pricing", "url": "/pricing"},
    {"label": "About", "url": "/about"},
    {"label": "Contact", "url": "/contact"},
]

SECTIONS = [
    SectionDefinition(
        id="header-001",
        category="header",
        name="Transparent",
        description="Transparent header that overlays content",
        tags=["header", "transparent", "overlay", "navigation"],
        default_props={
            "logo": "GritCMS",
            "links": _LINKS,
            "ctaText": "Get Started",
            "ctaUrl": "/signup",
        },
        props_schema=[
            PropField("logo", "Logo Text", "text"),
            PropField("links", "Navigation Links", "items", item_fields=_LINK_FIELDS),
            PropField("ctaText", "CTA Button Text", "text"),
            PropField("ctaUrl", "CTA Button URL", "url"),
        ],
    ),
    SectionDefinition(
        id="header-002",
        category="header",
        name="Sticky Solid",
        description="Solid header that sticks to the top while scrolling",
        tags=["header", "sticky", "solid", "navigation"],
        default_props={
            "logo": "GritCMS",
            "links": _LINKS[:4],
            "sticky": True,
        },
        props_schema=[
            PropField("logo", "Logo Text", "text"),
            PropField("links", "Navigation Links", "items", item_fields=_LINK_FIELDS),
            PropField("sticky", "Sticky", "toggle"),
        ],
    ),
]
