from ..sections.types import PropField, SectionDefinition

_HEADING_FIELDS = [
    PropField("heading", "Heading", "text", required=True),
    PropField("subheading", "Subheading", "textarea"),
]

_BASIC_ITEM_FIELDS = [
    PropField("title", "Title", "text"),
    PropField("description", "Description", "textarea"),
]

_ICON_ITEM_FIELDS = [
    *_BASIC_ITEM_FIELDS,
    PropField("icon", "Icon", "text"),
]

_FEATURES_3 = [
    {
        "title": "Fast Performance",
        "description": "Lightning-fast load times ensure your visitors never wait. Optimized for speed at every layer.",
    },
    {
        "title": "Easy to Use",
        "description": "An intuitive interface that anyone on your team can master in minutes, not hours.",
    },
    {
        "title": "Secure by Default",
        "description": "Enterprise-grade security with encryption, backups, and compliance built right in.",
    },
]

_FEATURES_4 = _FEATURES_3 + [
    {
        "title": "24/7 Support",
        "description": "Our dedicated support team is always ready to help you succeed, around the clock.",
    },
]

SECTIONS = [
    SectionDefinition(
        id="features-001",
        category="features",
        name="Icon Grid 3-Col",
        description="Three-column grid with icon placeholders, titles, and descriptions.",
        tags=["features", "grid", "icons", "three-column", "minimal"],
        default_props={
            "heading": "Everything you need",
            "subheading": "Our platform provides all the tools you need to build, launch, and grow.",
            "items": _FEATURES_3,
        },
        props_schema=[
            *_HEADING_FIELDS,
            PropField("items", "Features", "items", item_fields=_BASIC_ITEM_FIELDS),
        ],
    ),
    SectionDefinition(
        id="features-002",
        category="features",
        name="Icon Cards 4-Col",
        description="Four feature cards with named icons on a light background.",
        tags=["features", "cards", "icons", "four-column"],
        default_props={
            "heading": "Why teams choose us",
            "subheading": "Built for speed, designed for people.",
            "items": [dict(item, icon="sparkles") for item in _FEATURES_4],
        },
        props_schema=[
            *_HEADING_FIELDS,
            PropField("items", "Features", "items", item_fields=_ICON_ITEM_FIELDS),
        ],
    ),
]
