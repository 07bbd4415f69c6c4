from ..sections.types import PropField, SectionDefinition

_SCHEMA = [
    PropField("heading", "Heading", "text"),
    PropField("subheading", "Sub-heading", "textarea"),
    PropField(
        "items",
        "Testimonials",
        "items",
        item_fields=[
            PropField("name", "Name", "text", required=True),
            PropField("role", "Role", "text"),
            PropField("company", "Company", "text"),
            PropField("quote", "Quote", "textarea", required=True),
            PropField("avatar", "Avatar", "image"),
        ],
    ),
]

_DEFAULTS = {
    "heading": "Loved by teams everywhere",
    "subheading": "Here is what our customers have to say.",
    "items": [
        {
            "name": "Sarah Chen",
            "role": "Head of Marketing",
            "company": "Acme Corp",
            "quote": (
                "This platform completely transformed how we approach our "
                "marketing strategy."
            ),
        },
        {
            "name": "James Rodriguez",
            "role": "CEO",
            "company": "Startify",
            "quote": "We evaluated dozens of solutions before choosing this one. Best decision we ever made.",
        },
        {
            "name": "Emily Watson",
            "role": "Product Designer",
            "company": "DesignHub",
            "quote": "The intuitive interface and powerful features make my daily workflow so much smoother.",
        },
    ],
}

SECTIONS = [
    SectionDefinition(
        id="testimonials-001",
        category="testimonials",
        name="Carousel",
        description="Single testimonial carousel with navigation arrows and dot indicators.",
        tags=["testimonials", "carousel", "slider", "review"],
        default_props=_DEFAULTS,
        props_schema=_SCHEMA,
    ),
    SectionDefinition(
        id="testimonials-002",
        category="testimonials",
        name="Card Grid",
        description="Testimonial cards in a responsive three-column grid.",
        tags=["testimonials", "grid", "cards", "review"],
        default_props=_DEFAULTS,
        props_schema=_SCHEMA,
    ),
]
