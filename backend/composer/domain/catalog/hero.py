from ..sections.types import PropField, SectionDefinition

_BUTTON_FIELDS = [
    PropField("buttonText", "Primary Button Text", "text"),
    PropField("buttonUrl", "Primary Button URL", "url"),
]

_SECONDARY_BUTTON_FIELDS = [
    PropField("secondaryButtonText", "Secondary Button Text", "text"),
    PropField("secondaryButtonUrl", "Secondary Button URL", "url"),
]

SECTIONS = [
    SectionDefinition(
        id="hero-001",
        category="hero",
        name="Centered Hero",
        description="Clean centered hero with heading, subheading, and dual CTA buttons",
        tags=["centered", "clean", "minimal", "dual-cta"],
        default_props={
            "heading": "Build Something Amazing",
            "subheading": (
                "The all-in-one platform to launch, grow, and monetize your "
                "online business. No code required."
            ),
            "buttonText": "Get Started Free",
            "buttonUrl": "#",
            "secondaryButtonText": "See How It Works",
            "secondaryButtonUrl": "#",
        },
        props_schema=[
            PropField("heading", "Heading", "text"),
            PropField("subheading", "Subheading", "textarea"),
            *_BUTTON_FIELDS,
            *_SECONDARY_BUTTON_FIELDS,
        ],
    ),
    SectionDefinition(
        id="hero-002",
        category="hero",
        name="Split Image Right",
        description="Hero with text on the left and an image on the right",
        tags=["split", "image", "two-column"],
        default_props={
            "heading": "Grow Your Business Online",
            "subheading": (
                "Everything you need to build a thriving digital business, "
                "all in one place."
            ),
            "buttonText": "Start Building",
            "buttonUrl": "#",
            "image": "",
        },
        props_schema=[
            PropField("heading", "Heading", "text"),
            PropField("subheading", "Subheading", "textarea"),
            PropField("buttonText", "Button Text", "text"),
            PropField("buttonUrl", "Button URL", "url"),
            PropField("image", "Image", "image"),
        ],
    ),
    SectionDefinition(
        id="hero-003",
        category="hero",
        name="Split Image Left",
        description="Hero with an image on the left and text on the right",
        tags=["split", "image", "two-column", "reversed"],
        default_props={
            "heading": "Your Vision, Our Platform",
            "subheading": (
                "Create stunning websites, sell products, and build your "
                "community with powerful yet simple tools."
            ),
            "buttonText": "Get Started",
            "buttonUrl": "#",
            "secondaryButtonText": "Learn More",
            "secondaryButtonUrl": "#",
        },
        props_schema=[
            PropField("heading", "Heading", "text"),
            PropField("subheading", "Subheading", "textarea"),
            *_BUTTON_FIELDS,
            *_SECONDARY_BUTTON_FIELDS,
        ],
    ),
]
