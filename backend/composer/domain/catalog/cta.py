from ..sections.types import PropField, SectionDefinition, SelectOption

SECTIONS = [
    SectionDefinition(
        id="cta-001",
        category="cta",
        name="Banner Simple",
        description="Simple centered CTA with heading and button",
        tags=["cta", "banner", "simple", "centered"],
        default_props={
            "heading": "Ready to get started?",
            "description": "Join thousands of creators already using our platform to grow their audience.",
            "buttonText": "Get Started Free",
            "buttonUrl": "#",
        },
        props_schema=[
            PropField("heading", "Heading", "text", required=True),
            PropField("description", "Description", "textarea"),
            PropField("buttonText", "Button Text", "text", required=True),
            PropField("buttonUrl", "Button URL", "url"),
        ],
    ),
    SectionDefinition(
        id="cta-002",
        category="cta",
        name="Banner Gradient",
        description="Full-width gradient CTA with a background color choice",
        tags=["cta", "banner", "gradient", "bold"],
        default_props={
            "heading": "Start building today",
            "description": "No credit card required. Cancel any time.",
            "buttonText": "Create Your Site",
            "buttonUrl": "#",
            "background": "violet",
        },
        props_schema=[
            PropField("heading", "Heading", "text", required=True),
            PropField("description", "Description", "textarea"),
            PropField("buttonText", "Button Text", "text", required=True),
            PropField("buttonUrl", "Button URL", "url"),
            PropField(
                "background",
                "Background",
                "select",
                options=[
                    SelectOption("Violet", "violet"),
                    SelectOption("Indigo", "indigo"),
                    SelectOption("Slate", "slate"),
                ],
            ),
        ],
    ),
]
