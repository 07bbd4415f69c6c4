from ..sections.types import PropField, SectionDefinition

_SCHEMA = [
    PropField("heading", "Heading", "text", required=True),
    PropField("subheading", "Subheading", "textarea"),
    PropField("buttonText", "Button Text", "text"),
    PropField("placeholder", "Input Placeholder", "text", placeholder="you@example.com"),
]

SECTIONS = [
    SectionDefinition(
        id="newsletter-001",
        category="newsletter",
        name="Newsletter Inline Simple",
        description="Simple centered newsletter signup with inline email input and button.",
        tags=["newsletter", "inline", "simple", "email", "signup"],
        default_props={
            "heading": "Stay in the loop",
            "subheading": "Get the latest updates delivered straight to your inbox.",
            "buttonText": "Subscribe",
            "placeholder": "Enter your email",
        },
        props_schema=_SCHEMA,
    ),
]
