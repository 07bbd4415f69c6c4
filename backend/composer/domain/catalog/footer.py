from ..sections.types import PropField, SectionDefinition

SECTIONS = [
    SectionDefinition(
        id="footer-001",
        category="footer",
        name="Simple Links",
        description="Single-row footer with logo, links and copyright",
        tags=["footer", "simple", "links", "copyright"],
        default_props={
            "logo": "GritCMS",
            "description": "Building the future of creator tools, one feature at a time.",
            "copyright": "2026 GritCMS. All rights reserved.",
            "links": [
                {"label": "Privacy Policy", "url": "/privacy"},
                {"label": "Terms of Service", "url": "/terms"},
                {"label": "Contact", "url": "/contact"},
            ],
        },
        props_schema=[
            PropField("logo", "Logo Text", "text"),
            PropField("description", "Description", "textarea"),
            PropField("copyright", "Copyright", "text"),
            PropField(
                "links",
                "Links",
                "items",
                item_fields=[
                    PropField("label", "Label", "text"),
                    PropField("url", "URL", "url"),
                ],
            ),
        ],
    ),
]
