from ..sections.types import PropField, SectionDefinition

_PLAN_FIELDS = [
    PropField("name", "Plan Name", "text", required=True),
    PropField("price", "Price", "text", required=True),
    PropField("period", "Period", "text"),
    PropField("description", "Plan Description", "textarea"),
    PropField("features", "Features (comma separated)", "textarea"),
    PropField("buttonText", "Button Text", "text"),
    PropField("buttonUrl", "Button URL", "url"),
    PropField("highlighted", "Highlighted", "toggle"),
]

SECTIONS = [
    SectionDefinition(
        id="pricing-001",
        category="pricing",
        name="Two Tier",
        description="Two pricing columns side by side",
        tags=["pricing", "two-tier", "simple", "plans"],
        default_props={
            "heading": "Simple, transparent pricing",
            "description": "Choose the plan that works best for you.",
            "items": [
                {
                    "name": "Starter",
                    "price": "$9",
                    "period": "/month",
                    "description": "Perfect for individuals just getting started.",
                    "features": ["5 projects", "10GB storage", "Email support", "Basic analytics"],
                    "buttonText": "Get Started",
                    "buttonUrl": "#",
                    "highlighted": False,
                },
                {
                    "name": "Pro",
                    "price": "$29",
                    "period": "/month",
                    "description": "For professionals who need more power.",
                    "features": [
                        "Unlimited projects",
                        "100GB storage",
                        "Priority support",
                        "Advanced analytics",
                        "Custom domain",
                        "API access",
                    ],
                    "buttonText": "Go Pro",
                    "buttonUrl": "#",
                    "highlighted": True,
                },
            ],
        },
        props_schema=[
            PropField("heading", "Heading", "text", required=True),
            PropField("description", "Description", "textarea"),
            PropField("items", "Plans", "items", item_fields=_PLAN_FIELDS),
        ],
    ),
]
