from ..sections.types import PropField, SectionDefinition, SelectOption

SECTIONS = [
    SectionDefinition(
        id="banner-001",
        category="banner",
        name="Announcement Top",
        description="Slim top announcement bar with text and link.",
        tags=["banner", "announcement", "top", "bar"],
        default_props={
            "text": "We just launched our brand-new course builder!",
            "linkText": "Learn more",
            "bgColor": "bg-indigo-600",
        },
        props_schema=[
            PropField("text", "Text", "text"),
            PropField("linkText", "Link Text", "text"),
            PropField(
                "bgColor",
                "Background Color",
                "select",
                options=[
                    SelectOption("Indigo", "bg-indigo-600"),
                    SelectOption("Green", "bg-green-600"),
                    SelectOption("Red", "bg-red-600"),
                    SelectOption("Gray", "bg-gray-900"),
                ],
            ),
        ],
    ),
    SectionDefinition(
        id="banner-002",
        category="banner",
        name="Promo Ribbon",
        description="Gradient promotional ribbon with badge and CTA button.",
        tags=["banner", "promo", "ribbon", "sale", "gradient"],
        default_props={
            "badge": "LIMITED TIME",
            "text": "Get 30% off all annual plans this week only.",
            "buttonText": "Claim Offer",
        },
        props_schema=[
            PropField("badge", "Badge", "text"),
            PropField("text", "Text", "text"),
            PropField("buttonText", "Button Text", "text"),
        ],
    ),
]
