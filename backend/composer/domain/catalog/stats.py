from ..sections.types import PropField, SectionDefinition

_SCHEMA = [
    PropField("heading", "Heading", "text", required=True),
    PropField("subheading", "Sub-heading", "text"),
    PropField(
        "items",
        "Stats",
        "items",
        item_fields=[
            PropField("value", "Value", "text", required=True),
            PropField("label", "Label", "text", required=True),
        ],
    ),
]

_DEFAULTS = {
    "heading": "Our Impact in Numbers",
    "subheading": "Measurable results that speak for themselves",
    "items": [
        {"value": "10K+", "label": "Active Users"},
        {"value": "99.9%", "label": "Uptime"},
        {"value": "150+", "label": "Countries Served"},
        {"value": "4.9/5", "label": "Customer Rating"},
    ],
}

SECTIONS = [
    SectionDefinition(
        id="stats-001",
        category="stats",
        name="Stats Counter 4-Col",
        description="Four stat counters in a row with large indigo numbers",
        tags=["stats", "counter", "4-column", "numbers"],
        default_props=_DEFAULTS,
        props_schema=_SCHEMA,
    ),
    SectionDefinition(
        id="stats-002",
        category="stats",
        name="Stats Counter 3-Col",
        description="Three stat counters in white cards on gray background",
        tags=["stats", "counter", "3-column", "cards"],
        default_props=dict(_DEFAULTS, items=_DEFAULTS["items"][:3]),
        props_schema=_SCHEMA,
    ),
]
