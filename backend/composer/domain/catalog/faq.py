from ..sections.types import PropField, SectionDefinition

_ITEM_FIELDS = [
    PropField("question", "Question", "text", required=True),
    PropField("answer", "Answer", "textarea", required=True),
]

_SCHEMA = [
    PropField("heading", "Heading", "text"),
    PropField("subheading", "Sub-heading", "textarea"),
    PropField("items", "FAQ Items", "items", item_fields=_ITEM_FIELDS),
]

_DEFAULTS = {
    "heading": "Frequently Asked Questions",
    "subheading": "Find answers to the most common questions about our platform.",
    "items": [
        {
            "question": "How do I get started with the platform?",
            "answer": (
                "Getting started is easy. Simply create an account, choose a plan "
                "that fits your needs, and follow our step-by-step onboarding guide."
            ),
        },
        {
            "question": "Can I try it for free before committing?",
            "answer": (
                "Absolutely! We offer a 14-day free trial with full access to all "
                "features. No credit card required."
            ),
        },
        {
            "question": "Can I cancel my subscription at any time?",
            "answer": (
                "Yes, you can cancel your subscription at any time from your "
                "account settings. There are no cancellation fees."
            ),
        },
    ],
}

SECTIONS = [
    SectionDefinition(
        id="faq-001",
        category="faq",
        name="Accordion",
        description="Expandable accordion FAQ with details/summary toggle interaction.",
        tags=["faq", "accordion", "expandable", "toggle"],
        default_props=_DEFAULTS,
        props_schema=_SCHEMA,
    ),
    SectionDefinition(
        id="faq-002",
        category="faq",
        name="Two Column",
        description="Questions displayed side by side in a two-column layout.",
        tags=["faq", "two-column", "grid", "side-by-side"],
        default_props=_DEFAULTS,
        props_schema=_SCHEMA,
    ),
    SectionDefinition(
        id="faq-003",
        category="faq",
        name="Searchable",
        description="FAQ with a visual search input above accordion questions.",
        tags=["faq", "search", "filter", "input"],
        default_props=_DEFAULTS,
        props_schema=_SCHEMA,
    ),
]
