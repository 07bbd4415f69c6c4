from ..composition.templates import PageTemplate, TemplateSectionRef as Ref

TEMPLATES = [
    PageTemplate(
        id="blank",
        category="landing",
        name="Blank Page",
        description="Start from an empty page",
        tags=["blank", "empty"],
        sections=[],
    ),
    PageTemplate(
        id="saas-launch",
        category="saas",
        name="SaaS Launch",
        description="Product launch page with features, pricing and FAQ",
        tags=["saas", "launch", "product", "pricing"],
        sections=[
            Ref("header-001"),
            Ref(
                "hero-001",
                {
                    "heading": "Ship Your Product Faster",
                    "buttonText": "Start Free Trial",
                },
            ),
            Ref("features-001"),
            Ref("stats-001"),
            Ref("pricing-001"),
            Ref("faq-001"),
            Ref("cta-001"),
            Ref("footer-001"),
        ],
    ),
    PageTemplate(
        id="coach-home",
        category="coach",
        name="Coach Home",
        description="Personal brand page for coaches and consultants",
        tags=["coach", "consultant", "personal", "testimonials"],
        sections=[
            Ref("header-002"),
            Ref(
                "hero-002",
                {
                    "heading": "Unlock Your Next Level",
                    "subheading": "One-on-one coaching built around your goals.",
                    "buttonText": "Book a Call",
                },
            ),
            Ref("testimonials-002"),
            Ref("newsletter-001"),
            Ref("footer-001"),
        ],
    ),
    PageTemplate(
        id="launch-promo",
        category="landing",
        name="Launch Promo",
        description="Short promotional landing page with a sale banner",
        tags=["landing", "promo", "sale"],
        sections=[
            Ref("banner-002"),
            Ref("hero-003"),
            Ref("cta-002"),
        ],
    ),
]
