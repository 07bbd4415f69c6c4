from . import banner, cta, faq, features, footer, header, hero, newsletter, pricing, stats, testimonials
from .templates import TEMPLATES

# Registration order of the picker
PACKS = (
    hero.SECTIONS,
    features.SECTIONS,
    cta.SECTIONS,
    pricing.SECTIONS,
    testimonials.SECTIONS,
    faq.SECTIONS,
    stats.SECTIONS,
    footer.SECTIONS,
    header.SECTIONS,
    newsletter.SECTIONS,
    banner.SECTIONS,
)
