from flask import current_app

from composer.domain.catalog import PACKS, TEMPLATES
from composer.domain.composition.templates import TemplateCatalog
from composer.domain.sections.registry import SectionRegistry, build_registry

REGISTRY_KEY = "composer.registry"
TEMPLATES_KEY = "composer.templates"
AI_TRANSPORT_KEY = "composer.ai_transport"


def init_catalog(app, packs=PACKS, templates=TEMPLATES):
    """
    Build the section registry and template catalog once, before the first
    request. Nothing registers sections at import time.
    """
    registry = build_registry(
        packs,
        duplicate_policy=app.config.get("SECTION_DUPLICATE_POLICY", "overwrite"),
    )

    app.extensions[REGISTRY_KEY] = registry
    app.extensions[TEMPLATES_KEY] = TemplateCatalog(templates)

    app.logger.info(
        "Catalog ready: %d sections, %d page templates",
        len(registry),
        len(app.extensions[TEMPLATES_KEY]),
    )


def current_registry() -> SectionRegistry:
    return current_app.extensions[REGISTRY_KEY]


def current_templates() -> TemplateCatalog:
    return current_app.extensions[TEMPLATES_KEY]


def current_transport():
    return current_app.extensions.get(AI_TRANSPORT_KEY)
