from composer.domain.composition.document import decode_sections
from .section import normalize_section

def normalize_page(page, registry=None, include_sections=True):
    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "status": page.status,
        "template": page.template,
        "seo": page.seo or {},
        "created_at": page.created_at.isoformat() if page.created_at else None,
        "updated_at": page.updated_at.isoformat() if page.updated_at else None,
    }

    if include_sections:
        data["sections"] = [
            normalize_section(s, registry=registry)
            for s in decode_sections(page.sections)
        ]

    return data


def normalize_editor_state(state, registry=None):
    return {
        "sections": [normalize_section(s, registry=registry) for s in state.sections],
        "selection": state.selection,
    }
