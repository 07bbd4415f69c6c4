from composer.domain.composition.document import encode_section
from composer.domain.sections.schema import validate_props


def normalize_section(section, registry=None):
    data = encode_section(section)

    if registry is not None:
        definition = registry.get_by_id(section.section_id)
        data["label"] = registry.label_for(section.section_id)
        data["missing"] = definition is None
        data["issues"] = validate_props(definition, section.props) if definition else []

    return data


def normalize_rendered_section(rendered):
    return {
        "id": rendered.id,
        "sectionId": rendered.section_id,
        "missing": rendered.missing,
        "output": rendered.output,
    }
