from composer.domain.sections.schema import blank_item
from composer.domain.sections.types import PropFieldType


def normalize_definition(definition, include_schema=True):
    data = {
        "id": definition.id,
        "category": definition.category.value,
        "name": definition.name,
        "description": definition.description,
        "tags": sorted(definition.tags),
    }

    if include_schema:
        data["defaultProps"] = dict(definition.default_props)
        data["propsSchema"] = [f.to_dict() for f in definition.props_schema]
        # rows the editor appends for each items field
        data["blankItems"] = {
            f.key: blank_item(f.item_fields)
            for f in definition.props_schema
            if f.type is PropFieldType.ITEMS
        }

    return data


def normalize_template(template, registry=None):
    data = {
        "id": template.id,
        "category": template.category.value,
        "name": template.name,
        "description": template.description,
        "tags": list(template.tags),
        "sections": [ref.to_dict() for ref in template.sections],
    }

    if registry is not None:
        # what the gallery preview lists; dangling refs are dropped on apply
        data["sectionLabels"] = [
            registry.label_for(ref.section_id)
            for ref in template.sections
            if ref.section_id in registry
        ]

    return data
