from .state import EditorState, PageSection, generate_section_id
from .actions import (
    AddSection,
    ApplyAIPatch,
    ApplyTemplate,
    RemoveSection,
    ReorderSections,
    SelectSection,
    SetClasses,
    SetProps,
    action_from_dict,
)
from .templates import (
    PageTemplate,
    TemplateCatalog,
    TemplateCategory,
    TemplateSectionRef,
    expand_template,
)
from .store import CompositionStore, transition
from .document import decode_sections, encode_sections
