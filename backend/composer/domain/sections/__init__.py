from .types import (
    PropField,
    PropFieldType,
    SectionCategory,
    SectionDefinition,
    SelectOption,
    SECTION_CATEGORIES,
)
from .registry import (
    DuplicateSectionError,
    RegistryBuilder,
    SectionRegistry,
    build_registry,
)
