from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


class SectionCategory(str, Enum):
    HERO = "hero"
    FEATURES = "features"
    CTA = "cta"
    PRICING = "pricing"
    TESTIMONIALS = "testimonials"
    FAQ = "faq"
    TEAM = "team"
    GALLERY = "gallery"
    STATS = "stats"
    CONTACT = "contact"
    FOOTER = "footer"
    HEADER = "header"
    BLOG = "blog"
    LOGOS = "logos"
    NEWSLETTER = "newsletter"
    ECOMMERCE = "ecommerce"
    VIDEO = "video"
    ABOUT = "about"
    BANNER = "banner"
    DIVIDER = "divider"
    LIVE = "live"


class PropFieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    RICHTEXT = "richtext"
    IMAGE = "image"
    IMAGES = "images"
    COLOR = "color"
    SELECT = "select"
    TOGGLE = "toggle"
    URL = "url"
    NUMBER = "number"
    ITEMS = "items"


# Picker labels, in display order
SECTION_CATEGORIES: Tuple[Tuple[SectionCategory, str, str], ...] = (
    (SectionCategory.HERO, "Hero", "Hero sections with headlines and CTAs"),
    (SectionCategory.FEATURES, "Features", "Showcase features and services"),
    (SectionCategory.CTA, "Call to Action", "Drive user action"),
    (SectionCategory.PRICING, "Pricing", "Pricing tables and plans"),
    (SectionCategory.TESTIMONIALS, "Testimonials", "Customer reviews and quotes"),
    (SectionCategory.FAQ, "FAQ", "Frequently asked questions"),
    (SectionCategory.TEAM, "Team", "Team member profiles"),
    (SectionCategory.GALLERY, "Gallery", "Image galleries and portfolios"),
    (SectionCategory.STATS, "Stats", "Numbers and statistics"),
    (SectionCategory.CONTACT, "Contact", "Contact forms and info"),
    (SectionCategory.FOOTER, "Footer", "Page footers"),
    (SectionCategory.HEADER, "Header", "Navigation headers"),
    (SectionCategory.BLOG, "Blog", "Blog post layouts"),
    (SectionCategory.LOGOS, "Logos", "Client and partner logos"),
    (SectionCategory.NEWSLETTER, "Newsletter", "Email signup forms"),
    (SectionCategory.ECOMMERCE, "E-commerce", "Product displays"),
    (SectionCategory.VIDEO, "Video", "Video showcases"),
    (SectionCategory.ABOUT, "About", "About and story sections"),
    (SectionCategory.BANNER, "Banner", "Announcement banners"),
    (SectionCategory.DIVIDER, "Divider", "Visual section dividers"),
    (SectionCategory.LIVE, "Live Data", "Dynamic sections that display real data from your dashboard"),
)


@dataclass(frozen=True)
class SelectOption:
    label: str
    value: str


@dataclass(frozen=True)
class PropField:
    """
    One editable field of a section's props schema.

    Notes:
    - options only apply to SELECT fields
    - item_fields only apply to ITEMS fields, one level deep
    """

    key: str
    label: str
    type: PropFieldType
    required: bool = False
    placeholder: Optional[str] = None
    options: Tuple[SelectOption, ...] = ()
    item_fields: Tuple["PropField", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "type", PropFieldType(self.type))
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "item_fields", tuple(self.item_fields))

        for item_field in self.item_fields:
            if item_field.type is PropFieldType.ITEMS:
                raise ValueError(
                    f"Field '{self.key}' nests items field '{item_field.key}'; "
                    "only one level of items is supported"
                )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "type": self.type.value,
            "required": self.required,
        }
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        if self.options:
            data["options"] = [
                {"label": o.label, "value": o.value} for o in self.options
            ]
        if self.item_fields:
            data["itemFields"] = [f.to_dict() for f in self.item_fields]
        return data


@dataclass(frozen=True)
class SectionDefinition:
    """Immutable catalog entry describing one reusable section template."""

    id: str
    category: SectionCategory
    name: str
    description: str
    tags: frozenset = field(default_factory=frozenset)
    default_props: Mapping[str, Any] = field(default_factory=dict)
    props_schema: Tuple[PropField, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "category", SectionCategory(self.category))
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(
            self, "default_props", MappingProxyType(dict(self.default_props))
        )
        object.__setattr__(self, "props_schema", tuple(self.props_schema))

    def get_field(self, key: str) -> Optional[PropField]:
        for prop_field in self.props_schema:
            if prop_field.key == key:
                return prop_field
        return None
