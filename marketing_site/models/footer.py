"""
Footer models shared by every page of the site.
Records are frozen so a footer built at startup cannot be changed by a request.
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FooterModel(BaseModel):
    """Base for footer records (immutable, camelCase on the wire)"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SocialPlatform(str, Enum):
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    GITHUB = "github"


class FooterVariant(str, Enum):
    """Named footer presets available to the rendering layer"""
    DEFAULT = "default"
    MINIMAL = "minimal"  # 404 and other stripped-down pages


class FooterLink(FooterModel):
    label: str
    href: str = Field(..., min_length=1)


class FooterColumn(FooterModel):
    title: str
    links: Tuple[FooterLink, ...] = ()


class SocialLink(FooterModel):
    platform: SocialPlatform
    href: str = Field(..., min_length=1)
    icon: str


class FooterConfig(FooterModel):
    """Full footer content; `columns` order is the display order"""
    company_name: str
    tagline: str
    columns: Tuple[FooterColumn, ...] = ()
    social_links: Tuple[SocialLink, ...] = ()
    background_color: str = "bg-neutral-900"
