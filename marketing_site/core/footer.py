"""
Centralized footer configuration for the entire site.

All footer content, links and social profiles are defined here in one place.
The rendering layer picks a preset by FooterVariant; to update footer
content site-wide, edit the columns below.
"""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Union

from marketing_site.core.exceptions import FooterVariantNotFound
from marketing_site.core.site import SiteConfig, get_site_config
from marketing_site.models.footer import (
    FooterColumn, FooterConfig, FooterLink, FooterVariant, SocialLink, SocialPlatform
)

logger = logging.getLogger(__name__)


def _column(title: str, *links) -> FooterColumn:
    return FooterColumn(
        title=title,
        links=tuple(FooterLink(label=label, href=href) for label, href in links),
    )


DEFAULT_COLUMNS = (
    _column("Product",
            ("Features", "/features"),
            ("Pricing", "/pricing"),
            ("Security", "/security"),
            ("Roadmap", "/roadmap")),
    _column("Company",
            ("About", "/about"),
            ("Services", "/services"),
            ("Blog", "/blog"),
            ("Contact", "/contact")),
    _column("Resources",
            ("Documentation", "/docs"),
            ("Support", "/support"),
            ("API", "/api"),
            ("Community", "/community")),
    _column("Legal",
            ("Privacy Policy", "/privacy"),
            ("Terms of Service", "/terms"),
            ("Cookie Policy", "/cookies"),
            ("Licenses", "/licenses")),
)

MINIMAL_COLUMNS = (
    _column("Quick Links",
            ("Home", "/"),
            ("About", "/about"),
            ("Contact", "/contact")),
)


def _social_link(site: SiteConfig, platform: SocialPlatform) -> SocialLink:
    return SocialLink(
        platform=platform,
        href=getattr(site.social, platform.value),
        icon=platform.value,
    )


def build_footer_presets(site: SiteConfig) -> Mapping[FooterVariant, FooterConfig]:
    """
    Build every footer preset from the site branding.

    The minimal preset replaces columns and social links of the default
    footer and inherits everything else.

    Args:
        site: Branding shared with the rest of the site

    Returns:
        Read-only mapping of variant to footer record
    """
    default = FooterConfig(
        company_name=site.company_name,
        tagline=site.tagline,
        columns=DEFAULT_COLUMNS,
        social_links=tuple(_social_link(site, platform) for platform in SocialPlatform),
    )

    minimal = default.model_copy(update={
        "columns": MINIMAL_COLUMNS,
        "social_links": (
            _social_link(site, SocialPlatform.TWITTER),
            _social_link(site, SocialPlatform.LINKEDIN),
        ),
    })

    return MappingProxyType({
        FooterVariant.DEFAULT: default,
        FooterVariant.MINIMAL: minimal,
    })


@lru_cache
def get_footer_variants() -> Mapping[FooterVariant, FooterConfig]:
    presets = build_footer_presets(get_site_config())
    logger.debug(f"Built footer presets: {[variant.value for variant in presets]}")
    return presets


def get_footer_config(variant: FooterVariant = FooterVariant.DEFAULT) -> FooterConfig:
    return get_footer_variants()[variant]


def resolve_footer_variant(name: Union[str, FooterVariant]) -> FooterConfig:
    """Look up a footer preset by name, raising FooterVariantNotFound for unknown keys"""
    try:
        variant = FooterVariant(name)
    except ValueError:
        raise FooterVariantNotFound(str(name))
    return get_footer_config(variant)
