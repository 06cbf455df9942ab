"""
Site-wide branding used by the footer.
"""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from marketing_site.core.config import Settings, get_settings


class SocialProfiles(BaseModel):
    model_config = ConfigDict(frozen=True)

    twitter: str
    linkedin: str
    github: str


class SiteConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    company_name: str
    tagline: str
    social: SocialProfiles


def build_site_config(settings: Settings) -> SiteConfig:
    return SiteConfig(
        company_name=settings.site_company_name,
        tagline=settings.site_tagline,
        social=SocialProfiles(
            twitter=settings.site_twitter_url,
            linkedin=settings.site_linkedin_url,
            github=settings.site_github_url,
        ),
    )


@lru_cache
def get_site_config() -> SiteConfig:
    return build_site_config(get_settings())
