from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional

from marketing_site.core.email_sender import RESEND_API_URL

DEFAULT_CONTACT_EMAIL = "contact@example.com"
DEFAULT_FROM_EMAIL = "onboarding@resend.dev"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Resend transactional email - API key must be provided via environment variables
    resend_api_key: Optional[str] = None
    resend_from_email: Optional[str] = None
    resend_api_url: str = RESEND_API_URL
    resend_timeout_seconds: float = 10.0

    # Where contact form notifications are delivered
    public_contact_email: Optional[str] = None

    # Branding shared with the footer
    site_company_name: str = "Example Company"
    site_tagline: str = "Building better products, together."
    site_twitter_url: str = "https://twitter.com/example"
    site_linkedin_url: str = "https://www.linkedin.com/company/example"
    site_github_url: str = "https://github.com/example"

    # CORS settings
    allowed_origins: list[str] = ["*"]

    @property
    def email_service_configured(self) -> bool:
        return bool(self.resend_api_key)

    @property
    def effective_contact_email(self) -> str:
        """Destination for contact notifications, empty values fall back to the default"""
        return self.public_contact_email or DEFAULT_CONTACT_EMAIL

    @property
    def effective_from_email(self) -> str:
        """Sender address for contact notifications, empty values fall back to the default"""
        return self.resend_from_email or DEFAULT_FROM_EMAIL


@lru_cache
def get_settings():
    return Settings()
