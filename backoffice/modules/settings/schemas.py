from pydantic import Field

from backoffice.core.schemas import QueryModel


class SocialMedia(QueryModel):
    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    linkedin: str | None = None
    youtube: str | None = None


class SettingsUpdate(QueryModel):
    company_name: str | None = None
    logo: str | None = None
    favicon: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = None
    currency: str | None = None
    currency_symbol: str | None = None
    tax_rate: float | None = Field(None, ge=0)
    footer: str | None = None
    social_media: SocialMedia | None = None


class MaintenanceToggle(QueryModel):
    enabled: bool
    message: str | None = None
