"""Identity provider webhook payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EmailAddress(BaseModel):
    """One entry of the provider's email address list."""

    email_address: str = ""

    model_config = ConfigDict(extra="ignore")


class IdentityUserData(BaseModel):
    """User fields carried by ``user.*`` events."""

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email_addresses: list[EmailAddress] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    @property
    def primary_email(self) -> str:
        return self.email_addresses[0].email_address if self.email_addresses else ""


class IdentityEvent(BaseModel):
    """Envelope of a verified lifecycle event."""

    type: str
    data: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")
