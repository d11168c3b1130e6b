"""Runtime configuration for flagpost.

Every option is read from the environment (or a local ``.env`` file) through
pydantic-settings. ``IDENTITY_JWT_KEY`` is the only value without a default.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DenyPolicy = Literal["soft", "delete"]


class Settings(BaseSettings):
    """Environment-backed settings; field aliases are the variable names."""

    # Application metadata
    app_name: str = Field(default="flagpost", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./flagpost.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Session tokens issued by the identity provider
    identity_jwt_key: str = Field(alias="IDENTITY_JWT_KEY")
    identity_jwt_algorithm: str = Field(default="HS256", alias="IDENTITY_JWT_ALGORITHM")
    identity_jwt_issuer: str | None = Field(default=None, alias="IDENTITY_JWT_ISSUER")

    # Lifecycle webhooks (svix-signed, "whsec_..." secret)
    webhook_signing_secret: str | None = Field(default=None, alias="WEBHOOK_SIGNING_SECRET")

    # Verification review
    admin_ids: list[str] = Field(default_factory=list, alias="ADMIN_IDS")
    deny_policy: DenyPolicy = Field(default="soft", alias="DENY_POLICY")

    # External file storage
    storage_base_url: str = Field(default="http://localhost:9000", alias="STORAGE_BASE_URL")
    storage_api_key: str | None = Field(default=None, alias="STORAGE_API_KEY")
    storage_timeout_seconds: float = Field(default=10.0, alias="STORAGE_TIMEOUT_SECONDS")

    # Browser clients (dashboard and mobile web build)
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url


settings = Settings()  # type: ignore[call-arg]
