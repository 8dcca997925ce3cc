"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).

Settings are read once and injected into the tool registry at discovery time;
tools never read the process environment themselves.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # ZEAL API
    # ========================================================================
    ZEAL_API_KEY: str = Field(default="", description="Zeal API bearer token")
    ZEAL_PUBLIC_API_API_KEY: str = Field(
        default="",
        description="Legacy name for the Zeal API token, used only when ZEAL_API_KEY is empty",
    )
    ZEAL_API_BASE_URL: str = Field(default="https://api.zeal.com")
    ZEAL_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0, description="Per-request timeout")
    ZEAL_RATE_LIMIT_PER_SECOND: int = Field(default=10, ge=1, description="Max requests per second")

    # ========================================================================
    # TOOL DISCOVERY
    # ========================================================================
    TOOL_LOAD_TIMEOUT_SECONDS: float = Field(
        default=10.0, gt=0, description="Upper bound for loading a single tool"
    )

    # ========================================================================
    # API SERVER
    # ========================================================================
    SERVER_NAME: str = Field(default="Zeal")
    SERVER_VERSION: str = Field(default="1.0.0")
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)
    API_CORS_ORIGINS: str = Field(default="*")

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    # ========================================================================
    # DEPLOYMENT
    # ========================================================================
    ENVIRONMENT: str = Field(
        default="development", pattern="^(development|staging|production)$"
    )

    @property
    def api_key(self) -> str:
        """Effective Zeal credential (falls back to the legacy variable)."""
        return self.ZEAL_API_KEY or self.ZEAL_PUBLIC_API_API_KEY

    @property
    def uses_legacy_api_key(self) -> bool:
        """True when only the legacy credential variable is set."""
        return not self.ZEAL_API_KEY and bool(self.ZEAL_PUBLIC_API_API_KEY)
