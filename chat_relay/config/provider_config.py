"""Provider credentials and endpoints.

Every outbound provider call is driven by a single immutable
:class:`ProviderConfig`.  It is read from the environment (and an optional
``.env`` file) once per process and handed to the adapter registry, so
adapters never touch ``os.environ`` themselves.  Tests construct their own
instances with fake values.
"""

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


DEFAULT_BEDROCK_REGION = "us-east-1"
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_AZURE_API_VERSION = "2024-10-21"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class ProviderConfig(BaseSettings):
    """Credentials and endpoints for the supported providers."""

    # AWS Bedrock (Converse API)
    bedrock_bearer_token: Optional[str] = Field(None, alias="AWS_BEARER_TOKEN_BEDROCK")
    bedrock_region: str = Field(DEFAULT_BEDROCK_REGION, alias="AWS_DEFAULT_REGION")

    # OpenAI or any compatible endpoint
    openai_api_key: Optional[str] = Field(None, alias="OPENAI_API_KEY")
    openai_base_url: str = Field(DEFAULT_OPENAI_BASE_URL, alias="OPENAI_BASE_URL")

    # Azure OpenAI
    azure_api_key: Optional[str] = Field(None, alias="AZURE_OPENAI_API_KEY")
    azure_endpoint: Optional[str] = Field(None, alias="AZURE_OPENAI_ENDPOINT")
    azure_api_version: str = Field(DEFAULT_AZURE_API_VERSION, alias="AZURE_OPENAI_API_VERSION")

    # Google Gemini
    gemini_api_key: Optional[str] = Field(None, alias="GEMINI_API_KEY")
    gemini_base_url: str = Field(DEFAULT_GEMINI_BASE_URL, alias="GEMINI_BASE_URL")

    # Outbound timeout in seconds; None waits for the provider indefinitely
    upstream_timeout: Optional[float] = Field(None, alias="RELAY_UPSTREAM_TIMEOUT")

    @field_validator(
        "bedrock_bearer_token",
        "openai_api_key",
        "azure_api_key",
        "azure_endpoint",
        "gemini_api_key",
        mode="before",
    )
    @classmethod
    def blank_as_missing(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("bedrock_region", mode="before")
    @classmethod
    def default_region(cls, value: Optional[str]) -> str:
        return value or DEFAULT_BEDROCK_REGION

    @field_validator("openai_base_url", mode="before")
    @classmethod
    def default_openai_base_url(cls, value: Optional[str]) -> str:
        return value or DEFAULT_OPENAI_BASE_URL

    @field_validator("azure_api_version", mode="before")
    @classmethod
    def default_azure_api_version(cls, value: Optional[str]) -> str:
        return value or DEFAULT_AZURE_API_VERSION

    @field_validator("gemini_base_url", mode="before")
    @classmethod
    def default_gemini_base_url(cls, value: Optional[str]) -> str:
        return value or DEFAULT_GEMINI_BASE_URL

    @field_validator("upstream_timeout")
    @classmethod
    def validate_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("RELAY_UPSTREAM_TIMEOUT must be positive")
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )


@lru_cache()
def get_provider_config() -> ProviderConfig:
    """Return the process-wide provider configuration."""

    return ProviderConfig()
