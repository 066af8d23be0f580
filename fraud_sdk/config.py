"""Configuration management using Pydantic Settings"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SDK configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="FRAUD_SDK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    service_name: str = "fraud-sdk"
    log_level: str = "INFO"

    # Payload defaults
    default_currency: str = "USD"  # ISO 4217

    # Serialization
    json_indent: Optional[int] = None


settings = Settings()
