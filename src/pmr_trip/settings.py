from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TaxiSettings(BaseSettings):
    """Defaults for new taxi simulation sessions and the tracking loop."""

    total_ticks: int = Field(default=100, ge=1, le=10_000)
    animation_seconds: float = Field(
        default=30.0,
        gt=0.0,
        le=3600.0,
        description="Wall-clock duration of a full ride animation",
    )
    persist_every: int = Field(
        default=10,
        ge=1,
        description="Snapshot is written every N ticks (and always on arrival)",
    )
    default_eta_minutes: float = Field(default=25.0, gt=0.0)

    model_config = SettingsConfigDict(env_prefix="TAXI_")


class ProximitySettings(BaseSettings):
    radius_m: float = Field(
        default=100.0,
        gt=0.0,
        le=5000.0,
        description="Distance under which an agent is considered next to the passenger",
    )

    model_config = SettingsConfigDict(env_prefix="PROXIMITY_")


class BillingSettings(BaseSettings):
    payment_due_days: int = Field(default=30, ge=0, le=365)
    invoice_prefix: str = "FACT"

    model_config = SettingsConfigDict(env_prefix="BILLING_")

    @field_validator("invoice_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        v = v.strip()
        if not v or not v.isalnum():
            raise ValueError("Invoice prefix must be a non-empty alphanumeric string")
        return v.upper()


class LoggingSettings(BaseSettings):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["text", "json"] = "text"
    environment: str = "development"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    taxi: TaxiSettings = Field(default_factory=TaxiSettings)
    proximity: ProximitySettings = Field(default_factory=ProximitySettings)
    billing: BillingSettings = Field(default_factory=BillingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables."""
    return Settings()
