"""Core application configuration and settings.

Handles environment variables, loan periods and fine rates.
"""
from pathlib import Path
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings


# Load environment variables
ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=ROOT / ".env", override=False)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Settings
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(default=False, alias="JSON_LOGS")

    # Circulation rules
    loan_period_days: int = Field(default=14, ge=1, alias="LOAN_PERIOD_DAYS")
    standard_fine_rate: float = Field(default=10, ge=0, alias="STANDARD_FINE_RATE")
    discounted_fine_rate: float = Field(default=5, ge=0, alias="DISCOUNTED_FINE_RATE")
    currency_symbol: str = Field(default="$", alias="CURRENCY_SYMBOL")

    # Notification channels
    sms_max_length: int = Field(default=160, ge=20, alias="SMS_MAX_LENGTH")

    class Config:
        case_sensitive = False
        env_file = ".env"
        populate_by_name = True
        extra = "ignore"

    def validate_required_settings(self):
        """Validate rules that span more than one setting."""
        if self.discounted_fine_rate > self.standard_fine_rate:
            raise ValueError(
                "DISCOUNTED_FINE_RATE must not exceed STANDARD_FINE_RATE "
                f"({self.discounted_fine_rate} > {self.standard_fine_rate})."
            )


# Global settings instance
settings = Settings()


# Validate settings on module import (only in non-test environments)
if settings.environment != "test":
    try:
        settings.validate_required_settings()
    except ValueError as e:
        print(f"Configuration Error: {e}")
        # Don't raise in development to allow partial setup
        if settings.environment == "production":
            raise
