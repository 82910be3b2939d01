"""Storefront Configuration"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SHIPPING_FEE_PER_KG = 10.0


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Storefront Checkout"
    debug: bool = False
    log_level: str = "INFO"

    # Pricing
    shipping_fee_per_kg: float = Field(default=SHIPPING_FEE_PER_KG, ge=0)
    currency_symbol: str = "$"

    # Demo scenario
    demo_customer_name: str = "John Doe"
    demo_customer_balance: float = Field(default=1000.0, ge=0)

    @property
    def effective_log_level(self) -> str:
        """Log level, forced to DEBUG when debug mode is on"""
        return "DEBUG" if self.debug else self.log_level.upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
