"""Checkout service configuration"""

from functools import lru_cache

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="POS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "POS Checkout"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8002
    log_level: str = "INFO"

    # Shipping: rate charged per started weight increment
    shipping_increment_grams: int = Field(default=100, gt=0)
    shipping_rate_per_increment: float = Field(default=3.0, ge=0)

    # Catalog
    seed_demo_data: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Load environment variables from the working directory's .env
load_dotenv(find_dotenv(usecwd=True))

settings = get_settings()
