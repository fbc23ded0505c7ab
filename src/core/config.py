"""
Core configuration for the Drug Catalogue service.
Manages environment variables and storage settings.
"""
import os
from decimal import Decimal
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # AWS Configuration
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    dynamodb_table_name: str = os.getenv("DYNAMODB_TABLE_NAME", "Drugs")

    # Storage backend: "dynamodb" or "memory"
    storage_backend: str = os.getenv("STORAGE_BACKEND", "dynamodb")

    # API Configuration
    api_title: str = os.getenv("API_TITLE", "Vet Clinic Drug Catalogue")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # Pagination Configuration
    page_size: int = int(os.getenv("PAGE_SIZE", "5"))

    # Validation Limits (price must stay strictly below this value)
    max_drug_price: Decimal = Decimal(os.getenv("MAX_DRUG_PRICE", "1000"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "text")

    # Environment
    environment: str = os.getenv("ENVIRONMENT", "dev")

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
