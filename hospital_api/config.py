"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        data_dir: Directory holding one JSON file per collection
        api_prefix: Path prefix every resource router is mounted under
        log_level: Root logging level
        log_retention: Number of system log entries kept on disk

        # Frontend settings
        cors_origins: Origins allowed to call the API from a browser

        app_title: Title shown in the OpenAPI docs
        app_version: Version shown in the OpenAPI docs
    """
    # Storage settings
    data_dir: str = "data"

    # API settings
    api_prefix: str = "/api"
    app_title: str = "Hospital Dashboard API"
    app_version: str = "1.0.0"

    # Logging settings
    log_level: str = "INFO"
    log_retention: int = 100

    # Frontend settings
    cors_origins: List[str] = ["http://localhost:3000"]

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False

# Create settings instance
settings = Settings()
