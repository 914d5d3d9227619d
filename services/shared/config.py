"""
Shared configuration for the movie catalog service
"""
import logging
import sys
from typing import Optional
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class DatabaseConfig(BaseSettings):
    """MongoDB configuration"""
    uri: str = Field(..., validation_alias="MONGO_URI")
    name: Optional[str] = Field(None, validation_alias="MONGO_DB_NAME")
    collection: str = Field("posts", validation_alias="MONGO_COLLECTION")
    timeout_ms: int = Field(5000, validation_alias="MONGO_TIMEOUT_MS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class AppConfig(BaseSettings):
    """Application configuration"""
    name: str = Field("movie-catalog-api", validation_alias="APP_NAME")
    version: str = Field("1.0.0", validation_alias="APP_VERSION")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    debug: bool = Field(False, validation_alias="DEBUG")
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(8080, validation_alias="PORT")

    # Only this browser origin may call the API
    cors_origin: str = Field("https://hdmovieshub.art", validation_alias="CORS_ORIGIN")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Config:
    """Main configuration class"""

    def __init__(self):
        self.app = AppConfig()
        self.database = DatabaseConfig()


def load_config() -> Config:
    """Load configuration, exiting the process when MONGO_URI is missing"""
    try:
        return Config()
    except ValidationError as e:
        if any("MONGO_URI" in err["loc"] for err in e.errors()):
            logger.error("MONGO_URI is not set in the environment variables.")
        else:
            logger.error(f"Invalid configuration: {str(e)}")
        sys.exit(1)
