"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List


DEFAULT_DATABASE_NAME = "exercise_tracker"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Database Configuration (DB_URI is required, there is no local fallback)
    db_uri: str
    db_name: str = ""
    
    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000
    
    # CORS Configuration
    cors_origins: List[str] = ["*"]
    
    # Log query configuration
    default_log_limit: int = 500
    
    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def database_name(self) -> str:
        """Database name, taken from DB_NAME or from the path of DB_URI."""
        if self.db_name:
            return self.db_name
        _, _, location = self.db_uri.partition("://")
        _, _, path = location.partition("/")
        return path.split("?", 1)[0] or DEFAULT_DATABASE_NAME


# Global settings instance
settings = Settings()
