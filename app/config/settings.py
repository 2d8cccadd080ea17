"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class PlacesSettings(BaseSettings):
    """Places text-search API configuration"""

    api_key: Optional[str] = Field(default=None, description="Google Places API key")
    api_url: str = Field(default="https://maps.googleapis.com/maps/api")
    timeout_seconds: int = Field(default=30, ge=1, le=120)
    max_results: int = Field(default=10, ge=1, le=20)

    model_config = {
        "env_prefix": "PLACES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class OverpassSettings(BaseSettings):
    """OpenStreetMap Overpass API configuration"""

    api_url: str = Field(default="https://overpass-api.de/api/interpreter")
    timeout_seconds: int = Field(default=30, ge=1, le=180)
    search_radius_m: int = Field(default=1000, ge=100, le=10000)

    model_config = {"env_prefix": "OVERPASS_"}


class StreetSettings(BaseSettings):
    """Street reconstruction pipeline configuration"""

    default_radius_km: float = Field(default=5.0, gt=0, le=50)
    max_concurrent_streets: int = Field(default=8, ge=1, le=50)
    nearby_place_m: int = Field(default=300, ge=10, le=2000)
    cluster_radius_km: float = Field(default=0.5, gt=0, le=5)

    model_config = {"env_prefix": "STREETS_"}


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=False)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "OPTIONS"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["Content-Type"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "SECURITY_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Street Highlight API")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    log_file: Optional[str] = Field(default=None)

    # Nested Settings
    places: PlacesSettings = Field(default_factory=PlacesSettings)
    overpass: OverpassSettings = Field(default_factory=OverpassSettings)
    streets: StreetSettings = Field(default_factory=StreetSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
