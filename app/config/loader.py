"""
Configuration loader utility for environment-specific settings.
"""

import os
from pathlib import Path
from typing import Optional
from .settings import Settings, Environment


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development

        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")

        env = Environment(environment.lower())
        env_file_path = Path(f".env.{env.value}")

        if env_file_path.exists():
            return Settings(_env_file=str(env_file_path), environment=env)

        print(f"Warning: Environment file {env_file_path} not found, using default settings")
        return Settings(environment=env)

    @staticmethod
    def get_available_environments() -> list[str]:
        """Get list of available environment configurations"""
        env_files = []
        for env_file in Path(".").glob(".env.*"):
            if env_file.name.endswith(".sample"):
                continue
            env_files.append(env_file.name.replace(".env.", ""))
        return sorted(env_files)

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Create a sample .env file for the specified environment.

        Args:
            environment: Target environment
            output_path: Optional custom output path

        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())

        if output_path is None:
            output_path = f".env.{env.value}.sample"

        default_settings = Settings()

        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={default_settings.app_name}
APP_VERSION={default_settings.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Server Configuration
HOST={default_settings.host}
PORT={default_settings.port}
WORKERS={1 if env == Environment.DEVELOPMENT else 4}

# Logging Configuration
LOG_LEVEL={default_settings.log_level.value}

# Places lookup
PLACES_API_KEY=your-places-api-key
PLACES_MAX_RESULTS={default_settings.places.max_results}
PLACES_TIMEOUT_SECONDS={default_settings.places.timeout_seconds}

# Street geometry lookup
OVERPASS_API_URL={default_settings.overpass.api_url}
OVERPASS_SEARCH_RADIUS_M={default_settings.overpass.search_radius_m}

# Pipeline
STREETS_DEFAULT_RADIUS_KM={default_settings.streets.default_radius_km}
STREETS_MAX_CONCURRENT_STREETS={default_settings.streets.max_concurrent_streets}

# CORS
SECURITY_CORS_ORIGINS=*
"""

        with open(output_path, "w") as f:
            f.write(sample_content)

        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
