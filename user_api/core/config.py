# Standard library imports
import os
from typing import Final, Optional


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv(
            "MONGO_DB_NAME", os.getenv("DATABASE", "user_api")
        )
        self.user_collection_name: Final[str] = "users"
        
        # Notification Configuration
        self.notifier_backend: Final[str] = os.getenv("NOTIFIER_BACKEND", "sns").lower()
        self.sns_topic: Final[str] = os.getenv("SNS_TOPIC", "")
        self.aws_region: Final[str] = os.getenv("AWS_REGION", "us-east-1")
        self.sns_endpoint: Final[str] = os.getenv("ENDPOINT", os.getenv("SNS_ENDPOINT", ""))
        self.kafka_bootstrap_servers: Final[str] = os.getenv(
            "KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"
        )
        self.kafka_topic: Final[str] = os.getenv("KAFKA_TOPIC", "user-updated")
        
        # Security Configuration
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format: Final[str] = os.getenv("LOG_FORMAT", "json").lower()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
