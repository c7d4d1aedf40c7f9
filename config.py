from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration settings loaded from environment variables or .env file."""
    api_key: str = "dev_key"  # API key for securing endpoints
    catalog_file: Optional[str] = None  # JSON catalog replacing the built-in one
    symptom_alert_template: str = 'O sintoma "{query}" pode ser um efeito colateral de: {drugs}.'
    api_host: str = "127.0.0.1"
    api_port: int = 5175
    debug_mode: bool = False
    log_level: str = "INFO"
    log_file: str = "medication_search.log"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

# Create global settings instance
settings = Settings()

# Setup logging
import logging

handlers = [logging.StreamHandler()]
if settings.log_file:
    handlers.append(logging.FileHandler(settings.log_file))

logging_level = getattr(logging, settings.log_level.upper(), logging.INFO)
logging.basicConfig(
    level=logging_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=handlers
)
logger = logging.getLogger("medication_search")
