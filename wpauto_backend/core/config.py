"""
Application configuration settings.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings."""
    
    # Database - SQLite for local development, Postgres in production
    DATABASE_URL: str = "sqlite:///./wpauto.db"
    
    # n8n / outbound webhooks
    N8N_WEBHOOK_SECRET: str = ""  # empty disables signing and callback verification
    WEBHOOK_TIMEOUT_S: int = 30
    WEBHOOK_USER_AGENT: str = "WP-Auto-Force-Processor/1.0"
    
    # WordPress connection test
    WORDPRESS_TIMEOUT_S: int = 10
    
    # Scheduled articles
    SCHEDULER_ENABLED: bool = True
    SCHEDULER_INTERVAL_MINUTES: int = 5
    
    # OpenAI (direct article composition)
    OPENAI_API_KEY: str = ""
    OPENAI_TEXT_MODEL: str = "gpt-4o"
    OPENAI_MAX_TOKENS_TEXT: int = 2200
    OPENAI_TEMPERATURE: float = 0.7
    OPENAI_TIMEOUT_S: int = 60
    
    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]
    
    # App settings
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = True
    
    class Config:
        env_file = ".env"


settings = Settings()
