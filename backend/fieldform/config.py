"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    app_name: str = "FieldForm/EDGE Audit"
    
    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"
    
    # Sessions
    session_cookie_name: str = "fieldform-session"
    session_max_age_seconds: int = 60 * 60 * 24 * 7  # 7 days
    cookie_secure: bool = False
    
    # Identifier generation for the in-memory stores
    id_strategy: Literal["sequential", "uuid"] = "sequential"
    
    # Seed the built-in form templates at startup
    seed_templates: bool = True
    
    # Notifications
    notification_recipient: str = "admin@example.com"
    email_sender: str = "noreply@fieldform.local"
    
    # Logging
    log_level: str = "INFO"
    
    # Debug mode
    debug: bool = True
    
    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
    
    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
