"""Configuration management using Pydantic Settings"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "abroad-budget"
    log_level: str = "INFO"

    # Prediction backend: in-process predictor or hosted RPC
    prediction_backend: Literal["local", "remote"] = "local"

    # Remote procedure (Supabase / PostgREST)
    supabase_url: str = "http://localhost:8003"
    supabase_anon_key: str = ""

    # Google Custom Search for university images
    google_api_key: Optional[str] = None
    google_search_engine_id: Optional[str] = None
    placeholder_image_url: str = "/placeholder-university.jpg"

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
