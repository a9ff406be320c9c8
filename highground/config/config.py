from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API configuration
    api_version: str = "1.0"
    log_level: str = "INFO"

    # Gemini configuration
    # Without a key the service answers from the sample places only.
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-pro"
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1"
    gemini_temperature: float = 0.2
    gemini_top_k: int = 40
    gemini_top_p: float = 0.95
    gemini_max_output_tokens: int = 1024

    # Discovery constraints
    search_radius_km: float = 5.0
    places_per_request: int = 3

    # View cache revalidation
    revalidate_url: Optional[str] = None
    revalidate_token: Optional[str] = None
    revalidate_timeout_seconds: float = 1.0
    navigation_view_path: str = "/dashboard/navigation"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
