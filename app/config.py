from pydantic_settings import BaseSettings

GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-1.5-flash-latest:generateContent"
)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    makcorps_api_key: str = ""
    makcorps_base_url: str = "https://api.makcorps.com"
    hotel_result_limit: int = 10
    gemini_api_key: str = ""
    gemini_url: str = GEMINI_URL
    anthropic_api_key: str = ""
    claude_model: str = "claude-sonnet-4-20250514"
    itinerary_provider: str = "gemini"  # "gemini" | "claude"
    http_timeout: float = 30.0
    log_level: str = "INFO"
