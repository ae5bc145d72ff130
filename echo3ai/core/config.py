from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Gemini API
    gemini_api_key: str = ""
    gemini_url: str = "https://generativelanguage.googleapis.com/v1/models/gemini-2.5-flash:generateContent"

    # DuckDuckGo HTML search
    search_url: str = "https://html.duckduckgo.com/html"
    search_limit: int = 4
    excerpt_timeout: float = 8.0
    user_agent: str = "Mozilla/5.0"

    # API
    cors_origins: List[str] = ["http://localhost:5173"]
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"


settings = Settings()
