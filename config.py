"""NutriBot API — settings loaded from the environment (and .env if present)."""

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"


class Settings(BaseModel):
    openai_api_key: Optional[str] = None
    openai_api_url: str = OPENAI_API_URL
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = Field(30.0, gt=0.0)
    max_tokens: int = 600
    temperature: float = 0.7
    port: int = 7000
    log_level: str = "INFO"
    allowed_origins: List[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("ALLOWED_ORIGINS", "*")
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_api_url=os.getenv("OPENAI_API_URL", OPENAI_API_URL),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            openai_timeout=float(os.getenv("OPENAI_TIMEOUT", "30")),
            port=int(os.getenv("PORT", "7000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


@lru_cache
def get_settings() -> Settings:
    """Build settings once per process."""
    return Settings.from_env()
