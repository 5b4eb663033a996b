import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

from app.inference.config import ProviderConfig

# Load .env from project root
load_dotenv()


class Settings:
    """
    Application settings loaded from environment variables.

    Provider credentials live here and are handed to the remote
    generator explicitly; nothing downstream reads the environment.
    """

    def __init__(self):
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.database_url: str = os.getenv(
            "DATABASE_URL", "sqlite:///./component_generator.db"
        )
        self.cors_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
            if origin.strip()
        ]

        self.openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY") or None
        self.openai_base_url: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
        self.openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

        self.openrouter_api_key: Optional[str] = os.getenv("OPENROUTER_API_KEY") or None
        self.openrouter_base_url: str = os.getenv(
            "OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1"
        )
        self.openrouter_model: str = os.getenv("OPENROUTER_MODEL", "gpt-4o-mini")

        self.llm_temperature: float = float(os.getenv("LLM_TEMPERATURE", "0.7"))
        self.llm_max_tokens: int = int(os.getenv("LLM_MAX_TOKENS", "2000"))
        self.llm_timeout: float = float(os.getenv("LLM_TIMEOUT", "60"))

    def provider_configs(self) -> List[ProviderConfig]:
        """Providers in priority order: OpenAI first, OpenRouter second."""
        return [
            ProviderConfig(
                name="openai",
                base_url=self.openai_base_url,
                api_key=self.openai_api_key,
                model=self.openai_model,
                temperature=self.llm_temperature,
                max_tokens=self.llm_max_tokens,
                timeout=self.llm_timeout,
            ),
            ProviderConfig(
                name="openrouter",
                base_url=self.openrouter_base_url,
                api_key=self.openrouter_api_key,
                model=self.openrouter_model,
                temperature=self.llm_temperature,
                max_tokens=self.llm_max_tokens,
                timeout=self.llm_timeout,
            ),
        ]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
