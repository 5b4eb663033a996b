from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProviderConfig:
    """Connection settings for one chat-completions provider."""
    name: str
    base_url: str
    api_key: Optional[str]
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    max_tokens: int = 2000
    timeout: float = 60.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)
