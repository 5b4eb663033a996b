import re
from typing import Dict, List

import requests

from app.inference.config import ProviderConfig


class ChatCompletionsClient:
    """OpenAI-compatible /chat/completions client authenticated with a bearer token."""

    def __init__(self, config: ProviderConfig):
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.model = config.model
        self.temperature = config.temperature

    def generate(self, messages: List[Dict]) -> str:
        url = f"{self.base_url}/chat/completions"

        response = requests.post(
            url,
            json={
                "model": self.model,
                "messages": messages,
                "temperature": self.temperature,
                "max_tokens": self.config.max_tokens,
            },
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.config.api_key}",
            },
            timeout=self.config.timeout,
        )
        response.raise_for_status()

        content = response.json()["choices"][0]["message"]["content"]
        if not isinstance(content, str):
            # Refusals come back with null content
            raise ValueError(f"completion content is {type(content).__name__}, not text")

        #  STRIP MARKDOWN FENCES
        content = re.sub(r"^```(?:json)?\s*", "", content.strip())
        content = re.sub(r"\s*```$", "", content.strip())

        return content
