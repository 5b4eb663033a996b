import logging
from typing import Callable, List, Optional, Sequence

import requests

from app.generation.artifact import Artifact, GenerationResult
from app.inference.chat_completions_client import ChatCompletionsClient
from app.inference.config import ProviderConfig
from app.inference.prompt import build_messages
from app.llm.parser import parse_artifact

logger = logging.getLogger(__name__)


class RemoteGenerator:
    """
    Generates components through chat-completion providers.

    Providers are tried in the given order. A provider without a
    credential is skipped without any network call; a transport
    error or an unusable completion discards that provider and the
    next one is tried. Upstream failures never raise: they end in a
    fallback result.
    """

    def __init__(
        self,
        providers: Sequence[ProviderConfig],
        client_factory: Callable[[ProviderConfig], ChatCompletionsClient] = ChatCompletionsClient,
    ):
        self.providers: List[ProviderConfig] = list(providers)
        self.client_factory = client_factory

    @property
    def is_configured(self) -> bool:
        return any(p.is_configured for p in self.providers)

    def generate(self, prompt: str, context: Optional[Artifact] = None) -> GenerationResult:
        messages = build_messages(prompt, context)
        failures: List[str] = []

        for provider in self.providers:
            if not provider.is_configured:
                logger.debug("Provider '%s' has no credential, skipping", provider.name)
                continue

            client = self.client_factory(provider)
            try:
                content = client.generate(messages)
            except requests.RequestException as e:
                logger.warning("Provider '%s' request failed: %s", provider.name, e)
                failures.append(f"{provider.name}: request failed")
                continue
            except (KeyError, IndexError, TypeError, ValueError) as e:
                logger.warning("Provider '%s' returned an unexpected payload: %s", provider.name, e)
                failures.append(f"{provider.name}: unexpected payload")
                continue

            artifact = parse_artifact(content)
            if artifact is None:
                logger.warning(
                    "Failed to parse %s response as a component, using fallback",
                    provider.name,
                )
                failures.append(f"{provider.name}: invalid response")
                continue

            logger.info("Component generated by provider '%s'", provider.name)
            return GenerationResult.success(artifact, source=provider.name)

        if not failures:
            return GenerationResult.fallback("No AI API configured")
        return GenerationResult.fallback("; ".join(failures))
