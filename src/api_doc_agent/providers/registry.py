"""Provider lookup by name.

Importing this module registers the built-in providers.
"""

import os

from api_doc_agent.errors import ConfigurationError
from api_doc_agent.providers import anthropic_provider, openai_provider  # noqa: F401
from api_doc_agent.providers.base import PROVIDERS, EnrichmentProvider


def available_providers() -> list[str]:
    return sorted(PROVIDERS)


def get_provider_class(name: str) -> type[EnrichmentProvider]:
    try:
        return PROVIDERS[name]
    except KeyError:
        raise ConfigurationError(
            f'Invalid provider "{name}". Available providers: "{" | ".join(available_providers())}"'
        ) from None


def default_model(name: str) -> str:
    return get_provider_class(name).default_model


def api_key_env_var(name: str) -> str:
    return get_provider_class(name).api_key_env_var


def provider_api_key(name: str) -> str | None:
    """Read the provider's API key from the environment, if the provider is known."""
    cls = PROVIDERS.get(name)
    if cls is None or not cls.api_key_env_var:
        return None
    return os.getenv(cls.api_key_env_var)


def create_provider(name: str, api_key: str, model: str | None = None) -> EnrichmentProvider:
    """Instantiate the provider registered under ``name``."""
    return get_provider_class(name)(api_key=api_key, model=model)
