"""Anthropic (Claude) enrichment provider."""

from api_doc_agent.providers.base import LlmEnrichmentProvider, register_provider


@register_provider("anthropic")
class AnthropicProvider(LlmEnrichmentProvider):
    default_model = "claude-3-5-sonnet-latest"
    api_key_env_var = "ANTHROPIC_API_KEY"
    model_prefix = "anthropic"
