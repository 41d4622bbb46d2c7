"""OpenAI (GPT) enrichment provider."""

from api_doc_agent.providers.base import LlmEnrichmentProvider, register_provider


@register_provider("openai")
class OpenAIProvider(LlmEnrichmentProvider):
    default_model = "gpt-4o-mini"
    api_key_env_var = "OPENAI_API_KEY"
    model_prefix = "openai"
    completion_params = {
        **LlmEnrichmentProvider.completion_params,
        "response_format": {"type": "json_object"},
    }
