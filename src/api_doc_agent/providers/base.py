"""Enrichment provider interface and the shared LLM-backed implementation."""

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path

from api_doc_agent.errors import EnrichmentError
from api_doc_agent.llm import LlmClient
from api_doc_agent.parser.base import Operation
from api_doc_agent.parser.llm_response import parse_llm_response
from api_doc_agent.parser.methods import extract_method_implementation

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"
OPERATION_PROMPT = (PROMPTS_DIR / "operation.md").read_text(encoding="utf-8")

PROVIDERS: dict[str, type["EnrichmentProvider"]] = {}


def register_provider(name: str):
    """Class decorator that makes a provider available under the given name."""

    def decorator(cls):
        cls.name = name
        PROVIDERS[name] = cls
        return cls

    return decorator


class EnrichmentProvider(ABC):
    """Turns one HTTP method of one route file into an Operation."""

    name: str = ""
    default_model: str = ""
    api_key_env_var: str = ""

    @abstractmethod
    async def generate(self, file_path: Path, http_method: str, route: str) -> Operation:
        """Describe ``http_method`` of the handler in ``file_path``.

        ``route`` is the display form, e.g. ``GET /users/{id}``.
        Raises on any failure.
        """


class LlmEnrichmentProvider(EnrichmentProvider):
    """Provider that sends the handler source to an LLM through litellm."""

    model_prefix: str = ""
    completion_params: dict = {"max_tokens": 1000, "top_p": 0.8}

    def __init__(self, api_key: str, model: str | None = None):
        self.model = model or self.default_model
        self.client = LlmClient(
            model=self._litellm_model(self.model),
            api_key=api_key,
            **self.completion_params,
        )

    async def generate(self, file_path: Path, http_method: str, route: str) -> Operation:
        content = await asyncio.to_thread(Path(file_path).read_text, encoding="utf-8")

        implementation = extract_method_implementation(content, http_method)
        if not implementation:
            raise EnrichmentError(f"Could not find implementation for {route} in file: {file_path}")

        user_prompt = (
            f'Generate the OpenAPI operation for the Next.js API route "{route}".\n\n'
            f"```typescript\n{implementation}\n```"
        )

        response = await self.client.call(user=user_prompt, system=OPERATION_PROMPT)
        return parse_llm_response(response)

    def _litellm_model(self, model: str) -> str:
        if not self.model_prefix or model.startswith(f"{self.model_prefix}/"):
            return model
        return f"{self.model_prefix}/{model}"
