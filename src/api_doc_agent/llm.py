"""LLM client wrapper around litellm.

Provides a unified async interface for calling any model supported by litellm.
"""

from litellm import acompletion


class LlmClient:
    """Wrapper for async LLM API calls via litellm."""

    def __init__(self, model: str, api_key: str | None = None, **params):
        self.model = model
        self.api_key = api_key
        self.params = params

    async def call(self, user: str, system: str | None = None) -> str:
        """Send a (system+)user message to the LLM and return the response text."""
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": user})

        response = await acompletion(
            model=self.model,
            messages=messages,
            api_key=self.api_key,
            **self.params,
        )
        return response.choices[0].message.content or ""
