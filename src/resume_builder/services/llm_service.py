"""LLM service selecting a provider from the environment."""

from __future__ import annotations

import os

from resume_builder.services.llm_providers import (
    GeminiProvider,
    LLMError,
    LLMProvider,
)


class LLMService:
    def __init__(self, provider: LLMProvider | None = None) -> None:
        """Initialize the service.

        Args:
            provider: Provider to use; defaults to the one named by ``LLM_PROVIDER``.
        """
        self.provider = provider or self.default_provider()

    @staticmethod
    def default_provider() -> LLMProvider:
        """Instantiate the provider named by ``LLM_PROVIDER`` (default ``gemini``).

        Raises:
            LLMError: If the provider name is unknown or it cannot be configured.
        """
        provider_name = os.environ.get("LLM_PROVIDER", "gemini").lower()

        if provider_name == "gemini":
            return GeminiProvider()
        raise LLMError(f"Unknown LLM provider: {provider_name}.")

    def build_prompt(self, system_instructions: str, user_content: str) -> str:
        return f"System instruction:\n{system_instructions}\n\nUser content:\n{user_content}"

    def generate_llm_response(
        self,
        system_instructions: str,
        user_content: str,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        json_output: bool = False,
    ) -> str:
        """Build a prompt and send it to the LLM in one step.

        Args:
            system_instructions: System-level instructions.
            user_content: User content.
            temperature: Controls randomness (0.0-2.0). Lower = more deterministic.
            max_tokens: Maximum response length. None = provider default.
            json_output: Request a JSON object response.

        Returns:
            The text response from the LLM.
        """
        prompt = self.build_prompt(system_instructions, user_content)
        config = self.provider.generate_llm_config(temperature, max_tokens, json_output)
        return self.provider.send_prompt(prompt, config)
