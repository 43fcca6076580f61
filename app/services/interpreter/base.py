"""Base class for LLM-backed interpreters.

An interpreter turns typed input into a prompt, sends it to Claude and parses
the reply into typed output. Subclasses define the prompts and parsing.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

import anthropic

from app.config import settings

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseInterpreter(ABC, Generic[TInput, TOutput]):
    """Abstract base for all interpreters.

    The base handles LLM communication; subclasses define prompts and parsing.
    """

    # Override in subclasses
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 1000

    def __init__(self, api_key: str | None = None):
        self.api_key = api_key if api_key is not None else settings.anthropic_api_key
        self._client: anthropic.AsyncAnthropic | None = None

    @property
    def client(self) -> anthropic.AsyncAnthropic:
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    @abstractmethod
    def get_system_prompt(self) -> str:
        """Return the system prompt for this interpreter."""
        ...

    @abstractmethod
    def format_input(self, input_data: TInput) -> str:
        """Convert typed input to prompt string."""
        ...

    @abstractmethod
    def parse_output(self, response_text: str) -> TOutput:
        """Parse LLM response into typed output."""
        ...

    async def interpret(self, input_data: TInput) -> TOutput:
        """Main entry point: interpret input and return structured output."""
        user_message = self.format_input(input_data)

        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=self.get_system_prompt(),
            messages=[{"role": "user", "content": user_message}],
        )

        # Extract text from the first content block
        if not response.content:
            return self.parse_output("")
        first_block = response.content[0]
        response_text = first_block.text if hasattr(first_block, "text") else str(first_block)
        return self.parse_output(response_text)
