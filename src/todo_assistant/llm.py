"""Completion client for the hosted model.

Wraps :class:`groq.AsyncGroq` so the dispatch loop only sees message
lists going in and completion text coming out.
"""

import os
from typing import Any

from groq import APIError, AsyncGroq

from .errors import TransportError

DEFAULT_MODEL = "llama-3.3-70b-versatile"


class CompletionClient:
    """Request JSON-mode chat completions.

    Example:
        client = CompletionClient(AsyncGroq(api_key="..."))
        text = await client.complete([{"role": "user", "content": "hi"}])
    """

    def __init__(
        self,
        client: AsyncGroq | None = None,
        model: str = DEFAULT_MODEL,
    ) -> None:
        """Initialize the completion client.

        Args:
            client: The AsyncGroq instance to use. Built from
                ``GROQ_API_KEY`` when omitted.
            model: The model to use for completions.
        """
        self._client = client or AsyncGroq(api_key=os.getenv("GROQ_API_KEY"))
        self._model = model

    async def complete(self, messages: list[dict[str, Any]]) -> str:
        """Submit the full message history and return the completion text.

        Args:
            messages: Role-tagged conversation messages.

        Returns:
            The model's text, empty if it returned no content.

        Raises:
            TransportError: If the endpoint is unreachable or errors.
        """
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                response_format={"type": "json_object"},
            )
        except APIError as e:
            raise TransportError(str(e)) from e

        if not response.choices:
            raise TransportError("Completion returned no choices")

        return response.choices[0].message.content or ""

    @property
    def model(self) -> str:
        """Return the model being used."""
        return self._model
