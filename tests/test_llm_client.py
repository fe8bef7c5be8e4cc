"""Tests for CompletionClient."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from groq import APIConnectionError

from todo_assistant.errors import TransportError
from todo_assistant.llm import DEFAULT_MODEL, CompletionClient


def make_response(content):
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


@pytest.fixture
def groq_client() -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_complete_requests_json_mode(groq_client: MagicMock) -> None:
    groq_client.chat.completions.create.return_value = make_response('{"type": "output"}')
    client = CompletionClient(groq_client, model="my-model")
    messages = [{"role": "system", "content": "sys"}, {"role": "user", "content": "hi"}]

    text = await client.complete(messages)

    assert text == '{"type": "output"}'
    groq_client.chat.completions.create.assert_awaited_once_with(
        model="my-model",
        messages=messages,
        response_format={"type": "json_object"},
    )


@pytest.mark.asyncio
async def test_none_content_becomes_empty(groq_client: MagicMock) -> None:
    groq_client.chat.completions.create.return_value = make_response(None)
    assert await CompletionClient(groq_client).complete([]) == ""


@pytest.mark.asyncio
async def test_api_error_wrapped(groq_client: MagicMock) -> None:
    request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")
    groq_client.chat.completions.create.side_effect = APIConnectionError(request=request)

    with pytest.raises(TransportError):
        await CompletionClient(groq_client).complete([])


@pytest.mark.asyncio
async def test_no_choices(groq_client: MagicMock) -> None:
    response = MagicMock()
    response.choices = []
    groq_client.chat.completions.create.return_value = response

    with pytest.raises(TransportError, match="no choices"):
        await CompletionClient(groq_client).complete([])


def test_default_model(groq_client: MagicMock) -> None:
    assert CompletionClient(groq_client).model == DEFAULT_MODEL
