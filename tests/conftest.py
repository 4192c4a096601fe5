import pytest
from openai.types.chat import ChatCompletion

from landing_agent.config import AgentConfig


def tool_call(call_id: str, name: str, arguments: str = "{}") -> dict:
    return {"id": call_id, "type": "function", "function": {"name": name, "arguments": arguments}}


def chat_response(
    content: str | None = None,
    tool_calls: list | None = None,
    refusal: str | None = None,
    **extra,
) -> ChatCompletion:
    """A parsed chat completion. Extra keyword arguments land on the message."""
    message = {
        "role": "assistant",
        "content": content,
        "refusal": refusal,
        "tool_calls": tool_calls,
        **extra,
    }
    return ChatCompletion.model_validate(
        {
            "id": "gen-test",
            "object": "chat.completion",
            "created": 1760000000,
            "model": "moonshotai/kimi-k2-thinking",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "tool_calls" if tool_calls else "stop",
                    "message": message,
                }
            ],
        }
    )


@pytest.fixture
def make_tool_call():
    return tool_call


@pytest.fixture
def make_response():
    return chat_response


@pytest.fixture
def config(tmp_path):
    return AgentConfig(api_key="test-key", project_root=tmp_path)
