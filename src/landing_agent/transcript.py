# transcript.py
# Append-only conversation log sent to the chat endpoint on every turn.
#
# Entries are plain dicts in OpenAI chat format. Assistant entries keep every
# field the endpoint returned. The only rule enforced here:
# every tool call of the latest assistant entry gets exactly one tool entry,
# in emission order, before the model is asked again.

from typing import Any

from landing_agent.models import ToolInvocation


class TranscriptError(Exception):
    """Raised when a tool answer does not line up with the pending tool calls."""


class Transcript:
    def __init__(self, system_prompt: str, user_prompt: str) -> None:
        self._messages: list[dict[str, Any]] = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        self._pending: list[str] = []

    @property
    def messages(self) -> list[dict[str, Any]]:
        """Shallow copy, safe to hand to the client."""
        return list(self._messages)

    @property
    def pending(self) -> list[str]:
        """Ids of tool calls still waiting for an answer, in emission order."""
        return list(self._pending)

    def __len__(self) -> int:
        return len(self._messages)

    def add_assistant(self, message: dict[str, Any], invocations: list[ToolInvocation]) -> None:
        """
        Record an assistant reply with every field the endpoint returned
        (reasoning included). Its tool calls are taken from `invocations` so
        that their ids match the answers recorded after it.
        """
        self.ensure_settled()
        entry = {key: value for key, value in message.items() if key != "tool_calls"}
        entry["role"] = "assistant"
        entry.setdefault("content", None)
        if invocations:
            entry["tool_calls"] = [inv.to_message_part() for inv in invocations]
        self._messages.append(entry)
        self._pending = [inv.id for inv in invocations]

    def add_tool_result(self, tool_call_id: str, content: str) -> None:
        """Record the JSON-encoded result (or error) for the next pending call."""
        if not self._pending:
            raise TranscriptError(f"No tool call is waiting for an answer (got '{tool_call_id}').")
        expected = self._pending[0]
        if tool_call_id != expected:
            raise TranscriptError(
                f"Tool answer out of order: expected '{expected}', got '{tool_call_id}'."
            )
        self._messages.append({"role": "tool", "tool_call_id": tool_call_id, "content": content})
        self._pending.pop(0)

    def ensure_settled(self) -> None:
        if self._pending:
            raise TranscriptError(f"Unanswered tool calls: {', '.join(self._pending)}")
