# harness.py
# Landing page agent harness
#
# The harness owns the transcript and all control flow. The model only ever
# answers; every side effect happens here, through the tool dispatcher.
#
# Control flow, repeated until the model stops asking for tools or the
# iteration ceiling is hit:
#   transcript → model (tool_choice=auto) → append reply
#   → run each requested tool in order → append one tool message per request
#
# Tool failures become {"error": ...} transcript content. Endpoint failures
# are not caught here.
#
# All terminal output is delegated to display.py; no formatting here.

import json
from typing import Any

from dotenv import load_dotenv
from openai import OpenAI

from landing_agent import display, prompts
from landing_agent.config import AgentConfig, make_client
from landing_agent.models import RunSummary, ToolInvocation
from landing_agent.registry import as_request_tools
from landing_agent.tools import ToolDispatcher
from landing_agent.transcript import Transcript

load_dotenv()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _invocation(index: int, call: Any) -> ToolInvocation:
    # A call without an id is answered under a stand-in id. A non-function
    # call keeps its type as the name, so dispatch reports it as unknown.
    call_id = getattr(call, "id", None) or f"call_{index}"
    function = getattr(call, "function", None)
    if function is None:
        return ToolInvocation(id=call_id, name=str(getattr(call, "type", None) or "unknown"))
    return ToolInvocation(
        id=call_id,
        name=function.name or "",
        arguments=function.arguments or "",
    )


def _invocations(message: Any) -> list[ToolInvocation]:
    """Pull tool calls off an SDK message object."""
    calls = getattr(message, "tool_calls", None) or []
    return [_invocation(index, call) for index, call in enumerate(calls)]


def _assistant_entry(message: Any) -> dict[str, Any]:
    """The reply as sent back to the endpoint: every returned field except tool_calls."""
    return message.model_dump(exclude={"tool_calls"}, exclude_none=True)


# ---------------------------------------------------------------------------
# Agent
# ---------------------------------------------------------------------------


class LandingPageAgent:
    """
    Bounded tool-calling loop that builds one landing page per run.

    Example:
        agent = LandingPageAgent(AgentConfig(api_key="sk-or-..."))
        summary = agent.run("romance books")
    """

    def __init__(
        self,
        config: AgentConfig,
        client: OpenAI | None = None,
        dispatcher: ToolDispatcher | None = None,
    ) -> None:
        self._config = config
        self._client = client or make_client(config)
        self._dispatcher = dispatcher or ToolDispatcher(config, self._client)
        self._tools = as_request_tools()
        self.transcript: Transcript | None = None

    # ------------------------------------------------------------------
    # Model call
    # ------------------------------------------------------------------

    def call_model(self, transcript: Transcript) -> Any:
        """One chat completion over the whole transcript. Errors propagate."""
        transcript.ensure_settled()
        response = self._client.chat.completions.create(
            model=self._config.model,
            messages=transcript.messages,
            tools=self._tools,
            tool_choice="auto",
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
            extra_body=self._config.provider_routing(),
        )
        return response.choices[0].message

    # ------------------------------------------------------------------
    # Dispatch boundary
    # ------------------------------------------------------------------

    def dispatch(self, invocation: ToolInvocation) -> str:
        """
        Run one tool request and return the JSON text for its tool message.

        Nothing raised by argument parsing, validation, lookup or the tool
        itself escapes; it comes back as {"error": message}.
        """
        display.tool_executing(invocation.name, invocation.arguments)
        try:
            args = invocation.parse_arguments()
            result = self._dispatcher.execute(invocation.name, args)
            content = json.dumps(result, ensure_ascii=False)
        except Exception as exc:
            display.tool_error(invocation.name, str(exc))
            return json.dumps({"error": str(exc)}, ensure_ascii=False)

        display.tool_result(result)
        return content

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, theme: str) -> RunSummary:
        """Drive the model until it stops requesting tools or the ceiling is reached."""
        display.theme_received(theme)

        transcript = Transcript(prompts.AGENT_SYSTEM_PROMPT, prompts.agent_user_prompt(theme))
        self.transcript = transcript

        iterations = 0
        tool_calls = 0
        stopped_by_model = False

        while iterations < self._config.max_iterations:
            iterations += 1
            display.iteration_start(iterations, self._config.max_iterations)

            message = self.call_model(transcript)
            invocations = _invocations(message)
            transcript.add_assistant(_assistant_entry(message), invocations)
            display.agent_message(message.content, getattr(message, "refusal", None))

            if not invocations:
                stopped_by_model = True
                break

            for invocation in invocations:
                transcript.add_tool_result(invocation.id, self.dispatch(invocation))
                tool_calls += 1

        summary = RunSummary(
            iterations=iterations,
            stopped_by_model=stopped_by_model,
            tool_calls=tool_calls,
        )
        display.run_finished(summary)
        return summary
