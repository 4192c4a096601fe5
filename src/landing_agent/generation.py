# generation.py
# Forced-submission sub-calls used by the keyword and content tools.
#
# The model is told to call exactly one submit_* tool. request_submission()
# never raises: a usable submission comes back as StructuredResult, anything
# else as FallbackResult. The *_from() resolvers turn either branch into the
# value the tool returns, so both paths are testable without a network.

import json
import logging
from dataclasses import dataclass

from openai import OpenAI
from pydantic import BaseModel

from landing_agent import prompts
from landing_agent.config import AgentConfig
from landing_agent.models import (
    MAX_PAGE_BOOKS,
    Book,
    ContentSubmission,
    Feature,
    KeywordSubmission,
    PageContent,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Outcome types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StructuredResult:
    """The model returned the requested submission and it validated."""

    payload: BaseModel


@dataclass(frozen=True)
class FallbackResult:
    """No usable submission. `reason` is kept for logging only."""

    reason: str


Submission = StructuredResult | FallbackResult


# ---------------------------------------------------------------------------
# Forced tool call
# ---------------------------------------------------------------------------


def request_submission(
    client: OpenAI,
    config: AgentConfig,
    messages: list[dict],
    tool: dict,
    schema: type[BaseModel],
) -> Submission:
    tool_name = tool["function"]["name"]
    try:
        response = client.chat.completions.create(
            model=config.model,
            messages=messages,
            tools=[tool],
            tool_choice={"type": "function", "function": {"name": tool_name}},
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            extra_body=config.provider_routing(),
        )
        tool_calls = response.choices[0].message.tool_calls or []
        call = tool_calls[0] if tool_calls else None
        if call is None or call.function.name != tool_name:
            return FallbackResult(reason=f"No {tool_name} tool call found in response")

        payload = schema.model_validate(json.loads(call.function.arguments))
    except Exception as exc:
        return FallbackResult(reason=f"{type(exc).__name__}: {exc}")

    return StructuredResult(payload=payload)


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------


def fallback_keywords(theme: str) -> list[str]:
    return [
        theme.lower(),
        f"best {theme}",
        f"{theme} audiobooks",
        f"{theme} ebooks",
        f"top {theme}",
        f"popular {theme}",
        f"{theme} recommendations",
        f"trending {theme}",
    ]


def keywords_from(theme: str, outcome: Submission) -> list[str]:
    if isinstance(outcome, StructuredResult):
        return list(outcome.payload.keywords)
    logger.warning("Keyword generation fell back to defaults: %s", outcome.reason)
    return fallback_keywords(theme)


def generate_keywords(client: OpenAI, config: AgentConfig, theme: str) -> list[str]:
    messages = [
        {"role": "system", "content": prompts.KEYWORDS_SYSTEM_PROMPT},
        {"role": "user", "content": prompts.keywords_user_prompt(theme)},
    ]
    outcome = request_submission(
        client, config, messages, prompts.SUBMIT_KEYWORDS_TOOL, KeywordSubmission
    )
    return keywords_from(theme, outcome)


# ---------------------------------------------------------------------------
# Page content
# ---------------------------------------------------------------------------


def fallback_content(theme: str, books: list[Book]) -> PageContent:
    """Deterministic copy built from the theme alone."""
    capitalized = theme[:1].upper() + theme[1:]
    return PageContent(
        title=f"Discover the Best {capitalized} on Nextory",
        subtitle=(
            f"Stream unlimited {theme} audiobooks and e-books. "
            "Start your free 30-day trial today."
        ),
        adTitle=f"Best {capitalized} Audiobooks 2025 - Listen on Nextory",
        adDescription=(
            f"Discover trending {theme} everyone is talking about. "
            f"Unlimited streaming of bestselling {theme}. Start your free trial today."
        ),
        heroGridTitle=f"Popular {capitalized} Right Now",
        features=[
            Feature(
                title="Unlimited Access",
                description=f"Listen to thousands of {theme} audiobooks and e-books",
            ),
            Feature(
                title="New Releases",
                description=f"Get access to the latest {theme} as soon as they're released",
            ),
            Feature(
                title="Offline Listening",
                description=f"Download your favorite {theme} and listen anywhere",
            ),
        ],
        books=books[:MAX_PAGE_BOOKS],
    )


def content_from(theme: str, books: list[Book], outcome: Submission) -> PageContent:
    if isinstance(outcome, StructuredResult):
        submitted = outcome.payload.model_dump()
        return PageContent(**submitted, books=books[:MAX_PAGE_BOOKS])
    logger.warning("Content generation fell back to defaults: %s", outcome.reason)
    return fallback_content(theme, books)


def generate_content(
    client: OpenAI,
    config: AgentConfig,
    theme: str,
    keywords: list[str],
    books: list[Book],
) -> PageContent:
    messages = [
        {"role": "system", "content": prompts.content_system_prompt(keywords)},
        {"role": "user", "content": prompts.content_user_prompt(theme, books)},
    ]
    outcome = request_submission(
        client, config, messages, prompts.SUBMIT_CONTENT_TOOL, ContentSubmission
    )
    return content_from(theme, books, outcome)
