# config.py
# Run configuration for the landing page agent.
#
# One frozen value, built by run.py and handed to the harness and the tool
# dispatcher. Nothing else in the package reads model or routing settings.

from pathlib import Path

from openai import OpenAI
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MODEL = "moonshotai/kimi-k2-thinking"
DEFAULT_PROVIDER_ORDER = ("moonshotai/int4",)
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class AgentConfig(BaseModel):
    """Everything the loop and the tools need to talk to OpenRouter and the repo."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1)
    model: str = DEFAULT_MODEL
    provider_order: tuple[str, ...] = DEFAULT_PROVIDER_ORDER
    allow_fallbacks: bool = False
    base_url: str = OPENROUTER_BASE_URL
    referer: str = "https://github.com/booktok-hype-hub"
    app_title: str = "BookTok Landing Page Agent"

    temperature: float = 0.7
    max_tokens: int = 4096
    max_iterations: int = Field(default=15, ge=1)

    project_root: Path = Field(default_factory=Path.cwd)
    remote: str = "origin"
    base_branch: str = "main"

    def provider_routing(self) -> dict:
        """OpenRouter provider preferences, sent via extra_body."""
        return {
            "provider": {
                "order": list(self.provider_order),
                "allow_fallbacks": self.allow_fallbacks,
            }
        }

    def default_headers(self) -> dict[str, str]:
        return {"HTTP-Referer": self.referer, "X-Title": self.app_title}


def make_client(config: AgentConfig) -> OpenAI:
    return OpenAI(
        base_url=config.base_url,
        api_key=config.api_key,
        default_headers=config.default_headers(),
    )
