# tools.py
# Tool dispatcher: maps a registered tool name and its argument object onto
# a handler. The harness calls execute() and never the handlers directly.
#
# Handlers validate their arguments with the pydantic models in models.py and
# return JSON-ready values. Errors propagate; turning them into transcript
# content is the harness's job.

import logging
import os
from collections.abc import Callable
from typing import Any

from openai import OpenAI

from landing_agent import books, generation, templates, vcs
from landing_agent.config import AgentConfig
from landing_agent.models import (
    CommitArgs,
    CreateBranchArgs,
    FetchBooksArgs,
    GenerateContentArgs,
    GenerateKeywordsArgs,
    PullRequestArgs,
    UpdateRoutesArgs,
    UpdateSearchResultsArgs,
    WritePageArgs,
)
from landing_agent.registry import TOOL_NAMES

logger = logging.getLogger(__name__)


class ToolNotFoundError(Exception):
    """Raised when the model requests a tool absent from the registry."""


class ToolDispatcher:
    """Runs registered tools against the project in `config.project_root`."""

    def __init__(
        self,
        config: AgentConfig,
        client: OpenAI,
        repo: vcs.GitRepository | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._repo = repo or vcs.GitRepository(config.project_root)
        self._handlers: dict[str, Callable[[dict], Any]] = {
            "generate_keywords": self._generate_keywords,
            "fetch_book_recommendations": self._fetch_book_recommendations,
            "generate_content": self._generate_content,
            "write_page_file": self._write_page_file,
            "update_app_routes": self._update_app_routes,
            "update_search_results": self._update_search_results,
            "create_git_branch": self._create_git_branch,
            "commit_and_push": self._commit_and_push,
            "create_pull_request": self._create_pull_request,
        }
        if set(self._handlers) != TOOL_NAMES:
            raise RuntimeError("Tool registry and dispatcher handlers disagree")

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def execute(self, name: str, args: dict) -> Any:
        handler = self._handlers.get(name)
        if handler is None:
            raise ToolNotFoundError(f"Unknown tool: {name}")
        logger.debug("Executing %s with %s", name, args)
        return handler(args)

    # ------------------------------------------------------------------
    # Content tools
    # ------------------------------------------------------------------

    def _generate_keywords(self, args: dict) -> list[str]:
        params = GenerateKeywordsArgs.model_validate(args)
        return generation.generate_keywords(self._client, self._config, params.theme)

    def _fetch_book_recommendations(self, args: dict) -> list[dict]:
        params = FetchBooksArgs.model_validate(args)
        return [book.model_dump() for book in books.fetch_book_recommendations(params.search_term)]

    def _generate_content(self, args: dict) -> dict:
        params = GenerateContentArgs.model_validate(args)
        content = generation.generate_content(
            self._client, self._config, params.theme, params.keywords, params.books
        )
        return content.model_dump()

    # ------------------------------------------------------------------
    # File tools
    # ------------------------------------------------------------------

    def _write_page_file(self, args: dict) -> dict:
        params = WritePageArgs.model_validate(args)
        path = templates.page_path(self._config.project_root, params.page_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(templates.render_page(params.page_name, params.content), encoding="utf-8")
        return {"success": True, "path": str(path)}

    def _update_app_routes(self, args: dict) -> dict:
        params = UpdateRoutesArgs.model_validate(args)
        app_path = self._config.project_root / "src" / "App.tsx"
        source = app_path.read_text(encoding="utf-8")
        app_path.write_text(
            templates.add_route(source, params.page_name, params.route_path), encoding="utf-8"
        )
        return {"success": True}

    def _update_search_results(self, args: dict) -> dict:
        params = UpdateSearchResultsArgs.model_validate(args)
        search_path = self._config.project_root / "src" / "pages" / "SearchResults.tsx"
        source = search_path.read_text(encoding="utf-8")
        updated = templates.add_search_ad(
            source, params.variable_name, params.keywords, params.ad_content, params.route_path
        )
        search_path.write_text(updated, encoding="utf-8")
        return {"success": True}

    # ------------------------------------------------------------------
    # Version control tools
    # ------------------------------------------------------------------

    def _create_git_branch(self, args: dict) -> dict:
        params = CreateBranchArgs.model_validate(args)
        self._repo.create_branch(params.branch_name)
        return {"success": True, "branch": params.branch_name}

    def _commit_and_push(self, args: dict) -> dict:
        params = CommitArgs.model_validate(args)
        self._repo.add_all()
        self._repo.commit(params.commit_message)
        pushed = self._repo.push(params.branch_name)
        return {"success": True, "pushed": pushed}

    def _create_pull_request(self, args: dict) -> dict:
        params = PullRequestArgs.model_validate(args)
        return vcs.create_pull_request(
            self._repo,
            title=params.title,
            body=params.body,
            head=params.branch_name,
            base=self._config.base_branch,
            token=os.getenv("GITHUB_TOKEN"),
            remote=self._config.remote,
        )
