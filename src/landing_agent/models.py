# models.py
# Data contracts for the landing page agent.
# No business logic lives here; pure schema and validation.

import json
from typing import Any

from pydantic import BaseModel, Field

MAX_PAGE_BOOKS = 12
PLACEHOLDER_COVER = "/book-covers/placeholder.svg"


# ---------------------------------------------------------------------------
# Page content
# ---------------------------------------------------------------------------


class Book(BaseModel):
    """A single title shown in the landing page grid."""

    id: int | str | None = None
    title: str = "Unknown Title"
    author: str = "Unknown Author"
    cover: str = PLACEHOLDER_COVER
    rating: float = 0
    ratings_count: int = 0


class Feature(BaseModel):
    title: str
    description: str


class AdContent(BaseModel):
    """Sponsored result injected into the search-results page."""

    title: str
    description: str
    url: str | None = None


class PageContent(BaseModel):
    """Copy for one landing page. Field names match the submit_content tool."""

    title: str
    subtitle: str
    adTitle: str
    adDescription: str
    heroGridTitle: str = "Popular Titles Available Now"
    features: list[Feature] = Field(default_factory=list)
    books: list[Book] = Field(default_factory=list, max_length=MAX_PAGE_BOOKS)


class KeywordSubmission(BaseModel):
    keywords: list[str]


class ContentSubmission(BaseModel):
    """Arguments of a submit_content call. Books are attached afterwards."""

    title: str
    subtitle: str
    adTitle: str
    adDescription: str
    heroGridTitle: str = "Popular Titles Available Now"
    features: list[Feature]


# ---------------------------------------------------------------------------
# Tool arguments
# ---------------------------------------------------------------------------


class GenerateKeywordsArgs(BaseModel):
    theme: str


class FetchBooksArgs(BaseModel):
    search_term: str


class GenerateContentArgs(BaseModel):
    theme: str
    keywords: list[str]
    books: list[Book]


class WritePageArgs(BaseModel):
    page_name: str = Field(..., pattern=r"^[A-Z][A-Za-z0-9]*$")
    content: PageContent


class UpdateRoutesArgs(BaseModel):
    page_name: str = Field(..., pattern=r"^[A-Z][A-Za-z0-9]*$")
    route_path: str = Field(..., pattern=r"^/")


class UpdateSearchResultsArgs(BaseModel):
    variable_name: str = Field(..., pattern=r"^[a-z][A-Za-z0-9]*Keywords$")
    keywords: list[str]
    ad_content: AdContent
    route_path: str = Field(..., pattern=r"^/")


class CreateBranchArgs(BaseModel):
    branch_name: str = Field(..., min_length=1)


class CommitArgs(BaseModel):
    commit_message: str = Field(..., min_length=1)
    branch_name: str


class PullRequestArgs(BaseModel):
    title: str
    body: str
    branch_name: str


# ---------------------------------------------------------------------------
# Transcript and run records
# ---------------------------------------------------------------------------


class ToolInvocation(BaseModel):
    """A tool call requested by the model, arguments still as raw text."""

    id: str
    name: str
    arguments: str = ""

    def parse_arguments(self) -> dict[str, Any]:
        if not self.arguments.strip():
            return {}
        args = json.loads(self.arguments)
        if not isinstance(args, dict):
            raise ValueError(f"Arguments for '{self.name}' must be a JSON object.")
        return args

    def to_message_part(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.arguments},
        }


class RunSummary(BaseModel):
    """What happened during one agent run."""

    iterations: int
    stopped_by_model: bool = Field(
        ..., description="True when the model ended the run by requesting no tools."
    )
    tool_calls: int = 0
