# registry.py
# Tool declarations offered to the model on every turn of the main loop.
#
# Static data in OpenAI function-tool form. The dispatcher in tools.py maps
# the same names onto handlers; the two must stay in step.

import copy
from types import MappingProxyType


def _tool(name: str, description: str, properties: dict, required: list[str]) -> MappingProxyType:
    return MappingProxyType(
        {
            "type": "function",
            "function": {
                "name": name,
                "description": description,
                "parameters": {
                    "type": "object",
                    "properties": properties,
                    "required": required,
                },
            },
        }
    )


_STRING_LIST = {"type": "array", "items": {"type": "string"}}
_PAGE_NAME = {"type": "string", "pattern": r"^[A-Z][A-Za-z0-9]*$"}
_ROUTE_PATH = {"type": "string", "pattern": "^/"}

# Object schemas below carry the same required fields as the pydantic models
# in models.py that validate them.
_BOOK = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "author": {"type": "string"},
        "cover": {"type": "string"},
        "rating": {"type": "number"},
        "ratings_count": {"type": "integer"},
    },
}
_FEATURE = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
    },
    "required": ["title", "description"],
}
_PAGE_CONTENT = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "subtitle": {"type": "string"},
        "adTitle": {"type": "string"},
        "adDescription": {"type": "string"},
        "heroGridTitle": {"type": "string"},
        "features": {"type": "array", "items": _FEATURE},
        "books": {"type": "array", "items": _BOOK, "maxItems": 12},
    },
    "required": ["title", "subtitle", "adTitle", "adDescription"],
}
_AD_CONTENT = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "url": {"type": "string"},
        "description": {"type": "string"},
    },
    "required": ["title", "description"],
}

TOOL_SPECS = (
    _tool(
        "generate_keywords",
        "Generate SEO keywords for the landing page based on the theme",
        {
            "theme": {
                "type": "string",
                "description": 'The landing page theme (e.g., "romance books", "thriller audiobooks")',
            }
        },
        ["theme"],
    ),
    _tool(
        "fetch_book_recommendations",
        "Fetch book recommendations from the API",
        {
            "search_term": {
                "type": "string",
                "description": "Search term for book recommendations",
            }
        },
        ["search_term"],
    ),
    _tool(
        "generate_content",
        "Generate content for the landing page (title, subtitle, ad copy, features)",
        {
            "theme": {"type": "string", "description": "The landing page theme"},
            "keywords": {**_STRING_LIST, "description": "SEO keywords"},
            "books": {"type": "array", "items": _BOOK, "description": "Book recommendations"},
        },
        ["theme", "keywords", "books"],
    ),
    _tool(
        "write_page_file",
        "Write the main page component file",
        {
            "page_name": {
                **_PAGE_NAME,
                "description": 'CamelCase page name (e.g., "Romance", "Thriller")',
            },
            "content": {
                **_PAGE_CONTENT,
                "description": "Page content including title, subtitle, books, features",
            },
        },
        ["page_name", "content"],
    ),
    _tool(
        "update_app_routes",
        "Update App.tsx with new route",
        {
            "page_name": {**_PAGE_NAME, "description": "CamelCase page name"},
            "route_path": {**_ROUTE_PATH, "description": 'URL path (e.g., "/romance")'},
        },
        ["page_name", "route_path"],
    ),
    _tool(
        "update_search_results",
        "Update SearchResults.tsx with keywords and ad",
        {
            "variable_name": {
                "type": "string",
                "pattern": r"^[a-z][A-Za-z0-9]*Keywords$",
                "description": 'Variable name for keywords (e.g., "romanceKeywords")',
            },
            "keywords": {**_STRING_LIST, "description": "SEO keywords array"},
            "ad_content": {**_AD_CONTENT, "description": "Ad content"},
            "route_path": {**_ROUTE_PATH, "description": "Route path to link to"},
        },
        ["variable_name", "keywords", "ad_content", "route_path"],
    ),
    _tool(
        "create_git_branch",
        "Create a new git branch for the landing page",
        {
            "branch_name": {
                "type": "string",
                "description": 'Branch name (e.g., "feat/landing-romance")',
            }
        },
        ["branch_name"],
    ),
    _tool(
        "commit_and_push",
        "Commit changes and push to remote",
        {
            "commit_message": {"type": "string", "description": "Commit message"},
            "branch_name": {"type": "string", "description": "Branch name to push"},
        },
        ["commit_message", "branch_name"],
    ),
    _tool(
        "create_pull_request",
        "Create a pull request on GitHub",
        {
            "title": {"type": "string", "description": "PR title"},
            "body": {"type": "string", "description": "PR description"},
            "branch_name": {"type": "string", "description": "Source branch name"},
        },
        ["title", "body", "branch_name"],
    ),
)

TOOL_NAMES = frozenset(tool["function"]["name"] for tool in TOOL_SPECS)


def as_request_tools() -> list[dict]:
    """Deep copy of the registry for the chat completion request body."""
    return [copy.deepcopy(dict(tool)) for tool in TOOL_SPECS]
