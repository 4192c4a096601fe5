import logging
import pytest
from unittest.mock import MagicMock, patch

import httpx

from landing_agent.books import SEARCH_HEADERS, SEARCH_URL, fallback_books, fetch_book_recommendations
from landing_agent.models import PLACEHOLDER_COVER


def _response(payload) -> MagicMock:
    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = payload
    return response


def _product(n: int) -> dict:
    return {
        "id": n,
        "title": f"Title {n}",
        "authors": [{"name": f"Writer {n}"}, {"name": "Co Author"}],
        "formats": [
            {"type": "audiobook"},
            {"type": "ebook", "img_url": f"https://img.nextory.com/{n}.jpg?w=200&h=300"},
        ],
        "average_rating": 4.5,
        "number_of_rates": 120,
    }


# ---------------------------------------------------------------------------
# Fallback list
# ---------------------------------------------------------------------------


def test_fallback_books_shape():
    books = fallback_books("romance")

    assert [b.title for b in books] == [f"Popular romance Book {n}" for n in range(1, 7)]
    assert [b.author for b in books] == [
        "Author One", "Author Two", "Author Three", "Author Four", "Author Five", "Author Six",
    ]
    assert [b.id for b in books] == [1, 2, 3, 4, 5, 6]
    assert all(b.cover == PLACEHOLDER_COVER for b in books)


@patch("landing_agent.books.httpx.get")
def test_network_failure_returns_fallback(mock_get):
    mock_get.side_effect = httpx.ConnectError("connection refused")
    assert fetch_book_recommendations("romance") == fallback_books("romance")


@patch("landing_agent.books.httpx.get")
def test_http_error_status_returns_fallback(mock_get):
    response = _response({})
    response.raise_for_status.side_effect = httpx.HTTPError("503 Service Unavailable")
    mock_get.return_value = response

    assert fetch_book_recommendations("romance") == fallback_books("romance")


@pytest.mark.parametrize(
    "payload",
    [
        {"items": []},
        {"products": None},
        {"products": "not-a-list"},
        {"products": []},
        ["unexpected", "list"],
    ],
)
@patch("landing_agent.books.httpx.get")
def test_unusable_body_returns_fallback(mock_get, payload):
    mock_get.return_value = _response(payload)
    assert fetch_book_recommendations("romance") == fallback_books("romance")


@patch("landing_agent.books.httpx.get")
def test_invalid_json_returns_fallback(mock_get):
    response = _response(None)
    response.json.side_effect = ValueError("Expecting value")
    mock_get.return_value = response

    assert fetch_book_recommendations("romance") == fallback_books("romance")


@patch("landing_agent.books.httpx.get")
def test_fallback_logs_warning(mock_get, caplog):
    mock_get.return_value = _response({"products": []})

    with caplog.at_level(logging.WARNING, logger="landing_agent.books"):
        fetch_book_recommendations("romance")

    assert "fallback" in caplog.text


# ---------------------------------------------------------------------------
# Successful lookup
# ---------------------------------------------------------------------------


@patch("landing_agent.books.httpx.get")
def test_products_mapped_to_books(mock_get):
    mock_get.return_value = _response({"products": [_product(1)]})

    [book] = fetch_book_recommendations("romance")

    assert book.id == 1
    assert book.title == "Title 1"
    assert book.author == "Writer 1"
    assert book.cover == "https://img.nextory.com/1.jpg"
    assert book.rating == 4.5
    assert book.ratings_count == 120


@patch("landing_agent.books.httpx.get")
def test_missing_fields_get_defaults(mock_get):
    mock_get.return_value = _response({"products": [{"id": 9}]})

    [book] = fetch_book_recommendations("romance")

    assert book.title == "Unknown Title"
    assert book.author == "Unknown Author"
    assert book.cover == PLACEHOLDER_COVER
    assert book.rating == 0


@patch("landing_agent.books.httpx.get")
def test_at_most_twelve_books(mock_get):
    mock_get.return_value = _response({"products": [_product(n) for n in range(30)]})
    assert len(fetch_book_recommendations("romance")) == 12


@patch("landing_agent.books.httpx.get")
def test_request_parameters(mock_get):
    mock_get.return_value = _response({"products": [_product(1)]})

    fetch_book_recommendations("thriller")

    args, kwargs = mock_get.call_args
    assert args[0] == SEARCH_URL
    assert kwargs["params"]["search_phrase"] == "thriller books"
    assert kwargs["params"]["per"] == 12
    assert kwargs["params"]["format"] == "ebook,audiobook"
    assert kwargs["headers"] == SEARCH_HEADERS
