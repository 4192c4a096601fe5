# books.py
# Book recommendations from the Nextory discovery API.
#
# Any failure (transport, status, body shape, empty result) degrades to a
# fixed list of six placeholder books so page generation can always proceed.

import logging
from typing import Any

import httpx

from landing_agent.models import MAX_PAGE_BOOKS, PLACEHOLDER_COVER, Book

logger = logging.getLogger(__name__)

SEARCH_URL = "https://apistaging.nextory.com/discovery/v1/search/products/books"

SEARCH_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
    "x-app-version": "52.102",
    "x-application-id": "203",
    "x-country-code": "SE",
    "x-device-id": "2ad15bd7-28a5-41ae-a3a9-35087b9ad077",
    "x-locale": "sv_SE",
    "x-model": "web",
}

_FALLBACK_AUTHORS = ("One", "Two", "Three", "Four", "Five", "Six")


def fallback_books(search_term: str) -> list[Book]:
    return [
        Book(
            id=n,
            title=f"Popular {search_term} Book {n}",
            author=f"Author {word}",
            cover=PLACEHOLDER_COVER,
        )
        for n, word in enumerate(_FALLBACK_AUTHORS, start=1)
    ]


def _cover_url(product: dict[str, Any]) -> str:
    for fmt in product.get("formats") or []:
        img_url = fmt.get("img_url")
        if img_url:
            return img_url.split("?")[0]
    return PLACEHOLDER_COVER


def _to_book(product: dict[str, Any]) -> Book:
    authors = product.get("authors") or []
    return Book(
        id=product.get("id"),
        title=product.get("title") or "Unknown Title",
        author=authors[0]["name"] if authors else "Unknown Author",
        cover=_cover_url(product),
        rating=product.get("average_rating") or 0,
        ratings_count=product.get("number_of_rates") or 0,
    )


def fetch_book_recommendations(search_term: str, timeout: float | None = None) -> list[Book]:
    """Search the catalogue for `search_term` and return at most 12 books."""
    params = {
        "search_phrase": f"{search_term} books",
        "page": 0,
        "per": MAX_PAGE_BOOKS,
        "format": "ebook,audiobook",
        "sort": "relevance",
    }
    logger.info("Fetching book recommendations for %r", search_term)

    try:
        response = httpx.get(SEARCH_URL, params=params, headers=SEARCH_HEADERS, timeout=timeout)
        response.raise_for_status()
        data = response.json()

        products = data.get("products") if isinstance(data, dict) else None
        if not isinstance(products, list):
            logger.warning("Response has no products array, using fallback books")
            return fallback_books(search_term)
        if not products:
            logger.warning("Empty products array for %r, using fallback books", search_term)
            return fallback_books(search_term)

        books = [_to_book(product) for product in products[:MAX_PAGE_BOOKS]]
    except Exception as exc:
        logger.warning("Book lookup failed (%s), using fallback books", exc)
        return fallback_books(search_term)

    logger.info("Fetched %d book recommendations", len(books))
    return books
