import asyncio
import logging
from typing import List

import httpx
import soupsieve as sv
from bs4 import BeautifulSoup

from echo3ai.core.config import settings
from echo3ai.core.errors import NetworkError, ParseError
from echo3ai.schemas.search import SearchResult
from echo3ai.services.http import get_client

logger = logging.getLogger(__name__)


def _compile_selector(name: str, selector: str):
    try:
        return sv.compile(selector)
    except sv.SelectorSyntaxError as e:
        raise ParseError(f"Failed to parse DDG {name} selector") from e


RESULT_SELECTOR = _compile_selector("result", ".result")
TITLE_SELECTOR = _compile_selector("title", ".result__a")
SNIPPET_SELECTOR = _compile_selector("snippet", ".result__snippet")
PARAGRAPH_SELECTOR = _compile_selector("paragraph", "p")


def parse_results(html: str, limit: int) -> List[SearchResult]:
    """Parses a DuckDuckGo HTML results page into search results.

    At most `limit` result containers are read, in document order. A result without a
    title or without a link is dropped.

    Args:
        html (str): The results page body.
        limit (int): Maximum number of result containers to read.

    Returns:
        List[SearchResult]: The retained results.
    """
    if limit <= 0:
        return []

    soup = BeautifulSoup(html, "html.parser")
    results: List[SearchResult] = []

    for element in RESULT_SELECTOR.select(soup, limit=limit):
        title_el = TITLE_SELECTOR.select_one(element)
        snippet_el = SNIPPET_SELECTOR.select_one(element)

        title = title_el.get_text().strip() if title_el else ""
        link = title_el.get("href") if title_el else None
        snippet = snippet_el.get_text().strip() if snippet_el else ""

        if title and link is not None:
            results.append(SearchResult(title=title, link=link, snippet=snippet))

    return results


async def search(query: str, limit: int) -> List[SearchResult]:
    """Searches DuckDuckGo's HTML endpoint and returns the top results.

    Args:
        query (str): The search query.
        limit (int): Maximum number of results.

    Raises:
        NetworkError: If the request fails or the response status is not successful.

    Returns:
        List[SearchResult]: Up to `limit` results in page order.
    """
    logger.info(f"Performing DuckDuckGo search for: '{query[:100]}'")
    client = get_client()

    try:
        response = await client.get(
            settings.search_url,
            params={"q": query},
            headers={"User-Agent": settings.user_agent},
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP error {e.response.status_code} for search '{query[:100]}': {e}")
        raise NetworkError(f"Search request failed: {e}", e.response.status_code) from e
    except httpx.RequestError as e:
        logger.error(f"Network error for search '{query[:100]}': {e}")
        raise NetworkError(f"Search request failed: {e}") from e

    results = parse_results(response.text, limit)
    logger.info(f"DuckDuckGo search completed, found {len(results)} results.")
    return results


def _is_text_content(content_type: str) -> bool:
    # A missing header is treated as HTML
    if not content_type:
        return True
    media_type = content_type.split(";")[0].strip().lower()
    return media_type.startswith("text/") or media_type.endswith("+xml") or media_type == "application/xml"


def extract_first_paragraph(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    paragraph = PARAGRAPH_SELECTOR.select_one(soup)
    return paragraph.get_text().strip() if paragraph else ""


async def fetch_first_paragraph(url: str) -> str:
    """Fetches a page and returns the text of its first paragraph.

    Never raises. Any failure is logged and yields an empty string.

    Args:
        url (str): The page URL. Protocol-relative links are fetched over https.

    Returns:
        str: The trimmed first paragraph, or "" when there is none or the fetch failed.
    """
    target = f"https:{url}" if url.startswith("//") else url
    client = get_client()

    try:
        response = await asyncio.wait_for(
            client.get(target, headers={"User-Agent": settings.user_agent}),
            timeout=settings.excerpt_timeout,
        )
        response.raise_for_status()

        content_type = response.headers.get("content-type", "")
        if not _is_text_content(content_type):
            logger.warning(f"Skipping non-text content ({content_type}) from URL: {url}")
            return ""

        return extract_first_paragraph(response.text)
    except asyncio.TimeoutError:
        logger.warning(f"Timeout fetching URL: {url}")
        return ""
    except Exception as e:
        logger.warning(f"Failed to fetch URL {url}: {e}")
        return ""
