"""
Shared fixtures for the service tests.

HTTP traffic is served by an httpx.MockTransport installed as the process-wide client.
"""

import httpx
import pytest
import pytest_asyncio

from echo3ai.core.config import settings
from echo3ai.services import http


DDG_RESULTS_HTML = """
<html><body>
<div class="result results_links">
  <h2 class="result__title"><a class="result__a" href="https://example.com/one">  First Result </a></h2>
  <a class="result__snippet" href="https://example.com/one">First snippet text.</a>
</div>
<div class="result results_links">
  <h2 class="result__title"><a class="result__a" href="https://example.com/two">Second Result</a></h2>
  <a class="result__snippet">Second snippet text.</a>
</div>
<div class="result results_links">
  <h2 class="result__title"><a class="result__a">No Link Result</a></h2>
  <a class="result__snippet">Should be dropped.</a>
</div>
<div class="result results_links">
  <h2 class="result__title"><a class="result__a" href="https://example.com/empty">   </a></h2>
  <a class="result__snippet">Empty title, dropped.</a>
</div>
<div class="result results_links">
  <h2 class="result__title"><a class="result__a" href="https://example.com/five">Fifth Result</a></h2>
</div>
</body></html>
"""


def gemini_payload(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def ddg_html():
    return DDG_RESULTS_HTML


@pytest_asyncio.fixture
async def mock_http():
    """Installs a handler as the shared HTTP client transport; returns the list of seen requests."""
    seen = []

    def install(handler):
        async def recording(request: httpx.Request):
            seen.append(request)
            result = handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

        http.set_client(httpx.AsyncClient(transport=httpx.MockTransport(recording), follow_redirects=True))
        return seen

    yield install
    await http.close_client()


@pytest.fixture
def fast_excerpt_timeout(monkeypatch):
    monkeypatch.setattr(settings, "excerpt_timeout", 0.1)
