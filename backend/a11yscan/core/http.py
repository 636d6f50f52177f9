import asyncio
import httpx
from contextlib import asynccontextmanager
from typing import Optional

from a11yscan.core.config import DEFAULT_UA
from a11yscan.core.exceptions import FetchError

DEFAULT_TIMEOUT_MS = 30000
MAX_REDIRECTS = 5

def _timeout(timeout_ms: int) -> httpx.Timeout:
    seconds = timeout_ms / 1000
    return httpx.Timeout(seconds, connect=min(seconds, 10.0))

@asynccontextmanager
async def client_for(
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    user_agent: str = DEFAULT_UA,
    max_redirects: int = MAX_REDIRECTS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
):
    async with httpx.AsyncClient(
        timeout=_timeout(timeout_ms),
        headers={"User-Agent": user_agent, "Accept": "text/html, */*;q=0.8"},
        follow_redirects=True,
        max_redirects=max_redirects,
        http2=True,
        verify=True,
        transport=transport,
    ) as client:
        yield client

async def fetch(client: httpx.AsyncClient, url: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> str:
    """
    GET `url` and return the body text. Any failure (network, timeout,
    redirect loop, non-2xx status) is raised as FetchError; nothing is retried.
    `timeout_ms` bounds the whole request, not just each phase.
    """
    try:
        resp = await asyncio.wait_for(client.get(url), timeout_ms / 1000)
    except (httpx.TimeoutException, asyncio.TimeoutError) as e:
        raise FetchError(url, f"request timed out after {timeout_ms}ms", e) from e
    except httpx.TooManyRedirects as e:
        raise FetchError(url, f"too many redirects fetching {url}", e) from e
    except (httpx.InvalidURL, UnicodeError, ValueError) as e:
        # IDNA failures surface as UnicodeError from URL parsing
        raise FetchError(url, f"invalid URL: {url}", e) from e
    except httpx.HTTPError as e:
        raise FetchError(url, f"request failed: {e!r}", e) from e

    if not resp.is_success:
        raise FetchError(url, f"received status {resp.status_code}")
    return resp.text
