import os
import json
import logging
from typing import Optional

import httpx

from .errors import FetchFailed
from .models import FetchedPage, NormalizedTarget

logger = logging.getLogger("threadgrab")

# ─── HTTP 工具 ──────────────────────────────────────────────────────────────────

DESKTOP_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# The origin strips or gates markup for clients that don't look like a browser.
BROWSER_HEADERS = {
    "User-Agent": DESKTOP_UA,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Sec-Ch-Ua": '"Not_A Brand";v="8", "Chromium";v="120", "Google Chrome";v="120"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "Upgrade-Insecure-Requests": "1",
}

TIMEOUT = float(os.getenv("THREADGRAB_TIMEOUT", "15.0"))

NETWORK_EXCEPTIONS = (
    httpx.HTTPError,
    httpx.TimeoutException,
)

PARSE_EXCEPTIONS = (
    json.JSONDecodeError,
    ValueError,
    IndexError,
    TypeError,
    KeyError,
    AttributeError,
)


def _client(headers: dict, timeout: float = TIMEOUT) -> httpx.Client:
    return httpx.Client(follow_redirects=True, timeout=timeout, headers=headers)


class PageFetcher:
    """Single GET against a post page with a browser-like header set.

    No retries: a failed fetch is terminal for the request. A client passed
    in by the caller is left open; one created here is closed after use.
    """

    def __init__(self, headers: Optional[dict] = None, timeout: float = TIMEOUT,
                 client: Optional[httpx.Client] = None):
        self.headers = dict(BROWSER_HEADERS if headers is None else headers)
        self.timeout = timeout
        self.client = client

    def fetch(self, target: NormalizedTarget) -> FetchedPage:
        client = self.client or _client(self.headers, self.timeout)
        try:
            resp = client.get(target.url, headers=self.headers)
            logger.debug(f"Fetch status: {resp.status_code}")
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"抓取失败 url={target.url} status={e.response.status_code}")
            raise FetchFailed(status_code=e.response.status_code) from e
        except NETWORK_EXCEPTIONS as e:
            logger.warning(f"抓取失败 url={target.url}: {e}")
            raise FetchFailed() from e
        finally:
            if client is not self.client:
                client.close()

        page = FetchedPage(html=resp.text, status_code=resp.status_code, url=str(resp.url))
        logger.debug(f"HTML length: {len(page.html)}")
        return page
