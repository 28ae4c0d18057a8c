import random
from typing import Optional
from urllib.parse import quote

import requests

from cidrhosts.cache import store
from cidrhosts.core.config import settings
from cidrhosts.core.log import get_logger

from .base import BaseFetcher, FetchError, FetchResult

USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_6 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.0 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (iPad; CPU OS 14_6 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.0 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (Windows NT 10.0; WOW64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 11_3_1) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Linux; Android 11; SM-G998B) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Mobile Safari/537.36",
    "Mozilla/5.0 (Linux; Android 10; SM-G970F) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Mobile Safari/537.36",
    "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:89.0) Gecko/20100101 Firefox/89.0",
]

def random_user_agent(rng: random.Random) -> str:
    return rng.choice(USER_AGENTS)

def build_url(identifier: str, base_url: Optional[str] = None) -> str:
    """
    Append the identifier to the base URL as a path.
    Everything outside the unreserved set is percent-encoded, except "/"
    so that a CIDR like 1.2.3.0/24 keeps the upstream /ips/<ip>/<prefix> layout.
    """
    base = base_url if base_url is not None else settings.BASE_URL
    return base + quote(identifier, safe="/")

class RequestsFetcher(BaseFetcher):
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        base_url: Optional[str] = None,
        timeout_sec: Optional[int] = None,
    ):
        self.rng = rng or random.Random()
        self.base_url = base_url if base_url is not None else settings.BASE_URL
        self.timeout_sec = timeout_sec if timeout_sec is not None else settings.REQUEST_TIMEOUT

    def fetch(self, identifier: str) -> FetchResult:
        url = build_url(identifier, self.base_url)
        user_agent = random_user_agent(self.rng)
        try:
            resp = requests.get(url, headers={"User-Agent": user_agent}, timeout=self.timeout_sec)
        except requests.RequestException as e:
            raise FetchError(f"request to {url} failed: {e}") from e

        if resp.status_code != requests.codes.ok:
            raise FetchError(
                f"failed to fetch IP info for {identifier}: {resp.status_code} {resp.reason}"
            )

        return FetchResult(
            identifier=identifier,
            url=url,
            status_code=int(resp.status_code),
            body=resp.content,
            user_agent=user_agent,
        )

def fetch_and_cache(identifier: str, fetcher: BaseFetcher) -> str:
    """Fetch the page for an identifier and persist it; returns the cache file path"""
    logger = get_logger()
    logger.info("Fetching page from the web...")
    result = fetcher.fetch(identifier)
    try:
        path = store.write(identifier, result.body)
    except (OSError, ValueError) as e:
        raise FetchError(f"failed to write cache for {identifier}: {e}") from e
    logger.info(f"Page cached successfully: {path}")
    return path
