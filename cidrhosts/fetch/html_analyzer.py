"""
HTML table parsing for cached IP range pages.
The hostname listing is a plain table; the second column holds the hostname.
"""

from typing import List
from bs4 import BeautifulSoup
from cidrhosts.cache import store
from cidrhosts.core.log import get_logger
from .base import ParseError


def load_cached_html(identifier: str) -> BeautifulSoup:
    """
    Read the cached page for an identifier and parse it as HTML.
    Raises ParseError when the entry cannot be read or parsed.
    """
    logger = get_logger()
    path = store.cache_path(identifier)
    logger.info(f"Loading cached page: {path}...")
    try:
        raw = store.read(identifier)
    except (OSError, ValueError) as e:
        raise ParseError(f"cannot open {path}: {e}") from e

    try:
        soup = BeautifulSoup(raw, "html.parser")
    except Exception as e:
        raise ParseError(f"cannot parse {path}: {e}") from e

    logger.info("Cached page loaded successfully.")
    return soup


def extract_second_column(soup: BeautifulSoup) -> List[str]:
    """Trimmed text of the second cell of every table row, empty cells skipped"""
    values = []
    for row in soup.select("table tr"):
        text = "".join(cell.get_text() for cell in row.select("td:nth-child(2)")).strip()
        if text:
            values.append(text)
    return values
