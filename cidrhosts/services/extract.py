import sys
from typing import Iterable, List, Optional, TextIO

from cidrhosts.cache import store
from cidrhosts.core.log import get_logger
from cidrhosts.fetch.base import BaseFetcher, FetchError, ParseError
from cidrhosts.fetch.html_analyzer import load_cached_html
from cidrhosts.fetch.requests_fetcher import fetch_and_cache
from cidrhosts.fetch.utils import extract_hostnames
from cidrhosts.schemas import ExtractionResult

def process_identifier(
    identifier: str,
    fetcher: BaseFetcher,
    out: Optional[TextIO] = None,
) -> ExtractionResult:
    """
    Pipeline for a single CIDR/IP identifier.

    1. Check the cache file for the identifier
    2. On a miss: fetch the page and cache it
    3. Load the cached page and extract hostnames from the table
    4. Print accepted hostnames
    5. Delete the cache file
    """
    logger = get_logger()
    out = out if out is not None else sys.stdout
    logger.info(f"Processing CIDR: {identifier}")

    cached = store.exists(identifier)
    if not cached:
        try:
            fetch_and_cache(identifier, fetcher)
        except FetchError as e:
            logger.error(f"Failed to fetch and cache page for {identifier}: {e}")
            return ExtractionResult(identifier=identifier, error=str(e))

    try:
        soup = load_cached_html(identifier)
    except ParseError as e:
        logger.error(f"Failed to load cached page: {e}")
        _cleanup(identifier)
        return ExtractionResult(identifier=identifier, cached=cached, error=str(e))

    hostnames = extract_hostnames(soup)
    if not hostnames:
        logger.info("No hostnames found.")
    for hostname in hostnames:
        print(hostname, file=out)

    _cleanup(identifier)
    return ExtractionResult(identifier=identifier, hostnames=hostnames, cached=cached)

def _cleanup(identifier: str) -> None:
    logger = get_logger()
    path = store.cache_path(identifier)
    try:
        store.delete(identifier)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to delete cache file {path}: {e}")
        return
    logger.info(f"Cache file {path} deleted successfully.")

def process_identifiers(
    lines: Iterable[str],
    fetcher: BaseFetcher,
    out: Optional[TextIO] = None,
) -> List[ExtractionResult]:
    """Process identifiers one per line, skipping blank lines"""
    results = []
    for line in lines:
        identifier = line.strip()
        if not identifier:
            continue
        results.append(process_identifier(identifier, fetcher, out=out))
    return results

def process_identifier_list(
    file_path: str,
    fetcher: BaseFetcher,
    out: Optional[TextIO] = None,
) -> List[ExtractionResult]:
    """Process a newline-delimited file of identifiers"""
    logger = get_logger()
    logger.info(f"Processing CIDR list from file: {file_path}")
    try:
        f = open(file_path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error(f"Failed to open file: {e}")
        return []

    # Undecodable bytes become U+FFFD so one bad line only affects itself
    with f:
        return process_identifiers(f, fetcher, out=out)
