import re
from typing import List
from bs4 import BeautifulSoup
from .html_analyzer import extract_second_column

# Dot-separated alphanumeric/hyphen labels ending in an alphabetic TLD
HOSTNAME_PATTERN = r"^(([a-zA-Z0-9]+(-[a-zA-Z0-9]+)*\.)+[A-Za-z]{2,})$"

def is_valid_hostname(text: str, pattern: str = HOSTNAME_PATTERN) -> bool:
    """
    Check that text looks like a domain name.
    An invalid pattern counts as no match.
    """
    if not text:
        return False
    try:
        return re.fullmatch(pattern, text) is not None
    except re.error:
        return False

def extract_hostnames(soup: BeautifulSoup) -> List[str]:
    """Second-column values that pass the hostname check, in page order"""
    return [text for text in extract_second_column(soup) if is_valid_hostname(text)]
