from dataclasses import dataclass

@dataclass
class FetchResult:
    identifier: str
    url: str
    status_code: int
    body: bytes
    user_agent: str

class FetchError(Exception):
    """Network, HTTP status or cache write failure for one identifier"""

class ParseError(Exception):
    """Cached page could not be opened or parsed as HTML"""

class BaseFetcher:
    def fetch(self, identifier: str) -> FetchResult:
        raise NotImplementedError
