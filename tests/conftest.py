import pytest
from unittest.mock import MagicMock
from cidrhosts.cache import store
from cidrhosts.core.log import configure_logging
from cidrhosts.fetch.base import BaseFetcher, FetchResult

SAMPLE_HTML = b"""
<html>
<body>
    <table>
        <thead>
            <tr><th>IP</th><th>Hostname</th></tr>
        </thead>
        <tbody>
            <tr><td>1.2.3.1</td><td> example.com </td></tr>
            <tr><td>1.2.3.2</td><td>mail.example-host.org</td></tr>
            <tr><td>1.2.3.3</td><td>not a hostname!</td></tr>
            <tr><td>1.2.3.4</td><td></td></tr>
        </tbody>
    </table>
</body>
</html>
"""

@pytest.fixture(autouse=True)
def setup_test_environment(tmp_path):
    """Point the cache at a temporary directory and reset logging"""
    original_cache_dir = store.CACHE_DIR
    store.CACHE_DIR = str(tmp_path)
    configure_logging(silent=True)

    yield

    store.CACHE_DIR = original_cache_dir
    configure_logging(silent=True)

@pytest.fixture
def sample_html():
    return SAMPLE_HTML

@pytest.fixture
def fake_fetcher():
    """Fetcher mock that returns the sample page for any identifier"""
    fetcher = MagicMock(spec=BaseFetcher)

    def _fetch(identifier):
        return FetchResult(
            identifier=identifier,
            url=f"https://ipinfo.io/ips/{identifier}",
            status_code=200,
            body=SAMPLE_HTML,
            user_agent="test-agent",
        )

    fetcher.fetch.side_effect = _fetch
    return fetcher
