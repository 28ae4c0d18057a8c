import pytest
from bs4 import BeautifulSoup
from cidrhosts.fetch.utils import is_valid_hostname, extract_hostnames

class TestHostnameValidation:
    """Unit tests for the hostname shape check"""

    def test_simple_domains(self):
        """Test plain domain names are accepted"""
        assert is_valid_hostname("example.com") is True
        assert is_valid_hostname("a.b.c.example.co.uk") is True

    def test_hyphenated_labels(self):
        """Test hyphens inside labels"""
        assert is_valid_hostname("mail-01.my-host.net") is True
        assert is_valid_hostname("-bad.example.com") is False
        assert is_valid_hostname("bad-.example.com") is False
        assert is_valid_hostname("double--hyphen.com") is False

    def test_rejects_non_hostnames(self):
        """Test free text and malformed names are rejected"""
        assert is_valid_hostname("not a hostname!") is False
        assert is_valid_hostname("localhost") is False
        assert is_valid_hostname("example.") is False
        assert is_valid_hostname("") is False

    def test_tld_must_be_alphabetic(self):
        """Test numeric or single-letter TLDs are rejected"""
        assert is_valid_hostname("1.2.3.4") is False
        assert is_valid_hostname("example.c") is False
        assert is_valid_hostname("example.123") is False

    def test_no_trailing_newline(self):
        """Test the whole string must match"""
        assert is_valid_hostname("example.com\n") is False

    def test_invalid_pattern_is_not_a_match(self):
        """Test a broken pattern yields False instead of raising"""
        assert is_valid_hostname("example.com", pattern="([a-z") is False

class TestExtractHostnames:
    """Unit tests for hostname extraction from a parsed page"""

    def test_filters_second_column(self, sample_html):
        """Test only valid second-column values are kept"""
        soup = BeautifulSoup(sample_html, "html.parser")
        assert extract_hostnames(soup) == ["example.com", "mail.example-host.org"]

    def test_keeps_duplicates_in_order(self):
        """Test page order and duplicates are preserved"""
        html = """
        <table>
            <tr><td>1</td><td>b.example.com</td></tr>
            <tr><td>2</td><td>a.example.com</td></tr>
            <tr><td>3</td><td>b.example.com</td></tr>
        </table>
        """
        soup = BeautifulSoup(html, "html.parser")
        assert extract_hostnames(soup) == ["b.example.com", "a.example.com", "b.example.com"]
