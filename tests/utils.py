"""Test utilities for the html2rawtext test suite."""

from bs4 import BeautifulSoup


def parse_html(markup: str) -> BeautifulSoup:
    """Parse markup the way the library does by default."""
    return BeautifulSoup(markup, "html.parser")
