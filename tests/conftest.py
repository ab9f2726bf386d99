"""Pytest configuration and shared fixtures for the html2rawtext test suite."""

import os
from typing import Callable

import pytest
from bs4 import BeautifulSoup
from hypothesis import Verbosity, settings
from utils import parse_html

settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def parse() -> Callable[[str], BeautifulSoup]:
    """Provide a parser from markup to a BeautifulSoup tree.

    Returns
    -------
    Callable[[str], BeautifulSoup]
        Function parsing markup with ``html.parser``.

    """
    return parse_html
