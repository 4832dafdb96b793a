"""Pytest configuration and shared fixtures for the sluglinks test suite."""

import django
import pytest
from bs4 import BeautifulSoup
from django.conf import settings


def pytest_configure(config):
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["sluglinks"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
        django.setup()


def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


@pytest.fixture
def make_soup():
    """Parse an HTML fragment with the same parser the postprocessors use."""
    return parse
