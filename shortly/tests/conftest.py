import pytest

from shortly.services.shortener import ShortenerSession
from shortly.utils.encoding import DEFAULT_ALPHABET


PROTOCOL = "http://short.ly/"
START_ID = 4097


@pytest.fixture
def alphabet():
    return DEFAULT_ALPHABET


@pytest.fixture
def session(alphabet):
    """Creates a fresh session for each test, counting from 4097."""
    return ShortenerSession.create(alphabet, PROTOCOL, START_ID)


@pytest.fixture
def sample_urls():
    """Long URLs paired with the short URLs they get from a fresh session."""
    return [
        ("http://www.google.com", "http://short.ly/bef"),
        ("https://www.cics.umass.edu", "http://short.ly/beg"),
        ("https://www.youtube.com", "http://short.ly/beh"),
        ("https://www.netflix.com", "http://short.ly/bei"),
        ("http://www.nytimes.com", "http://short.ly/bej"),
        ("https://nodejs.org/en", "http://short.ly/bek"),
        ("http://umass-cs-326.github.io", "http://short.ly/bel"),
    ]
