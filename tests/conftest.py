# conftest.py - shared comment fixtures
import pytest


@pytest.fixture
def fenced_comment() -> str:
    return (
        "intro text\n"
        "```\n"
        "code line one\n"
        "code line two\n"
        "```\n"
        "outro text with [a link](http://x) here\n"
    )


@pytest.fixture
def doxygen_comment() -> str:
    return (
        "Example:\n"
        "@code\n"
        "see [x](y) for details\n"
        "@endcode\n"
        "Done.\n"
    )
