import io

import httpx
import pytest

from pdf_verify.checker import PdfChecker, make_console
from pdf_verify.models import Product


@pytest.fixture
def console():
    return make_console(file=io.StringIO())


@pytest.fixture
def err_console():
    return make_console(file=io.StringIO())


@pytest.fixture
def health_plan():
    return Product(id=2, name="Health Plan", pdf_url="https://host/doc.pdf")


@pytest.fixture
def make_checker():
    """Build a PdfChecker whose requests are answered by handler."""
    checkers = []

    def factory(handler):
        checker = PdfChecker(transport=httpx.MockTransport(handler))
        checkers.append(checker)
        return checker

    yield factory
    for checker in checkers:
        checker.close()
