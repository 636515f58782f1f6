import pytest
from bs4 import BeautifulSoup


@pytest.fixture
def parse():
    def _parse(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "html.parser")
    return _parse
