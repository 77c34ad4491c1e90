"""Pytest configuration and fixtures for test suite."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from citenorm.models import Citation  # noqa: E402


@pytest.fixture
def citation() -> Citation:
    """Fresh citation requested by ISBN."""
    return Citation("isbn", "9780596519797")


@pytest.fixture
def mediawiki_record() -> dict[str, Any]:
    """Single xISBN record for an O'Reilly book."""
    return {
        "url": ["http://www.worldcat.org/oclc/234299293?referer=xid"],
        "publisher": "O'Reilly Media",
        "form": ["BC", "AA"],
        "lccn": ["2009280526"],
        "lang": "en",
        "city": "Sebastapool, Calif.",
        "author": "Daniel J. Barrett.",
        "ed": "1st ed.",
        "year": "2009",
        "isbn": ["978-0-596-51979-7"],
        "title": "MediaWiki",
        "oclcnum": ["234299293", "474668158"],
    }


@pytest.fixture
def mediawiki_payload(mediawiki_record: dict[str, Any]) -> dict[str, Any]:
    """Complete xISBN response wrapping ``mediawiki_record``."""
    return {"stat": "ok", "list": [mediawiki_record]}
