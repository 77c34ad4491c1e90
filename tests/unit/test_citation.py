"""Tests for citation data models."""

import dataclasses

import pytest

from citenorm.models import ID_TYPES, Citation, Creator, ItemType


@pytest.mark.unit
def test_citation_defaults(citation: Citation) -> None:
    """Test a new citation is empty and marked as not yet successful."""
    assert citation.content == {}
    assert citation.item_type is None
    assert citation.source == []
    assert citation.error is None
    assert citation.response_code == 500
    assert citation.creators == []


@pytest.mark.unit
def test_citation_rejects_unknown_id_type() -> None:
    """Test unsupported identifier kinds raise ValueError."""
    with pytest.raises(ValueError, match="Unsupported identifier type"):
        Citation("issn", "1234-5678")


@pytest.mark.unit
@pytest.mark.parametrize("id_type", sorted(ID_TYPES))
def test_identifier_property_matches_id_type(id_type: str) -> None:
    """Test only the property for the requested identifier kind is set."""
    citation = Citation(id_type, "value")

    for kind in ID_TYPES:
        expected = "value" if kind == id_type else None
        assert getattr(citation, kind) == expected


@pytest.mark.unit
def test_citation_id(citation: Citation) -> None:
    """Test the citation id combines kind and value."""
    assert citation.citation_id == "isbn:9780596519797"


@pytest.mark.unit
def test_set_error(citation: Citation) -> None:
    """Test set_error records message and response code."""
    citation.set_error("No results", 404)

    assert citation.error == "No results"
    assert citation.response_code == 404


@pytest.mark.unit
def test_creator_is_immutable() -> None:
    """Test creators cannot be modified after creation."""
    creator = Creator("author", "Daniel J.", "Barrett")

    with pytest.raises(dataclasses.FrozenInstanceError):
        creator.last_name = "Smith"  # type: ignore[misc]


@pytest.mark.unit
def test_creator_to_dict() -> None:
    """Test creators serialize with camelCase keys."""
    assert Creator("translator", "Jay", "Rubin").to_dict() == {
        "creatorType": "translator",
        "firstName": "Jay",
        "lastName": "Rubin",
    }


@pytest.mark.unit
def test_citation_to_dict(citation: Citation) -> None:
    """Test serialization includes type, content, provenance and identifier."""
    citation.item_type = ItemType.BOOK
    citation.content = {
        "title": "MediaWiki",
        "ISBN": ["9780596519797"],
        "creators": [Creator("author", "Daniel J.", "Barrett")],
    }
    citation.add_source("WorldCat")

    assert citation.to_dict() == {
        "itemType": "book",
        "title": "MediaWiki",
        "ISBN": ["9780596519797"],
        "creators": [{"creatorType": "author", "firstName": "Daniel J.", "lastName": "Barrett"}],
        "source": ["WorldCat"],
        "isbn": "9780596519797",
    }


@pytest.mark.unit
def test_citation_to_dict_includes_error(citation: Citation) -> None:
    """Test errors are serialized and untyped citations omit itemType."""
    citation.set_error("No results from WorldCat xisbn service", 404)

    data = citation.to_dict()

    assert "itemType" not in data
    assert data["error"] == "No results from WorldCat xisbn service"


@pytest.mark.unit
def test_to_dict_copies_lists(citation: Citation) -> None:
    """Test mutating the serialized output leaves the citation intact."""
    citation.content["ISBN"] = ["9780596519797"]

    citation.to_dict()["ISBN"].append("0596519796")

    assert citation.content["ISBN"] == ["9780596519797"]
