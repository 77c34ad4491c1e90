"""Tests for field translator entries."""

import pytest

from citenorm.models import Citation, Creator
from citenorm.normalize.fixers import fix_date, fix_lang, validate_isbn
from citenorm.normalize.translators import (
    Cardinality,
    make_creators_translator,
    make_list_translator,
    make_translator,
    translate_field,
)

# ---------------------------------------------------------------------------
# Scalar translators
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_scalar_strips_whitespace_and_nbsp(citation: Citation) -> None:
    """Test leading/trailing whitespace and non-breaking spaces are removed."""
    translate_field(make_translator("title", "title"), citation, ["\nTitle of the Song \xa0"])

    assert citation.content == {"title": "Title of the Song"}


@pytest.mark.unit
def test_scalar_replaces_inner_nbsp(citation: Citation) -> None:
    """Test non-breaking spaces become plain spaces."""
    translate_field(make_translator("title", "title"), citation, "Title\xa0of\xa0the\xa0Song")

    assert citation.content["title"] == "Title of the Song"


@pytest.mark.unit
def test_scalar_removes_line_breaks(citation: Citation) -> None:
    """Test line breaks collapse to single spaces."""
    translate_field(
        make_translator("title", "title"), citation, "Title with\nline\rbreaks\r\nremoved"
    )

    assert citation.content["title"] == "Title with line breaks removed"


@pytest.mark.unit
def test_scalar_preserves_line_breaks_in_abstract(citation: Citation) -> None:
    """Test abstracts keep their line breaks."""
    value = "Abstract with\nline\rbreaks\r\npreserved"
    translate_field(make_translator("abstract", "abstractNote"), citation, [value])

    assert citation.content["abstractNote"] == value


@pytest.mark.unit
def test_scalar_applies_fixer(citation: Citation) -> None:
    """Test the fixer normalizes the stored value."""
    translate_field(make_translator("year", "date", fix_date), citation, ["August 2012"])

    assert citation.content["date"] == "2012-08"


@pytest.mark.unit
def test_scalar_fixer_rejection_omits_field(citation: Citation) -> None:
    """Test a rejected value leaves the field unset."""
    translate_field(make_translator("lang", "language", fix_lang), citation, "eng")

    assert "language" not in citation.content


@pytest.mark.unit
@pytest.mark.parametrize("value", ["   ", [], None, 12, {"title": "x"}])
def test_scalar_ignores_empty_or_malformed(citation: Citation, value: object) -> None:
    """Test empty and non-string values populate nothing."""
    translate_field(make_translator("title", "title"), citation, value)

    assert citation.content == {}


@pytest.mark.unit
def test_scalar_language_underscore(citation: Citation) -> None:
    """Test fix_lang converts underscores in language tags."""
    translate_field(make_translator("lang", "language", fix_lang), citation, "en_US")

    assert citation.content["language"] == "en-US"


# ---------------------------------------------------------------------------
# List translators
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_list_single_value_without_fixer(citation: Citation) -> None:
    """Test values are kept as written when there is no fixer."""
    translate_field(make_list_translator("isbn", "ISBN"), citation, ["978-3-16-148410-0"])

    assert citation.content == {"ISBN": ["978-3-16-148410-0"]}


@pytest.mark.unit
def test_list_applies_fixer_per_element(citation: Citation) -> None:
    """Test each element is validated and invalid ones are dropped."""
    translate_field(
        make_list_translator("isbn", "ISBN", validate_isbn),
        citation,
        ["978-3-16-148410-0", "not an isbn", "0596519796 (pbk.)"],
    )

    assert citation.content["ISBN"] == ["9783161484100", "0596519796"]


@pytest.mark.unit
def test_list_accepts_bare_string(citation: Citation) -> None:
    """Test a string value is treated as a one-element list."""
    translate_field(make_list_translator("isbn", "ISBN", validate_isbn), citation, "9780596519797")

    assert citation.content["ISBN"] == ["9780596519797"]


@pytest.mark.unit
def test_list_accumulates_without_duplicates(citation: Citation) -> None:
    """Test values from a second call are appended once."""
    entry = make_list_translator("issn", "ISSN")
    translate_field(entry, citation, ["1111-1111"])
    translate_field(entry, citation, ["2222-2222", "1111-1111"])

    assert citation.content["ISSN"] == ["1111-1111", "2222-2222"]


@pytest.mark.unit
def test_list_with_nothing_accepted_leaves_field_unset(citation: Citation) -> None:
    """Test a list of invalid values does not create an empty field."""
    translate_field(make_list_translator("isbn", "ISBN", validate_isbn), citation, ["x", "y"])

    assert "ISBN" not in citation.content


# ---------------------------------------------------------------------------
# Creator translators
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_creators_entry_configuration() -> None:
    """Test creator entries always target the creators field."""
    entry = make_creators_translator("author", "cartographer")

    assert entry.target_field == "creators"
    assert entry.cardinality is Cardinality.CREATORS
    assert entry.role_tag == "cartographer"


@pytest.mark.unit
def test_creators_string_uses_role_classification(citation: Citation) -> None:
    """Test statement strings are parsed with role classification."""
    translate_field(
        make_creators_translator("author", "author"),
        citation,
        "J.K. Rowling ; illustrations by Mary GrandPré.",
    )

    assert citation.creators == [
        Creator("author", "J.K.", "Rowling"),
        Creator("contributor", "Mary", "GrandPré"),
    ]


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    [
        ["Barrett, Daniel J.", "Rubin, Jay"],
        ["Kubrick, Stanley", "", "Clarke, Arthur C."],
        None,
        42,
    ],
)
def test_creators_non_string_adds_nothing(citation: Citation, value: object) -> None:
    """Test only statement strings produce creators."""
    translate_field(make_creators_translator("author", "director"), citation, value)

    assert "creators" not in citation.content


@pytest.mark.unit
def test_creators_binds_entry_role(citation: Citation) -> None:
    """Test unqualified names take the entry's role tag."""
    translate_field(make_creators_translator("author", "director"), citation, "Stanley Kubrick.")

    assert citation.creators == [Creator("director", "Stanley", "Kubrick")]
