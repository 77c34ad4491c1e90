"""Helper functions and compiled regex patterns for normalization.

This module provides reusable utilities to eliminate boilerplate
and improve performance through pre-compiled regex patterns.
"""

import re

# ---------------------------------------------------------------------------
# Name extraction ("Surname, Given" catalogue form)
# ---------------------------------------------------------------------------

PARENTHESIZED_RE = re.compile(r" \([^)]*\)")
YEARS_RE = re.compile(r" [\d\-.,]+")
TRAILING_COMMA_RE = re.compile(r",$")
TRAILING_PERIOD_RE = re.compile(r"\.$")
# ASCII \w so accented letters do not count towards the two-letter run
ABBREVIATED_END_RE = re.compile(r"(\w{2,})\.$", re.ASCII)
GENERATIONAL_SUFFIX_RE = re.compile(r" (?:Jr|Sr)\.$")
SURNAME_GIVEN_RE = re.compile(r"([^,]+), (.+)")

# ---------------------------------------------------------------------------
# Creator role classification (xISBN free-text creator strings)
# ---------------------------------------------------------------------------

ILLUSTRATOR_RE = re.compile(r"illustrations by", re.IGNORECASE)
ILLUSTRATOR_PREFIX_RE = re.compile(r"illustrations by ", re.IGNORECASE)
TRANSLATOR_RE = re.compile(r"translated", re.IGNORECASE)
TRANSLATOR_PREFIX_RE = re.compile(r"translated (?:[A-Za-z]*\s)*by\s", re.IGNORECASE)
# A role we have no tag for, e.g. "edited by J. Smith"
UNKNOWN_ROLE_RE = re.compile(r"(?:[A-Za-z]*\s)*by\s", re.IGNORECASE)
NATURAL_LIST_SEPARATOR = " and "
CREATOR_CHUNK_SEPARATOR = ";"
WHITESPACE_CHAR_RE = re.compile(r"\s")

# ---------------------------------------------------------------------------
# Field value cleaning
# ---------------------------------------------------------------------------

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
NBSP = "\xa0"

# Target fields whose line breaks are meaningful
MULTILINE_FIELDS = frozenset({"abstractNote"})


def clean_text(value: str, target_field: str) -> str:
    """Clean a scraped string before it is stored on a citation.

    Parameters
    ----------
    value : str
        Raw string from the metadata payload.
    target_field : str
        Target schema field the value is destined for.

    Returns
    -------
    str
        Value with non-breaking spaces replaced, line breaks collapsed to
        single spaces (except for multi-line fields), and trimmed.
    """
    value = value.replace(NBSP, " ")
    if target_field not in MULTILINE_FIELDS:
        value = LINE_BREAK_RE.sub(" ", value)
    return value.strip()
