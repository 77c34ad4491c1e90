"""Field value fixers.

Each fixer is a pure, total function taking a cleaned string and returning
the normalized value, or ``None`` when the value must be omitted from the
citation.
"""

import re
from collections.abc import Callable
from datetime import datetime

__all__ = ["Fixer", "fix_date", "fix_lang", "validate_isbn"]

Fixer = Callable[[str], str | None]

# c2009 / ©2009 / 2009 (copyright marks are common in WorldCat)
YEAR_ONLY_RE = re.compile(r"^(?:c|©)?(\d{4})$")
LANG_CODE_RE = re.compile(r"^[a-z]{2}(?:-?[a-z]{2,})*$", re.IGNORECASE)
ISBN_DASH_RE = re.compile(r"[\-–]")
ISBN_RE = re.compile(r"((978 ?)[0-9]{10}|[0-9]{9}[0-9xX])")

_FULL_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
)
_MONTH_FORMATS = (
    "%Y-%m",
    "%B %Y",
    "%b %Y",
)


def _parse(value: str, formats: tuple[str, ...]) -> datetime | None:
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def fix_date(raw: str) -> str | None:
    """Normalize a publication date.

    Parameters
    ----------
    raw : str
        Date as written by the source.

    Returns
    -------
    str | None
        ``YYYY`` for year-only values, ``YYYY-MM-DD`` when day, month and
        year are known, ``YYYY-MM`` when only month and year are known, the
        original string when it cannot be parsed, or None when empty.

    Examples
    --------
    >>> fix_date("c2009")
    '2009'
    >>> fix_date("August 2012")
    '2012-08'
    """
    value = raw.strip()
    if not value:
        return None

    match = YEAR_ONLY_RE.match(value)
    if match:
        return match.group(1)

    parsed = _parse(value, _FULL_DATE_FORMATS)
    if parsed is not None:
        return parsed.strftime("%Y-%m-%d")

    parsed = _parse(value, _MONTH_FORMATS)
    if parsed is not None:
        return parsed.strftime("%Y-%m")

    # Left as written when unparseable
    return value


def fix_lang(raw: str) -> str | None:
    """Normalize a language code (``en_US`` -> ``en-US``).

    Returns None for values that are not shaped like a language tag.
    Three-letter MARC codes such as ``eng`` do not fit the pattern and are
    dropped.
    """
    value = raw.strip().replace("_", "-", 1)
    if not LANG_CODE_RE.match(value):
        return None
    return value


def validate_isbn(raw: str) -> str | None:
    """Extract the first ISBN-10 or ISBN-13 from a string.

    Parameters
    ----------
    raw : str
        ISBN-like string, possibly hyphenated or followed by a qualifier
        such as ``"(pbk.)"``.

    Returns
    -------
    str | None
        Digits-only ISBN, or None if no ISBN is found.

    Examples
    --------
    >>> validate_isbn("978-3-16-148410-0")
    '9783161484100'
    >>> validate_isbn("not an isbn") is None
    True
    """
    if not raw:
        return None
    match = ISBN_RE.search(ISBN_DASH_RE.sub("", raw.strip()))
    if not match:
        return None
    return match.group(0).replace(" ", "")
