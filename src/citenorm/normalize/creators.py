"""Creator name parsing and role classification.

Library catalogues deliver creators as free text: either a single
"Surname, Given" heading or a semicolon-delimited statement of
responsibility such as ``"J.K. Rowling ; illustrations by Mary GrandPré."``.
The functions here turn those strings into role-tagged ``Creator`` values.
They reproduce the catalogue heuristics exactly, including the known
mis-parses of unusual statements.
"""

from typing import Any

from citenorm.models.citation import Citation, Creator

from ._helpers import (
    ABBREVIATED_END_RE,
    CREATOR_CHUNK_SEPARATOR,
    GENERATIONAL_SUFFIX_RE,
    ILLUSTRATOR_PREFIX_RE,
    ILLUSTRATOR_RE,
    NATURAL_LIST_SEPARATOR,
    PARENTHESIZED_RE,
    SURNAME_GIVEN_RE,
    TRAILING_COMMA_RE,
    TRAILING_PERIOD_RE,
    TRANSLATOR_PREFIX_RE,
    TRANSLATOR_RE,
    UNKNOWN_ROLE_RE,
    WHITESPACE_CHAR_RE,
    YEARS_RE,
)

__all__ = [
    "DEFAULT_ROLE",
    "extract_names",
    "generate_creator_obj",
    "split_natural_name",
    "add_creators",
    "add_creators_with_role_classification",
]

DEFAULT_ROLE = "author"
ILLUSTRATOR_ROLE = "contributor"  # the target schema has no illustrator role
TRANSLATOR_ROLE = "translator"


def extract_names(name: str) -> tuple[str, str]:
    """Split a catalogue heading into first and last name.

    Parameters
    ----------
    name : str
        Heading such as ``"Barrett, Daniel J."`` or
        ``"Tolkien, J. R. R. (John Ronald Reuel), 1892-1973."``.

    Returns
    -------
    tuple[str, str]
        ``(first_name, last_name)``. Headings without a ``", "`` separator
        are returned whole as the last name (organisations, single names).

    Examples
    --------
    >>> extract_names("Barrett, Daniel J.")
    ('Daniel J.', 'Barrett')
    >>> extract_names("Murakami")
    ('', 'Murakami')
    """
    name = PARENTHESIZED_RE.sub("", name, count=1)
    name = YEARS_RE.sub("", name, count=1)
    name = TRAILING_COMMA_RE.sub("", name, count=1)

    # Keep the period of "Jr.", "Sr." and single initials such as "A."
    if not GENERATIONAL_SUFFIX_RE.search(name) and ABBREVIATED_END_RE.search(name):
        name = TRAILING_PERIOD_RE.sub("", name, count=1)

    match = SURNAME_GIVEN_RE.search(name)
    if match:
        return match.group(2), match.group(1)
    return "", name


def generate_creator_obj(name: str, role_tag: str) -> Creator:
    """Build a creator from a catalogue heading.

    Parameters
    ----------
    name : str
        "Surname, Given" heading.
    role_tag : str
        Role tag to attach.

    Returns
    -------
    Creator
        Creator with names from ``extract_names``.
    """
    first_name, last_name = extract_names(name)
    return Creator(creator_type=role_tag, first_name=first_name, last_name=last_name)


def split_natural_name(name: str, role_tag: str) -> Creator:
    """Build a creator from a name written in natural order.

    The last whitespace-separated token becomes the last name and the
    remaining tokens the first name; a single token is a last name only.

    Parameters
    ----------
    name : str
        Name such as ``"Daniel J. Barrett"``.
    role_tag : str
        Role tag to attach.

    Returns
    -------
    Creator
        Parsed creator.
    """
    tokens = WHITESPACE_CHAR_RE.split(name.strip())
    if len(tokens) == 1:
        return Creator(creator_type=role_tag, first_name="", last_name=tokens[0])
    return Creator(
        creator_type=role_tag,
        first_name=" ".join(tokens[:-1]),
        last_name=tokens[-1],
    )


def _append(citation: Citation, creator: Creator) -> None:
    citation.content.setdefault("creators", []).append(creator)


def add_creators(
    citation: Citation,
    raw_value: Any,
    role_tag: str | None = DEFAULT_ROLE,
    *,
    strict: bool = True,
) -> Citation:
    """Add creators from a heading or a list of headings.

    Parameters
    ----------
    citation : Citation
        Citation to add creators to (mutated in place).
    raw_value : Any
        A heading string or a list of heading strings. Any other type
        leaves the citation unchanged.
    role_tag : str | None, optional
        Role tag for every creator, by default 'author'.
    strict : bool, optional
        If True, an empty list element stops processing of the remaining
        elements, matching catalogue lookups. If False, empty elements
        are skipped, by default True.

    Returns
    -------
    Citation
        The same citation.
    """
    role_tag = role_tag or DEFAULT_ROLE

    if isinstance(raw_value, str):
        name = raw_value.strip()
        if name:
            _append(citation, generate_creator_obj(name, role_tag))
        return citation

    if not isinstance(raw_value, list):
        return citation

    for value in raw_value:
        name = value.strip() if isinstance(value, str) else ""
        if not name:
            if strict:
                break
            continue
        _append(citation, generate_creator_obj(name, role_tag))

    return citation


def _add_natural_list(citation: Citation, names: str, role_tag: str) -> None:
    """Add each name of a ``"A and B"`` list under ``role_tag``."""
    for name in names.split(NATURAL_LIST_SEPARATOR):
        name = name.strip()
        if name:
            _append(citation, split_natural_name(name, role_tag))


def add_creators_with_role_classification(
    citation: Citation,
    raw_value: Any,
    role_tag: str = DEFAULT_ROLE,
) -> Citation:
    """Add creators from a statement of responsibility.

    The statement is split on ``;`` into mentions. Each mention is
    classified by its wording:

    - ``illustrations by ...`` -> ``contributor``
    - ``translated [from the X] by ...`` -> ``translator``
    - any other ``... by ...`` role -> dropped entirely
    - otherwise -> ``role_tag``

    Each mention may list several names joined by ``" and "``.

    Parameters
    ----------
    citation : Citation
        Citation to add creators to (mutated in place).
    raw_value : Any
        Statement string; non-strings leave the citation unchanged.
    role_tag : str, optional
        Role for unqualified names, by default 'author'.

    Returns
    -------
    Citation
        The same citation.

    Examples
    --------
    ``"Haruki Murakami ; translated from the Japanese by Jay Rubin and
    Philip Gabriel."`` yields one author and two translators;
    ``"Haruki Murakami ; edited by Philip Gabriel."`` yields one author.
    """
    if not isinstance(raw_value, str) or not raw_value:
        return citation

    statement = TRAILING_PERIOD_RE.sub("", raw_value.strip(), count=1)

    for chunk in statement.split(CREATOR_CHUNK_SEPARATOR):
        mention = chunk.strip()
        if ILLUSTRATOR_RE.search(mention):
            _add_natural_list(
                citation, ILLUSTRATOR_PREFIX_RE.sub("", mention, count=1), ILLUSTRATOR_ROLE
            )
        elif TRANSLATOR_RE.search(mention):
            _add_natural_list(
                citation, TRANSLATOR_PREFIX_RE.sub("", mention, count=1), TRANSLATOR_ROLE
            )
        elif not UNKNOWN_ROLE_RE.search(mention):
            _add_natural_list(citation, mention, role_tag)

    return citation
