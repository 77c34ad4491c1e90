"""Translator tables for WorldCat xISBN records.

This module defines, per item type, which xISBN fields are copied into
which target fields. Adding support for a new item type requires only a
new entry in TRANSLATOR_TABLES.

xISBN source fields: url, ed, city, year, publisher, title, volume,
issue, lang, isbn, author, firstpage.
"""

from collections.abc import Mapping
from types import MappingProxyType

from citenorm.models.item_types import ItemType

from .fixers import fix_date, fix_lang, validate_isbn
from .translators import (
    TranslatorEntry,
    make_creators_translator,
    make_list_translator,
    make_translator,
)

__all__ = ["TRANSLATOR_TABLES", "get_table", "find_entry"]

Table = tuple[TranslatorEntry, ...]

# Entries shared by most tables
_URL = make_translator("url", "url")
_EDITION = make_translator("ed", "edition")
_PLACE = make_translator("city", "place")
_DATE = make_translator("year", "date", fix_date)
_PUBLISHER = make_translator("publisher", "publisher")
_TITLE = make_translator("title", "title")
_VOLUME = make_translator("volume", "volume")
_LANGUAGE = make_translator("lang", "language", fix_lang)
_ISBN = make_list_translator("isbn", "ISBN", validate_isbn)

_BLOG_POST: Table = (
    _URL,
    _DATE,
    _TITLE,
    _LANGUAGE,
    make_creators_translator("author", "author"),
)

TRANSLATOR_TABLES: Mapping[ItemType, Table] = MappingProxyType(
    {
        # No publisher
        ItemType.ARTWORK: (
            _TITLE,
            make_creators_translator("author", "artist"),
            _DATE,
            _LANGUAGE,
            _URL,
        ),
        ItemType.ATTACHMENT: (
            _URL,
            _TITLE,
        ),
        ItemType.AUDIO_RECORDING: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "performer"),
            _DATE,
            _VOLUME,
            make_translator("publisher", "label"),
            _LANGUAGE,
            _ISBN,
        ),
        ItemType.BILL: (
            _URL,
            _TITLE,
            make_creators_translator("author", "sponsor"),
            _DATE,
            make_translator("volume", "codeVolume"),
            _LANGUAGE,
        ),
        ItemType.BLOG_POST: _BLOG_POST,
        ItemType.BOOK: (
            _URL,
            _EDITION,
            _PLACE,
            _DATE,
            _PUBLISHER,
            _TITLE,
            _VOLUME,
            _LANGUAGE,
            _ISBN,
            make_creators_translator("author", "author"),
        ),
        ItemType.BOOK_SECTION: (
            _URL,
            _EDITION,
            _PLACE,
            _DATE,
            _PUBLISHER,
            make_translator("title", "bookTitle"),
            _VOLUME,
            _LANGUAGE,
            _ISBN,
            make_creators_translator("author", "author"),
        ),
        # No publisher; only the first page is known
        ItemType.CASE: (
            _URL,
            make_translator("title", "caseName"),
            make_translator("year", "dateDecided"),
            make_creators_translator("author", "author"),
            _LANGUAGE,
            make_translator("firstpage", "firstPage"),
        ),
        # No language field
        ItemType.COMPUTER_PROGRAM: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "programmer"),
            _ISBN,
        ),
        ItemType.CONFERENCE_PAPER: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "author"),
            _DATE,
            _VOLUME,
            _PUBLISHER,
            _LANGUAGE,
            _ISBN,
        ),
        ItemType.DICTIONARY_ENTRY: (
            _URL,
            _EDITION,
            _PLACE,
            make_creators_translator("author", "author"),
            _DATE,
            make_translator("title", "dictionaryTitle"),
            _PUBLISHER,
            _LANGUAGE,
            _ISBN,
        ),
        ItemType.DOCUMENT: (
            _URL,
            _PUBLISHER,
            _LANGUAGE,
            _EDITION,
            _DATE,
            _TITLE,
            make_creators_translator("author", "author"),
        ),
        ItemType.EMAIL: (
            _URL,
            _DATE,
            make_translator("title", "subject"),
            _LANGUAGE,
            make_creators_translator("author", "author"),
        ),
        ItemType.ENCYCLOPEDIA_ARTICLE: (
            _URL,
            _EDITION,
            _PLACE,
            make_creators_translator("author", "author"),
            _DATE,
            make_translator("title", "encyclopediaTitle"),
            _PUBLISHER,
            _LANGUAGE,
            _ISBN,
        ),
        ItemType.FILM: (
            _URL,
            _TITLE,
            make_creators_translator("author", "director"),
            _DATE,
        ),
        ItemType.FORUM_POST: _BLOG_POST,
        ItemType.HEARING: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "contributor"),
            _DATE,
        ),
        ItemType.INSTANT_MESSAGE: _BLOG_POST,
        ItemType.INTERVIEW: (
            _URL,
            _TITLE,
            make_creators_translator("author", "interviewee"),
            _DATE,
            _LANGUAGE,
        ),
        ItemType.JOURNAL_ARTICLE: (
            _URL,
            _TITLE,
            make_creators_translator("author", "author"),
            make_translator("issue", "issue"),
            _VOLUME,
            _DATE,
            _LANGUAGE,
        ),
        ItemType.LETTER: (
            _URL,
            _TITLE,
            make_creators_translator("author", "author"),
            _DATE,
            _LANGUAGE,
        ),
        ItemType.MAGAZINE_ARTICLE: (
            _TITLE,
            make_creators_translator("author", "author"),
            _DATE,
            _LANGUAGE,
        ),
        ItemType.MANUSCRIPT: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "author"),
            _DATE,
            _LANGUAGE,
        ),
        ItemType.MAP: (
            _URL,
            _EDITION,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "cartographer"),
            _DATE,
            _PUBLISHER,
            _LANGUAGE,
            _ISBN,
        ),
        ItemType.NEWSPAPER_ARTICLE: (
            _URL,
            _EDITION,
            _PLACE,
            make_creators_translator("author", "author"),
            _DATE,
            make_translator("title", "publicationTitle"),
            _LANGUAGE,
        ),
        ItemType.NOTE: (),
        ItemType.PATENT: (
            _URL,
            _PLACE,
            _TITLE,
            _LANGUAGE,
            make_creators_translator("author", "inventor"),
            make_translator("year", "issueDate"),
        ),
        ItemType.PODCAST: (
            _URL,
            _TITLE,
            make_creators_translator("author", "podcaster"),
            _LANGUAGE,
        ),
        ItemType.PRESENTATION: (
            _URL,
            _PLACE,
            _DATE,
            _TITLE,
            _LANGUAGE,
            make_creators_translator("author", "presenter"),
        ),
        ItemType.RADIO_BROADCAST: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "director"),
            _DATE,
            _LANGUAGE,
        ),
        ItemType.REPORT: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "author"),
            _DATE,
            _LANGUAGE,
        ),
        ItemType.STATUTE: (
            _URL,
            make_translator("title", "nameOfAct"),
            make_creators_translator("author", "author"),
            make_translator("year", "dateEnacted"),
            _LANGUAGE,
        ),
        ItemType.THESIS: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "author"),
            _DATE,
            _LANGUAGE,
        ),
        ItemType.TV_BROADCAST: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "director"),
            _DATE,
            _LANGUAGE,
        ),
        ItemType.VIDEO_RECORDING: (
            _URL,
            _PLACE,
            _TITLE,
            make_creators_translator("author", "director"),
            _DATE,
            _LANGUAGE,
            _ISBN,
        ),
        ItemType.WEBPAGE: (
            _URL,
            _TITLE,
            make_creators_translator("author", "author"),
            _DATE,
            _LANGUAGE,
        ),
    }
)


def get_table(item_type: ItemType | str | None) -> Table:
    """Get the translator table for an item type.

    Parameters
    ----------
    item_type : ItemType | str | None
        Item type tag.

    Returns
    -------
    Table
        Translator entries, or an empty table for unknown types.
    """
    if item_type is None:
        return ()
    try:
        return TRANSLATOR_TABLES.get(ItemType(item_type), ())
    except ValueError:
        return ()


def find_entry(table: Table, source_field: str) -> TranslatorEntry | None:
    """Return the entry translating ``source_field``, if any."""
    for entry in table:
        if entry.source_field == source_field:
            return entry
    return None
