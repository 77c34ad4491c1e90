"""Citation data models for citenorm.

A ``Citation`` is created once per requested identifier and mutated in
place by successive normalization passes (one per metadata source).
``Creator`` objects are immutable values stored in ``content["creators"]``.
"""

from dataclasses import dataclass, field
from typing import Any

from citenorm.models.item_types import ItemType

__all__ = ["ID_TYPES", "Citation", "Creator"]

# Identifier kinds a citation can be requested by
ID_TYPES = frozenset({"doi", "isbn", "oclc", "pmcid", "pmid", "qid", "url", "any"})


@dataclass(frozen=True)
class Creator:
    """Role-tagged person or organisation credited on an item.

    Attributes
    ----------
    creator_type : str
        Role tag (e.g., 'author', 'translator', 'contributor').
    first_name : str
        Given name(s); empty for organisations and surname-only input.
    last_name : str
        Family name, or the whole name when it could not be split.
    """

    creator_type: str
    first_name: str
    last_name: str

    def to_dict(self) -> dict[str, str]:
        """Convert to the camelCase mapping of the target schema."""
        return {
            "creatorType": self.creator_type,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }


@dataclass
class Citation:
    """Citation record under construction.

    Attributes
    ----------
    id_type : str
        Kind of identifier the citation was requested by (see ``ID_TYPES``).
    id_value : str
        Requested identifier value.
    content : dict[str, Any]
        Target field name -> value (str, list[str] or list[Creator]).
        A missing key means the field has not been populated yet.
    item_type : ItemType | None
        Item type selecting the translator table.
    source : list[str]
        Provenance tags of the sources that contributed data, in order.
    error : str | None
        Error message when the citation could not be completed.
    response_code : int
        HTTP-style outcome code; 500 until a pass succeeds.
    """

    id_type: str
    id_value: str
    content: dict[str, Any] = field(default_factory=dict)
    item_type: ItemType | None = None
    source: list[str] = field(default_factory=list)
    error: str | None = None
    response_code: int = 500

    def __post_init__(self) -> None:
        """Validate identifier kind."""
        if self.id_type not in ID_TYPES:
            raise ValueError(
                f"Unsupported identifier type: {self.id_type!r}. "
                f"Supported types: {sorted(ID_TYPES)}"
            )

    def _identifier(self, kind: str) -> str | None:
        return self.id_value if self.id_type == kind else None

    @property
    def doi(self) -> str | None:
        return self._identifier("doi")

    @property
    def isbn(self) -> str | None:
        return self._identifier("isbn")

    @property
    def oclc(self) -> str | None:
        return self._identifier("oclc")

    @property
    def pmcid(self) -> str | None:
        return self._identifier("pmcid")

    @property
    def pmid(self) -> str | None:
        return self._identifier("pmid")

    @property
    def qid(self) -> str | None:
        return self._identifier("qid")

    @property
    def url(self) -> str | None:
        return self._identifier("url")

    @property
    def any(self) -> str | None:
        return self._identifier("any")

    @property
    def citation_id(self) -> str:
        """Stable label of the requested identifier (e.g., 'isbn:9780596519797')."""
        return f"{self.id_type}:{self.id_value}"

    @property
    def creators(self) -> list[Creator]:
        """Creators collected so far (empty list if none)."""
        return self.content.get("creators", [])

    def add_source(self, tag: str) -> None:
        """Record that ``tag`` contributed data to this citation."""
        self.source.append(tag)

    def set_error(self, message: str, response_code: int) -> None:
        """Attach a terminal error to the citation.

        Parameters
        ----------
        message : str
            Human-readable error message.
        response_code : int
            HTTP-style status describing the failure.
        """
        self.error = message
        self.response_code = response_code

    def to_dict(self) -> dict[str, Any]:
        """Convert citation to a JSON-ready dictionary.

        Returns
        -------
        dict[str, Any]
            ``itemType`` followed by the content fields, with creators as
            camelCase mappings, plus provenance and identifier information.
        """
        data: dict[str, Any] = {}
        if self.item_type is not None:
            data["itemType"] = str(self.item_type)

        for key, value in self.content.items():
            if key == "creators":
                data[key] = [creator.to_dict() for creator in value]
            elif isinstance(value, list):
                data[key] = list(value)
            else:
                data[key] = value

        data["source"] = list(self.source)
        data[self.id_type] = self.id_value
        if self.error is not None:
            data["error"] = self.error
        return data
