"""
Pydantic record models for BOE open-data API payloads.

The upstream API speaks Spanish field names (``titulo``, ``fecha``,
``tipo_norma``...) while the rest of MCPBoe works with English snake_case
names. Each record declares the upstream name as its alias, so the same model
reads upstream JSON and serializes with the Python names over the wire.

Decoding is tolerant of the upstream contract:
    - keys are matched case-insensitively (``Titulo`` == ``titulo``)
    - unknown keys are ignored
    - numbers sent for text fields (``"numero": 12``) are read as strings
    - missing keys and explicit ``null`` values fall back to field defaults
      (empty string, False, empty list)

Records are frozen once constructed; they are owned by the request that
produced them and discarded after serialization.

Python Learning Notes:
    - alias: the key pydantic reads from input data
    - populate_by_name: also accept the Python field name on input
    - model_validator(mode="before"): runs on the raw dict before field parsing
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BoeRecord(BaseModel):
    """Base class for every upstream record."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        # Lower-case keys and drop nulls so defaults apply
        if not isinstance(data, dict):
            return data
        return {
            str(key).lower(): value
            for key, value in data.items()
            if value is not None
        }


class TitleEntry(BoeRecord):
    """One title (``título``) of a consolidated law."""

    number: str = Field(default="", alias="numero")
    title: str = Field(default="", alias="titulo")


class ChapterEntry(BoeRecord):
    """One chapter (``capítulo``) of a consolidated law."""

    number: str = Field(default="", alias="numero")
    title: str = Field(default="", alias="titulo")


class ArticleEntry(BoeRecord):
    """One article of a consolidated law, including its body text."""

    number: str = Field(default="", alias="numero")
    title: str = Field(default="", alias="titulo")
    content: str = Field(default="", alias="contenido")


class StructureRecord(BoeRecord):
    """
    Flat structure of a consolidated law.

    Titles, chapters and articles are kept as three independent ordered
    lists in upstream order. No nesting between them is inferred.
    """

    titles: List[TitleEntry] = Field(default_factory=list, alias="titulos")
    chapters: List[ChapterEntry] = Field(default_factory=list, alias="capitulos")
    articles: List[ArticleEntry] = Field(default_factory=list, alias="articulos")

    @property
    def complexity(self) -> int:
        """Sum of title, chapter and article counts."""
        return len(self.titles) + len(self.chapters) + len(self.articles)


class LegislationRecord(BoeRecord):
    """
    A consolidated law as returned by ``/legislacion/consolidada``.

    ``id`` and ``title`` are always strings: they default to ``""`` when the
    upstream omits them or sends ``null``.
    """

    id: str = Field(default="", alias="id")
    title: str = Field(default="", alias="titulo")
    date: str = Field(default="", alias="fecha")
    url: str = Field(default="", alias="url")
    norm_type: str = Field(default="", alias="tipo_norma")
    number: str = Field(default="", alias="numero")
    department: str = Field(default="", alias="departamento")
    range: str = Field(default="", alias="rango")
    is_active: bool = Field(default=False, alias="vigente")
    text: str = Field(default="", alias="texto")
    structure: Optional[StructureRecord] = Field(default=None, alias="estructura")


class SummaryRecord(BoeRecord):
    """One entry of a daily BOE or BORME gazette summary."""

    id: str = Field(default="", alias="id")
    title: str = Field(default="", alias="titulo")
    date: str = Field(default="", alias="fecha")
    url: str = Field(default="", alias="url")
    section: str = Field(default="", alias="seccion")
    issuer: str = Field(default="", alias="emisor")
    pages: str = Field(default="", alias="paginas")
    document_type: str = Field(default="", alias="tipo_documento")

    @property
    def searchable_text(self) -> str:
        """Text the recent-search filter matches terms against."""
        return f"{self.title} {self.section} {self.issuer}"


class AuxiliaryRecord(BoeRecord):
    """
    Entry of an auxiliary lookup table.

    Used uniformly for departments, legal ranges and single code lookups; the
    ``type`` tag is free text such as ``"departamento"`` or ``"rango"``.
    """

    code: str = Field(default="", alias="codigo")
    description: str = Field(default="", alias="descripcion")
    type: str = Field(default="", alias="tipo")


def record_to_dict(record: BoeRecord) -> Dict[str, Any]:
    """Serialize a record with the Python (snake_case) field names."""
    return record.model_dump(mode="json", by_alias=False)
