"""JSON dictionary file adapter."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from ...domain.entities.dictionary import DictionaryMetadata, TranslationDictionary
from ...exceptions import DictionaryError

logger = logging.getLogger(__name__)


class MetadataDocument(BaseModel):
    """``metadata`` block of the dictionary file."""

    model_config = {"populate_by_name": True}

    version: str
    languages: list[str] = Field(default_factory=list)
    last_updated: str = Field(default="", alias="lastUpdated")
    total_entries: int = Field(default=0, ge=0, alias="totalEntries")


class DictionaryDocument(BaseModel):
    """Top-level layout of the dictionary file."""

    metadata: MetadataDocument
    translations: dict[str, dict[str, str]] = Field(default_factory=dict)
    phrases: dict[str, dict[str, str]] = Field(default_factory=dict)

    def to_dictionary(self) -> TranslationDictionary:
        meta = self.metadata
        return TranslationDictionary(
            metadata=DictionaryMetadata(
                version=meta.version,
                languages=tuple(meta.languages),
                last_updated=meta.last_updated,
                total_entries=meta.total_entries,
            ),
            words=self.translations,
            phrases=self.phrases,
        )


class JSONDictionarySource:
    """Loads the dictionary from a JSON file on every ``load`` call."""

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def load(self) -> TranslationDictionary:
        """Read and validate the dictionary file.

        Raises:
            DictionaryError: If the file is missing, unreadable or malformed
        """
        if not self._path.exists():
            raise DictionaryError(f"{self._path.name} not found", path=self.location)

        try:
            raw = self._path.read_bytes()
        except OSError as e:
            raise DictionaryError(f"Failed to read {self._path.name}: {e}", path=self.location) from e

        try:
            document = DictionaryDocument.model_validate_json(raw)
        except PydanticValidationError as e:
            raise DictionaryError(
                f"Failed to parse {self._path.name}: {e.error_count()} validation error(s)",
                path=self.location
            ) from e

        dictionary = document.to_dictionary()
        logger.info(
            f"Dictionary loaded: {dictionary.word_count} words, "
            f"{dictionary.phrase_count} phrases (v{dictionary.metadata.version})"
        )
        return dictionary
