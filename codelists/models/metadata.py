"""Metadata and provenance records attached to a code list."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from codelists.errors import ContributorNotFound, InvalidMetadataSource


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MetadataSource(str, Enum):
    """Where a code list came from."""

    MANUALLY_CREATED = "ManuallyCreated"
    LOADED_FROM_FILE = "LoadedFromFile"
    MAPPED_FROM_ANOTHER_CODELIST = "MappedFromAnotherCodelist"

    @classmethod
    def parse(cls, value: str) -> "MetadataSource":
        """Parse a source name, ignoring case, spaces, dashes and underscores."""
        normalized = value.replace(" ", "").replace("_", "").replace("-", "").lower()
        for source in cls:
            if source.value.lower() == normalized:
                return source
        raise InvalidMetadataSource(value)


class Provenance(BaseModel):
    """Origin, timestamps and contributors of a code list."""

    source: MetadataSource
    created_date: datetime = Field(default_factory=_utcnow)
    last_modified_date: datetime = Field(default_factory=_utcnow)
    contributors: Optional[set[str]] = Field(default_factory=set)

    @field_validator("contributors", mode="before")
    @classmethod
    def default_contributors(cls, value: Optional[set[str]]) -> set[str]:
        return set() if value is None else value

    def update_last_modified_date(self) -> None:
        self.last_modified_date = _utcnow()

    def add_contributor(self, contributor: str) -> None:
        self.contributors.add(contributor)

    def remove_contributor(self, contributor: str) -> None:
        """Remove a contributor, raising ContributorNotFound if absent."""
        if contributor not in self.contributors:
            raise ContributorNotFound(contributor)
        self.contributors.remove(contributor)


class Metadata(BaseModel):
    """Descriptive metadata for a code list."""

    provenance: Provenance
    authors: Optional[list[str]] = None
    version: Optional[str] = None
    description: Optional[str] = None
