"""Code-list container: ordered code → term entries with comments.

The container knows nothing about validation. It exposes its codes in
insertion order through `codes()`, which is all the validators read.
"""

from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel

from codelists.errors import (
    CodeEntryCommentAlreadyExists,
    CodeEntryCommentDoesNotExist,
    EntryNotFound,
    InvalidCodeListType,
)
from codelists.models.metadata import Metadata


class CodeListType(str, Enum):
    """Coding systems a list can belong to."""

    OPCS = "OPCS"
    ICD10 = "ICD10"
    SNOMED = "SNOMED"

    @classmethod
    def parse(cls, value: str) -> "CodeListType":
        """Parse a coding system name case-insensitively."""
        normalized = value.strip().upper().replace("-", "")
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidCodeListType(value) from None


class CodeEntry(BaseModel):
    """A single (code, term) pair with an optional comment."""

    code: str
    term: str
    comment: Optional[str] = None


class CodeList:
    """Ordered collection of code entries for one coding system."""

    def __init__(self, codelist_type: CodeListType, metadata: Metadata, name: Optional[str] = None):
        self.codelist_type = codelist_type
        self.metadata = metadata
        self.name = name
        self._entries: dict[tuple[str, str], CodeEntry] = {}

    @property
    def entries(self) -> list[CodeEntry]:
        return list(self._entries.values())

    def codes(self) -> Iterator[str]:
        """Yield every entry's code in insertion order."""
        for entry in self._entries.values():
            yield entry.code

    def add_entry(self, code: str, term: str, comment: Optional[str] = None) -> None:
        """Add an entry. Re-adding an existing (code, term) pair replaces it in place."""
        self._entries[(code, term)] = CodeEntry(code=code, term=term, comment=comment)
        self._touch()

    def remove_entry(self, code: str) -> None:
        """Remove every entry with this code."""
        keys = [key for key in self._entries if key[0] == code]
        if not keys:
            raise EntryNotFound(code)
        for key in keys:
            del self._entries[key]
        self._touch()

    def add_comment(self, code: str, term: str, comment: str) -> None:
        entry = self._get_entry(code, term)
        if entry.comment is not None:
            raise CodeEntryCommentAlreadyExists(code, term)
        entry.comment = comment
        self._touch()

    def update_comment(self, code: str, term: str, comment: str) -> None:
        entry = self._get_entry(code, term)
        if entry.comment is None:
            raise CodeEntryCommentDoesNotExist(code, term)
        entry.comment = comment
        self._touch()

    def remove_comment(self, code: str, term: str) -> None:
        entry = self._get_entry(code, term)
        if entry.comment is None:
            raise CodeEntryCommentDoesNotExist(code, term)
        entry.comment = None
        self._touch()

    def _get_entry(self, code: str, term: str) -> CodeEntry:
        entry = self._entries.get((code, term))
        if entry is None:
            raise EntryNotFound(code)
        return entry

    def _touch(self) -> None:
        self.metadata.provenance.update_last_modified_date()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CodeEntry]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"CodeList(type={self.codelist_type.value}, entries={len(self)})"
