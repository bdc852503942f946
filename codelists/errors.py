"""Exceptions raised by the code-list container, metadata and validation engine.

Per-code validation failures are values (see codelists.validators.models),
not exceptions. These cover misuse of the library itself.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codelists.validators.models import InvalidCodelist


class CodeListError(Exception):
    """Base class for every error raised by this library."""


class InvalidCodeListType(CodeListError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid codelist type: {name}")


class EntryNotFound(CodeListError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Entry not found: {code}")


class CodeEntryCommentAlreadyExists(CodeListError):
    def __init__(self, code: str, term: str):
        self.code = code
        self.term = term
        super().__init__(
            f"Comment for CodeEntry with code {code} and term {term} already exists. "
            "Please update comment instead."
        )


class CodeEntryCommentDoesNotExist(CodeListError):
    def __init__(self, code: str, term: str):
        self.code = code
        self.term = term
        super().__init__(
            f"Comment for CodeEntry with code {code} and term {term} does not exist. "
            "Please use add comment instead if you are trying to add a comment."
        )


class ContributorNotFound(CodeListError):
    def __init__(self, contributor: str):
        self.contributor = contributor
        super().__init__(f"Contributor {contributor} not found")


class InvalidMetadataSource(CodeListError):
    def __init__(self, source_string: str):
        self.source_string = source_string
        super().__init__(f"Invalid metadata source: {source_string}")


class CodeListValidationFailed(CodeListError):
    """Raised by ValidationEngine.ensure_valid when a list has invalid codes."""

    def __init__(self, error: "InvalidCodelist"):
        self.error = error
        super().__init__(str(error))
