"""Base validator: abstract class implementing the Strategy Pattern.

Each coding system is a standalone, independently testable grammar.
New coding systems are added by subclassing, without touching the
aggregation in `validate_all`.
"""

from abc import ABC, abstractmethod
import re
import time
from typing import Optional

import structlog

from codelists.validators.adapter import CodeSource, iter_codes
from codelists.validators.models import (
    InvalidCodeContents,
    InvalidCodelist,
    InvalidCodeLength,
    ValidationError,
)

logger = structlog.get_logger()


class BaseCodeValidator(ABC):
    """Abstract base for all coding-system validators.

    Contract:
        - validate_code() is pure: same code → same result, no side effects
        - length bounds are checked before the structural pattern
        - validate_all() scans the whole list and never stops at the first failure
        - instances are read-only after construction and safe to share across threads
    """

    min_length: int
    max_length: int

    def __init__(self, min_length: Optional[int] = None, max_length: Optional[int] = None):
        """Initialize with the class length bounds or per-instance overrides."""
        if min_length is not None:
            self.min_length = min_length
        if max_length is not None:
            self.max_length = max_length
        if self.min_length > self.max_length:
            raise ValueError(
                f"{self.name} min_length {self.min_length} exceeds max_length {self.max_length}"
            )

    @property
    @abstractmethod
    def name(self) -> str:
        """Coding system label used in reasons and logs, e.g. "OPCS"."""
        ...

    @property
    @abstractmethod
    def pattern(self) -> re.Pattern:
        """Compiled grammar the whole code must match."""
        ...

    def validate_code(self, code: str) -> Optional[ValidationError]:
        """Validate the form of a single code.

        Args:
            code: Raw code as stored in the list, not trimmed

        Returns:
            None if the code is valid, otherwise InvalidCodeLength or InvalidCodeContents
        """
        if len(code) > self.max_length:
            return InvalidCodeLength(
                code=code,
                reason=f"{self.name} code {code} is greater than {self.max_length} characters in length",
            )

        if len(code) < self.min_length:
            return InvalidCodeLength(
                code=code,
                reason=f"{self.name} code {code} is less than {self.min_length} characters in length",
            )

        if not self.pattern.fullmatch(code):
            return self._contents_error(code, "does not match the expected format")

        return self._check_contents(code)

    def _check_contents(self, code: str) -> Optional[ValidationError]:
        """Extra structural rules beyond the pattern. Runs only for pattern matches."""
        return None

    def validate_all(self, codelist: CodeSource) -> Optional[InvalidCodelist]:
        """Validate every code in the list.

        Args:
            codelist: Anything the list adapter can read codes from

        Returns:
            None if every code is valid, otherwise InvalidCodelist with one
            (code, reason) pair per invalid code in scan order
        """
        start_time = time.perf_counter()
        invalid_codes: list[tuple[str, str]] = []
        total = 0

        for code in iter_codes(codelist):
            total += 1
            error = self.validate_code(code)
            if error is not None:
                logger.debug("invalid_code", code_system=self.name, code=code, kind=error.kind.value)
                invalid_codes.append((code, str(error)))

        logger.debug(
            "codelist_validation_complete",
            code_system=self.name,
            total_codes=total,
            invalid_codes=len(invalid_codes),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        if not invalid_codes:
            return None
        return InvalidCodelist(reasons=invalid_codes)

    # ── Helper Methods ──

    def _contents_error(self, code: str, detail: str) -> InvalidCodeContents:
        """Convenience method to create an InvalidCodeContents."""
        return InvalidCodeContents(code=code, reason=f"{self.name} code {code} {detail}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_length={self.min_length}, max_length={self.max_length})"
