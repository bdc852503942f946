"""SNOMED Validator: SNOMED CT concept identifier grammar and check digit.

A SNOMED CT identifier is 6-18 digits with no leading zero. The last digit
is a Verhoeff check digit computed over the rest of the identifier, so a
well-formed string can still be rejected by the checksum.
"""

import re
from typing import Optional

from codelists.validators.base import BaseCodeValidator
from codelists.validators.models import ValidationError

SNOMED_PATTERN = re.compile(r"[1-9][0-9]*")

# Verhoeff dihedral group D5 multiplication table
_VERHOEFF_D = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

# Verhoeff position permutations: row i applies the row-1 permutation i times
_VERHOEFF_P1 = (1, 5, 7, 6, 2, 8, 3, 0, 9, 4)


def _build_permutations() -> tuple[tuple[int, ...], ...]:
    rows = [tuple(range(10))]
    for _ in range(7):
        previous = rows[-1]
        rows.append(tuple(previous[_VERHOEFF_P1[j]] for j in range(10)))
    return tuple(rows)


_VERHOEFF_P = _build_permutations()


def verhoeff_is_valid(digits: str) -> bool:
    """Return True if the trailing digit of `digits` is a correct Verhoeff check digit."""
    check = 0
    for position, char in enumerate(reversed(digits)):
        check = _VERHOEFF_D[check][_VERHOEFF_P[position % 8][int(char)]]
    return check == 0


class SnomedValidator(BaseCodeValidator):
    """Validates SNOMED CT concept identifiers such as 22298006."""

    min_length = 6
    max_length = 18

    @property
    def name(self) -> str:
        return "SNOMED"

    @property
    def pattern(self) -> re.Pattern:
        return SNOMED_PATTERN

    def _check_contents(self, code: str) -> Optional[ValidationError]:
        if not verhoeff_is_valid(code):
            return self._contents_error(code, "has an invalid check digit")
        return None
