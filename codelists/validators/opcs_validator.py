"""OPCS Validator: OPCS-4 procedure code grammar.

Rules:
    - The code must be 3-5 characters long
    - The first character must be a letter
    - The second and third characters must be numbers
    - If there is a fourth character and it is a dot, one or two numbers follow it
    - Otherwise any fourth and fifth characters are numbers
"""

import re

from codelists.validators.base import BaseCodeValidator

OPCS_PATTERN = re.compile(r"[A-Z][0-9]{2}(\.[0-9]{1,2}|[0-9]{1,2})?")


class OPCSValidator(BaseCodeValidator):
    """Validates OPCS-4 codes such as A01, L35.3 or C0512."""

    min_length = 3
    max_length = 5

    @property
    def name(self) -> str:
        return "OPCS"

    @property
    def pattern(self) -> re.Pattern:
        return OPCS_PATTERN
