"""ICD-10 Validator: ICD-10 diagnosis code grammar."""

import re

from codelists.validators.base import BaseCodeValidator

# Letter, two digits, then the X filler or an optionally dotted 1-3 digit subdivision
ICD10_PATTERN = re.compile(r"[A-Z][0-9]{2}(X|\.?[0-9]{1,3})?")


class ICD10Validator(BaseCodeValidator):
    """Validates ICD-10 codes such as A00, A00.1, A001 or A09X."""

    min_length = 3
    max_length = 7

    @property
    def name(self) -> str:
        return "ICD10"

    @property
    def pattern(self) -> re.Pattern:
        return ICD10_PATTERN
