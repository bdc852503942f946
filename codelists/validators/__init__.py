"""Code-list validators: per-coding-system grammars and whole-list validation.

Usage:
    from codelists.validators import validation_engine

    error = validation_engine.validate(codelist)
    if error is not None:
        print(error)
"""

from codelists.validators.base import BaseCodeValidator
from codelists.validators.engine import ValidationEngine, validation_engine
from codelists.validators.icd10_validator import ICD10Validator
from codelists.validators.models import (
    ErrorKind,
    InvalidCodeContents,
    InvalidCodelist,
    InvalidCodeLength,
    ValidationError,
)
from codelists.validators.opcs_validator import OPCSValidator
from codelists.validators.snomed_validator import SnomedValidator

__all__ = [
    "BaseCodeValidator",
    "ValidationEngine",
    "validation_engine",
    "OPCSValidator",
    "ICD10Validator",
    "SnomedValidator",
    "ValidationError",
    "InvalidCodeLength",
    "InvalidCodeContents",
    "InvalidCodelist",
    "ErrorKind",
]
