"""Validation Engine: routes each code list to the validator for its coding system.

This is the main entry point for code-list validation.

Usage:
    engine = ValidationEngine()
    error = engine.validate(codelist)
    if error is not None:
        for code, reason in error.reasons:
            ...
"""

from typing import Optional

import structlog

from codelists.errors import CodeListValidationFailed, InvalidCodeListType
from codelists.models.codelist import CodeList, CodeListType
from codelists.validators.base import BaseCodeValidator
from codelists.validators.models import InvalidCodelist, ValidationError

# Import all validators
from codelists.validators.icd10_validator import ICD10Validator
from codelists.validators.opcs_validator import OPCSValidator
from codelists.validators.snomed_validator import SnomedValidator

logger = structlog.get_logger()


class ValidationEngine:
    """Holds one validator per coding system and dispatches lists to it.

    Design principles:
        - Deterministic: same list → same result, reasons in scan order
        - Extensible: register validators without modifying the engine
        - Observable: logs every validation run
    """

    def __init__(self, validators: Optional[dict[CodeListType, BaseCodeValidator]] = None):
        """Initialize with default validators or a custom mapping.

        Args:
            validators: Optional coding system → validator mapping. If None, uses all defaults.
        """
        self.validators = dict(validators) if validators is not None else self._default_validators()

    @staticmethod
    def _default_validators() -> dict[CodeListType, BaseCodeValidator]:
        return {
            CodeListType.OPCS: OPCSValidator(),
            CodeListType.ICD10: ICD10Validator(),
            CodeListType.SNOMED: SnomedValidator(),
        }

    def validator_for(self, codelist_type: CodeListType) -> BaseCodeValidator:
        """Return the validator registered for a coding system."""
        validator = self.validators.get(codelist_type)
        if validator is None:
            raise InvalidCodeListType(getattr(codelist_type, "value", str(codelist_type)))
        return validator

    def validate_code(self, code: str, codelist_type: CodeListType) -> Optional[ValidationError]:
        """Validate a single code against one coding system."""
        return self.validator_for(codelist_type).validate_code(code)

    def validate(self, codelist: CodeList) -> Optional[InvalidCodelist]:
        """Validate every code in a list with the validator for its coding system.

        Returns:
            None if the list is valid, otherwise InvalidCodelist with all failures
        """
        validator = self.validator_for(codelist.codelist_type)
        error = validator.validate_all(codelist)
        if error is not None:
            logger.debug(
                "codelist_invalid",
                codelist=codelist.name,
                code_system=validator.name,
                invalid_codes=len(error.reasons),
            )
        return error

    def ensure_valid(self, codelist: CodeList) -> None:
        """Validate a list and raise CodeListValidationFailed if any code is invalid."""
        error = self.validate(codelist)
        if error is not None:
            raise CodeListValidationFailed(error)

    def add_validator(self, codelist_type: CodeListType, validator: BaseCodeValidator) -> None:
        """Register or replace the validator for a coding system."""
        self.validators[codelist_type] = validator

    def remove_validator(self, codelist_type: CodeListType) -> None:
        """Unregister the validator for a coding system."""
        if self.validators.pop(codelist_type, None) is None:
            raise InvalidCodeListType(getattr(codelist_type, "value", str(codelist_type)))


# Module-level singleton
validation_engine = ValidationEngine()
