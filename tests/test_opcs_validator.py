import pytest

from codelists.models import CodeListType
from codelists.validators import InvalidCodeContents, InvalidCodelist, InvalidCodeLength, OPCSValidator
from codelists.validators.models import ErrorKind
from tests._builders import make_codelist

validator = OPCSValidator()


@pytest.mark.parametrize("code", ["A01", "C05", "L35.3", "A0112", "A011"])
def test_valid_opcs_codes_pass(code: str) -> None:
    assert validator.validate_code(code) is None


def test_code_shorter_than_three_characters_is_a_length_error() -> None:
    error = validator.validate_code("A0")

    assert error == InvalidCodeLength(code="A0", reason="OPCS code A0 is less than 3 characters in length")
    assert error.kind is ErrorKind.INVALID_CODE_LENGTH
    assert "less than 3 characters" in error.reason


def test_code_longer_than_five_characters_is_a_length_error() -> None:
    error = validator.validate_code("A01000")

    assert error == InvalidCodeLength(
        code="A01000", reason="OPCS code A01000 is greater than 5 characters in length"
    )
    assert "greater than 5 characters" in error.reason


@pytest.mark.parametrize(
    "code",
    [
        "101",  # first character not a letter
        "AA1",  # second character not a number
        "A0A",  # third character not a number
        "A01.",  # nothing after the dot
        "A01.A",  # letter after the dot
        "A010A",  # fifth character not a number
        "a01",  # lowercase letter
        "A01 ",  # untrimmed
    ],
)
def test_structurally_invalid_codes_are_contents_errors(code: str) -> None:
    error = validator.validate_code(code)

    assert error == InvalidCodeContents(code=code, reason=f"OPCS code {code} does not match the expected format")


def test_length_takes_precedence_over_structure() -> None:
    # Structurally hopeless and too long or too short: always reported as a length error.
    for code in ["!!", "", "......", "1234567890"]:
        assert isinstance(validator.validate_code(code), InvalidCodeLength)


def test_non_ascii_digits_are_rejected() -> None:
    # Arabic-Indic digits are Unicode digits but not ASCII 0-9.
    assert isinstance(validator.validate_code("A١٢"), InvalidCodeContents)


def test_trailing_newline_is_rejected() -> None:
    assert isinstance(validator.validate_code("A01\n"), InvalidCodeContents)


def test_validate_code_is_idempotent() -> None:
    assert validator.validate_code("AA1") == validator.validate_code("AA1")
    assert validator.validate_code("A01") is None
    assert validator.validate_code("A01") is None


def test_codelist_with_valid_codes_passes() -> None:
    codelist = make_codelist(
        CodeListType.OPCS,
        [
            ("C01", "Excision of eye"),
            ("C02", "Extirpation of lesion of orbit"),
            ("C03", "Insertion of prosthesis of eye"),
            ("C04", "Attention to prosthesis of eye"),
            ("C05", "Plastic repair of orbit"),
            ("L31.4", "Insertion Artery Carotid Stent Transluminal Percutaneous"),
            ("L35.3", "Insertion Artery Cerebral Stent Transluminal Percutaneous"),
            ("L47.4", "Insertion Artery Coeliac Stent Transluminal Percutaneous"),
        ],
    )

    assert validator.validate_all(codelist) is None


def test_codelist_with_all_invalid_codes_reports_every_code() -> None:
    codes = ["A0", "A01000", "101", "AA1", "A0A", "A01.", "A01.A", "A010A"]
    codelist = make_codelist(CodeListType.OPCS, [(code, f"term {code}") for code in codes])

    error = validator.validate_all(codelist)

    assert isinstance(error, InvalidCodelist)
    assert error.invalid_codes == codes
    message = str(error)
    assert "Code A0 is an invalid length" in message
    assert "OPCS code A0 is less than 3 characters in length" in message
    assert "Code A01000 is an invalid length" in message
    assert "OPCS code A01000 is greater than 5 characters in length" in message
    for code in codes[2:]:
        assert f"Code {code} contents is invalid" in message
        assert f"OPCS code {code} does not match the expected format" in message


def test_codelist_with_mixed_codes_reports_only_invalid_ones_in_order() -> None:
    codelist = make_codelist(
        CodeListType.OPCS,
        [
            ("C01", "Excision of eye"),
            ("A01000", "Extirpation of lesion of orbit"),
            ("C03", "Insertion of prosthesis of eye"),
            ("AA1", "Attention to prosthesis of eye"),
            ("C05", "Plastic repair of orbit"),
            ("A01.", "Insertion Artery Carotid Stent Transluminal Percutaneous"),
            ("L35.3", "Insertion Artery Cerebral Stent Transluminal Percutaneous"),
            ("A010A", "Insertion Artery Coeliac Stent Transluminal Percutaneous"),
        ],
    )

    error = validator.validate_all(codelist)

    assert error is not None
    assert len(error.reasons) == 4
    assert error.invalid_codes == ["A01000", "AA1", "A01.", "A010A"]
    assert error.reasons[0] == (
        "A01000",
        "Code A01000 is an invalid length. Reason: OPCS code A01000 is greater than 5 characters in length",
    )
    assert error.reasons[1] == (
        "AA1",
        "Code AA1 contents is invalid. Reason: OPCS code AA1 does not match the expected format",
    )
