from __future__ import annotations

import pytest

from src.backoffice.domain import validation


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("ana@x.com", True),
        ("first.last+tag@mail.example.com.br", True),
        ("ana@@x.com", False),
        ("ana..b@x.com", False),
        ("ana@x", False),
        ("", False),
    ],
)
def test_is_valid_email(value: str, expected: bool) -> None:
    assert validation.is_valid_email(value) is expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [("01000000", True), ("00000000", False), ("0100000", False), ("01000-000", False)],
)
def test_is_valid_postal_code(value: str, expected: bool) -> None:
    assert validation.is_valid_postal_code(value) is expected


@pytest.mark.unit
def test_phone_and_cell_lengths_after_stripping_punctuation() -> None:
    assert validation.is_valid_phone("(11) 3333-4444")
    assert not validation.is_valid_phone("(11) 93333-4444")
    assert validation.is_valid_cell("(11) 93333-4444")
    assert not validation.is_valid_cell("11 3333 4444")
    assert not validation.is_valid_cell("(11) 9333a-4444")


@pytest.mark.unit
def test_state_must_be_uppercase_federal_unit() -> None:
    assert validation.is_valid_state("SP")
    assert not validation.is_valid_state("sp")
    assert not validation.is_valid_state("XX")


@pytest.mark.unit
def test_password_complexity_requires_upper_lower_and_digit() -> None:
    assert validation.has_password_complexity("Secret123")
    assert not validation.has_password_complexity("secret123")
    assert not validation.has_password_complexity("SECRET123")
    assert not validation.has_password_complexity("SecretAbc")


@pytest.mark.unit
def test_length_error_messages() -> None:
    assert validation.length_error("ab", min_len=3) == "minimum of 3 characters"
    assert validation.length_error("abcd", max_len=3) == "maximum of 3 characters"
    assert validation.length_error("abc", min_len=3, max_len=3) is None
