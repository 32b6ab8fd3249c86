"""Tests for smartparenting/user/validation.py."""

import pytest

from smartparenting.user.validation import (
    is_blank,
    is_long_enough,
    is_valid_email,
    is_valid_phone,
)


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_is_blank(value):
    assert is_blank(value) is True


def test_is_blank_false_for_text():
    assert is_blank(" a ") is False


@pytest.mark.parametrize(
    "email", ["a@x.com", "first.last+tag@sub.example.org", "ünï@dömain.de"]
)
def test_valid_email(email):
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email", ["", "a@x", "a@x.com\n", "a @x.com", "a@x .com", "ax.com", "a@.com@b.c"]
)
def test_invalid_email(email):
    assert not is_valid_email(email)


@pytest.mark.parametrize(
    "phone",
    ["+15551234567", "15551234567", "+1 (555) 123-4567", "44 20 7946 0958", "12"],
)
def test_valid_phone(phone):
    assert is_valid_phone(phone)


@pytest.mark.parametrize(
    "phone", ["", "1", "0155512345", "+", "phone", "1234567890123456", "+0 1234"]
)
def test_invalid_phone(phone):
    assert not is_valid_phone(phone)


def test_password_length_boundary():
    assert not is_long_enough("12345")
    assert is_long_enough("123456")


@pytest.mark.parametrize("value", [7, 15551234567, ["a"], {"a": 1}, True])
def test_is_blank_for_non_text(value):
    assert is_blank(value) is True


@pytest.mark.parametrize("phone", ["1٥٥٥١٢٣٤٥٦٧", "+١٥٥٥١٢٣٤٥٦٧", "１５５５１２３４５６７"])
def test_phone_rejects_non_ascii_digits(phone):
    assert not is_valid_phone(phone)
