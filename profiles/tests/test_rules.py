"""
Tests for profile field validation rules.

These tests verify:
- Priority order of rules (first violated rule wins)
- Full name, username, bio, email and phone rules
- Dispatch by field id
"""

import pytest

from profiles.rules import (
    ErrorKind,
    UnknownFieldError,
    validate,
    validate_bio,
    validate_email,
    validate_full_name,
    validate_phone,
    validate_username,
)


class TestFullName:
    """Tests for the full name rules."""

    @pytest.mark.parametrize('value', ['Ana Sha', 'José Conceição', 'Maria  da Silva'])
    def test_accepts_two_or_more_latin_words(self, value):
        assert validate_full_name(value).is_valid

    @pytest.mark.parametrize('value, expected', [
        ('', ErrorKind.REQUIRED),
        ('Ana', ErrorKind.INCOMPLETE_NAME),
        ('   ', ErrorKind.INCOMPLETE_NAME),
        ('A B', ErrorKind.WORD_TOO_SHORT),
        ('Ana S', ErrorKind.WORD_TOO_SHORT),
        ('Ana3 Sha', ErrorKind.INVALID_CHARACTERS),
        ('Ana Sha-Lee', ErrorKind.INVALID_CHARACTERS),
    ])
    def test_rejections(self, value, expected):
        assert validate_full_name(value).error == expected

    def test_first_violated_rule_wins(self):
        """
        A single short word with a digit breaks three rules.

        Only the highest priority one is reported.
        """
        assert validate_full_name('A3').error == ErrorKind.INCOMPLETE_NAME

    def test_none_is_treated_as_empty(self):
        assert validate_full_name(None).error == ErrorKind.REQUIRED


class TestUsername:
    """Tests for the username rules."""

    @pytest.mark.parametrize('value', ['anasha', 'ana_sha_99', 'abc', 'a' * 20])
    def test_accepts_word_characters(self, value):
        assert validate_username(value).is_valid

    @pytest.mark.parametrize('value, expected', [
        ('', ErrorKind.REQUIRED),
        ('an', ErrorKind.INVALID_LENGTH),
        ('a' * 21, ErrorKind.INVALID_LENGTH),
        ('ana sha', ErrorKind.INVALID_CHARACTERS),
        ('ana.sha', ErrorKind.INVALID_CHARACTERS),
        ('anasha\n', ErrorKind.INVALID_CHARACTERS),
    ])
    def test_rejections(self, value, expected):
        assert validate_username(value).error == expected

    def test_length_is_checked_before_characters(self):
        assert validate_username('a!').error == ErrorKind.INVALID_LENGTH


class TestBio:
    """Tests for the optional bio."""

    @pytest.mark.parametrize('value', ['', None, 'x' * 250])
    def test_empty_and_short_bios_are_valid(self, value):
        assert validate_bio(value).is_valid

    def test_too_long(self):
        assert validate_bio('x' * 251).error == ErrorKind.TOO_LONG


class TestEmail:
    """Tests for the email rules."""

    def test_valid_address(self):
        assert validate_email('ana@gmail.com').is_valid

    def test_required(self):
        assert validate_email('').error == ErrorKind.REQUIRED

    @pytest.mark.parametrize('value', [
        'ana@gmail',
        'ana.gmail.com',
        'ana@@gmail.com',
        'ana@localhost',
    ])
    def test_invalid_format(self, value):
        assert validate_email(value).error == ErrorKind.INVALID_FORMAT


class TestPhone:
    """Tests for the rules applied to a formatted phone value."""

    @pytest.mark.parametrize('value', ['+55 11 99999-9999', '+55 11 3333-4444'])
    def test_canonical_shapes_are_valid(self, value):
        assert validate_phone(value).is_valid

    @pytest.mark.parametrize('value, expected', [
        ('', ErrorKind.REQUIRED),
        ('+55 11 9999', ErrorKind.TOO_FEW_DIGITS),
        ('+55 11 9876-543', ErrorKind.TOO_FEW_DIGITS),
        ('5511999999999', ErrorKind.INVALID_FORMAT),
        ('+55 11 99999-99999', ErrorKind.INVALID_FORMAT),
        ('+55 119 9999-9999', ErrorKind.INVALID_FORMAT),
        ('+55 11 99999-9999\n', ErrorKind.INVALID_FORMAT),
    ])
    def test_rejections(self, value, expected):
        assert validate_phone(value).error == expected


class TestValidateDispatch:
    """Tests for validate(field_id, value)."""

    @pytest.mark.parametrize('field_id, value', [
        ('full_name', 'Ana Sha'),
        ('username', 'anasha'),
        ('bio', ''),
        ('email', 'ana@gmail.com'),
        ('phone', '+55 11 99999-9999'),
    ])
    def test_dispatches_to_field_rules(self, field_id, value):
        assert validate(field_id, value).is_valid

    def test_reports_error_kind(self):
        verdict = validate('username', 'an')

        assert verdict.is_valid is False
        assert verdict.error == ErrorKind.INVALID_LENGTH

    def test_unknown_field(self):
        with pytest.raises(UnknownFieldError):
            validate('nickname', 'ana')

    def test_unknown_field_is_a_key_error(self):
        with pytest.raises(KeyError):
            validate('nickname', 'ana')
