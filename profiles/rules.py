"""
Validation rules for profile fields.

Each field has an ordered list of (predicate, error kind) pairs. A value is
checked against the rules in order and the first violated rule decides the
verdict, so at most one error is reported per field.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator

from .phone_mask import extract_digits


class ErrorKind(str, Enum):
    """Reasons a field value can be rejected."""

    REQUIRED = 'required'
    INCOMPLETE_NAME = 'incomplete_name'
    WORD_TOO_SHORT = 'word_too_short'
    INVALID_CHARACTERS = 'invalid_characters'
    INVALID_LENGTH = 'invalid_length'
    TOO_LONG = 'too_long'
    INVALID_FORMAT = 'invalid_format'
    TOO_FEW_DIGITS = 'too_few_digits'


class UnknownFieldError(KeyError):
    """Raised when asking for the rules of a field the form does not have."""


@dataclass(frozen=True)
class Verdict:
    """Outcome of validating one field value."""

    error: ErrorKind | None = None

    @property
    def is_valid(self):
        return self.error is None

    @classmethod
    def invalid(cls, error):
        return cls(error=error)


VALID = Verdict()


@dataclass(frozen=True)
class Rule:
    """A predicate that returns True when the value breaks the rule."""

    violated: Callable[[str], bool]
    error: ErrorKind


@dataclass(frozen=True)
class FieldRules:
    rules: tuple
    optional: bool = False

    def check(self, value) -> Verdict:
        value = value or ''
        if self.optional and not value:
            return VALID
        for rule in self.rules:
            if rule.violated(value):
                return Verdict.invalid(rule.error)
        return VALID


FULL_NAME_CHARS = re.compile(r'[A-Za-zÀ-ÖØ-öø-ÿ\s]*')
USERNAME_CHARS = re.compile(r'[A-Za-z0-9_]*')
PHONE_FORMAT = re.compile(r'\+55\s\d{2}\s\d{4,5}-\d{4}')

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
BIO_MAX_LENGTH = 250
PHONE_MIN_DIGITS = 12  # country code + area code + 8-digit landline

# No allowlist: "user@localhost" has no dotted domain and must be rejected.
_email_validator = EmailValidator(allowlist=[])


def _is_empty(value):
    return not value


def _is_malformed_email(value):
    try:
        _email_validator(value)
    except ValidationError:
        return True
    return False


FULL_NAME_RULES = FieldRules((
    Rule(_is_empty, ErrorKind.REQUIRED),
    Rule(lambda value: len(value.split()) < 2, ErrorKind.INCOMPLETE_NAME),
    Rule(lambda value: any(len(word) < 2 for word in value.split()), ErrorKind.WORD_TOO_SHORT),
    Rule(lambda value: not FULL_NAME_CHARS.fullmatch(value), ErrorKind.INVALID_CHARACTERS),
))

USERNAME_RULES = FieldRules((
    Rule(_is_empty, ErrorKind.REQUIRED),
    Rule(
        lambda value: not USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH,
        ErrorKind.INVALID_LENGTH,
    ),
    Rule(lambda value: not USERNAME_CHARS.fullmatch(value), ErrorKind.INVALID_CHARACTERS),
))

BIO_RULES = FieldRules((
    Rule(lambda value: len(value) > BIO_MAX_LENGTH, ErrorKind.TOO_LONG),
), optional=True)

EMAIL_RULES = FieldRules((
    Rule(_is_empty, ErrorKind.REQUIRED),
    Rule(_is_malformed_email, ErrorKind.INVALID_FORMAT),
))

PHONE_RULES = FieldRules((
    Rule(_is_empty, ErrorKind.REQUIRED),
    Rule(lambda value: len(extract_digits(value)) < PHONE_MIN_DIGITS, ErrorKind.TOO_FEW_DIGITS),
    Rule(lambda value: not PHONE_FORMAT.fullmatch(value), ErrorKind.INVALID_FORMAT),
))

FIELD_RULES = {
    'full_name': FULL_NAME_RULES,
    'username': USERNAME_RULES,
    'bio': BIO_RULES,
    'email': EMAIL_RULES,
    'phone': PHONE_RULES,
}

FIELD_IDS = tuple(FIELD_RULES)


def validate_full_name(value):
    return FULL_NAME_RULES.check(value)


def validate_username(value):
    return USERNAME_RULES.check(value)


def validate_bio(value):
    return BIO_RULES.check(value)


def validate_email(value):
    return EMAIL_RULES.check(value)


def validate_phone(value):
    """Validate an already formatted phone value (``+55 DD DDDDD-DDDD``)."""
    return PHONE_RULES.check(value)


def validate(field_id, value) -> Verdict:
    """
    Validate a value for the given profile field.

    Raises UnknownFieldError if the form has no such field.
    """
    try:
        rules = FIELD_RULES[field_id]
    except KeyError:
        raise UnknownFieldError(field_id) from None
    return rules.check(value)
