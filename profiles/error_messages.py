"""
Human readable messages for validation errors.
"""

from .rules import ErrorKind

ERROR_MESSAGES = {
    'full_name': {
        ErrorKind.REQUIRED: 'Full name is required.',
        ErrorKind.INCOMPLETE_NAME: 'Enter your first and last name.',
        ErrorKind.WORD_TOO_SHORT: 'Each name must have at least 2 letters.',
        ErrorKind.INVALID_CHARACTERS: 'Use only letters in your name.',
    },
    'username': {
        ErrorKind.REQUIRED: 'Username is required.',
        ErrorKind.INVALID_LENGTH: 'Username must be between 3 and 20 characters.',
        ErrorKind.INVALID_CHARACTERS: 'Use only letters, numbers and underscores.',
    },
    'bio': {
        ErrorKind.TOO_LONG: 'Bio must be at most 250 characters.',
    },
    'email': {
        ErrorKind.REQUIRED: 'Email is required.',
        ErrorKind.INVALID_FORMAT: 'Enter a valid email address.',
    },
    'phone': {
        ErrorKind.REQUIRED: 'Phone number is required.',
        ErrorKind.TOO_FEW_DIGITS: 'The number must have at least 10 digits (area code + number).',
        ErrorKind.INVALID_FORMAT: 'Invalid format. Use: +55 XX XXXXX-XXXX',
    },
}


def message_for(field_id, error):
    """Return the message for an error kind reported on a field."""
    return ERROR_MESSAGES[field_id][error]


def error_message(field_id, verdict, touched=True):
    """
    Message to display under a field, or an empty string.

    Errors are only shown once the user has interacted with the field.
    """
    if not touched or verdict.is_valid:
        return ''
    return message_for(field_id, verdict.error)
