"""
Progressive phone mask for Brazilian numbers.

Rewrites whatever the user typed into ``+55 DD DDDDD-DDDD`` (mobile) or
``+55 DD DDDD-DDDD`` (landline) while they type. The output depends only on
the digits of the input, so formatting an already formatted value is a no-op.
"""

import re

COUNTRY_CODE = '55'
AREA_CODE_LENGTH = 2
MAX_DIGITS = 13  # 55 + area code + 9-digit mobile number
MOBILE_SUBSCRIBER_LENGTH = 9

_NON_DIGITS = re.compile(r'\D')


def extract_digits(value):
    """
    Return only the digits of a phone value.

    >>> extract_digits('+55 11 99999-9999')
    '5511999999999'
    """
    return _NON_DIGITS.sub('', value or '')


def format_phone(value):
    """
    Format a phone value for display.

    Empty input stays empty; anything else is prefixed with the country code
    when missing, clamped to 13 digits and grouped progressively:

    >>> format_phone('11')
    '+55 11'
    >>> format_phone('119999')
    '+55 11 9999'
    >>> format_phone('1133334444')
    '+55 11 3333-4444'
    >>> format_phone('11999999999')
    '+55 11 99999-9999'
    """
    digits = extract_digits(value)
    if not digits:
        return ''
    if not digits.startswith(COUNTRY_CODE):
        digits = COUNTRY_CODE + digits
    digits = digits[:MAX_DIGITS]

    rest = digits[len(COUNTRY_CODE):]
    formatted = '+' + COUNTRY_CODE
    if not rest:
        return formatted

    area_code, subscriber = rest[:AREA_CODE_LENGTH], rest[AREA_CODE_LENGTH:]
    formatted += ' ' + area_code
    if not subscriber:
        return formatted

    # Mobile numbers split 5+4, everything shorter keeps the landline 4+N split.
    split_at = 5 if len(subscriber) == MOBILE_SUBSCRIBER_LENGTH else 4
    formatted += ' ' + subscriber[:split_at]
    if len(subscriber) > split_at:
        formatted += '-' + subscriber[split_at:]
    return formatted


def _removed_span(previous, raw):
    """
    Return ``(start, end)`` when ``raw`` is ``previous`` with one contiguous
    span removed, otherwise None.
    """
    if len(raw) >= len(previous):
        return None
    start = 0
    while start < len(raw) and raw[start] == previous[start]:
        start += 1
    end = len(previous) - (len(raw) - start)
    if previous[end:] != raw[start:]:
        return None
    return start, end


def apply_phone_mask(previous, raw):
    """
    Compute the next displayed value for a keystroke in the phone field.

    ``previous`` is the value shown before the edit and ``raw`` is what the
    input holds right after it. Edits that are not plain deletions (typing,
    pasting over a selection) are simply reformatted. Deletions are handled
    so the user can always erase the number:

    - removing only a separator also removes the digit right before it,
      since the mask would otherwise put the separator straight back;
    - once fewer than two digits remain the field is cleared instead of
      being prefixed with the country code again.

    The caller writes the result back to the field without emitting another
    change event.
    """
    previous = previous or ''
    raw = raw or ''
    digits = extract_digits(raw)

    span = _removed_span(previous, raw)
    if span is not None:
        start, end = span
        if not extract_digits(previous[start:end]):
            before = len(extract_digits(previous[:start]))
            # The country code is fixed; only digits after it can be dropped.
            if before > len(COUNTRY_CODE):
                digits = digits[:before - 1] + digits[before:]
        if len(digits) < len(COUNTRY_CODE):
            return ''

    return format_phone(digits)
