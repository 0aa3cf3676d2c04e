"""
Editing state of the profile form.

ProfileEditor owns the current value of every field. Widgets push edits into
it and read verdicts and messages back; nothing is bound implicitly.
"""

import logging

from .error_messages import error_message
from .phone_mask import apply_phone_mask, format_phone
from .rules import FIELD_IDS, UnknownFieldError, validate

logger = logging.getLogger(__name__)

SEED_DEFAULTS = {
    'full_name': 'Ana Sha',
    'username': 'anasha',
    'bio': 'Apaixonada por tecnologia e sempre em busca dos melhores produtos.',
    'email': 'ana@gmail.com',
    'phone': '+55 11 99999-9999',
}


class ProfileEditor:
    """
    Holds the field values of one profile form instance.

    Usage:
        editor = ProfileEditor()
        editor.edit('phone', '11 98765')   # stored as '+55 11 9876-5'
        editor.blur('phone')
        editor.error_message('phone')      # 'The number must have ...'
    """

    def __init__(self, initial=None):
        self.values = dict(SEED_DEFAULTS)
        if initial:
            for field_id, value in initial.items():
                self._check_field(field_id)
                self.values[field_id] = value
        # The phone field only ever holds masked values.
        self.values['phone'] = format_phone(self.values['phone'])
        self.touched = set()
        self._subscribers = []

    @staticmethod
    def _check_field(field_id):
        if field_id not in FIELD_IDS:
            raise UnknownFieldError(field_id)

    def subscribe(self, callback):
        """Register ``callback(field_id, value, verdict)`` for field changes."""
        self._subscribers.append(callback)

    def write_silently(self, field_id, value):
        """Replace a field value without notifying subscribers."""
        self._check_field(field_id)
        self.values[field_id] = value

    def edit(self, field_id, raw):
        """
        Apply a user edit to a field and return the new verdict.

        Phone edits are masked first. The masked value is stored without
        re-entering edit(), and subscribers hear about the change once.
        """
        self._check_field(field_id)
        value = raw or ''
        if field_id == 'phone':
            value = apply_phone_mask(self.values['phone'], value)
        self.write_silently(field_id, value)

        verdict = validate(field_id, value)
        for callback in self._subscribers:
            callback(field_id, value, verdict)
        return verdict

    def blur(self, field_id):
        self._check_field(field_id)
        self.touched.add(field_id)

    def verdict(self, field_id):
        return validate(field_id, self.values[field_id])

    def error_message(self, field_id):
        return error_message(
            field_id, self.verdict(field_id), touched=field_id in self.touched
        )

    def errors(self):
        """Map of invalid fields to their error kinds."""
        errors = {}
        for field_id in FIELD_IDS:
            verdict = self.verdict(field_id)
            if not verdict.is_valid:
                errors[field_id] = verdict.error
        return errors

    @property
    def is_valid(self):
        return not self.errors()

    def submit(self):
        """
        Submit the form.

        Returns a copy of the values when every field is valid, otherwise
        marks all fields as touched so their errors show up and returns None.
        """
        errors = self.errors()
        if errors:
            self.touched.update(FIELD_IDS)
            logger.warning(f"Profile submit rejected, invalid fields: {', '.join(errors)}")
            return None

        logger.info(f"Profile submitted: {self.values}")
        return dict(self.values)

    def change_photo(self):
        # Photo upload is not implemented yet.
        logger.info("Profile photo change requested")
