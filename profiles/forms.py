"""
Forms for profile settings.
"""

from django import forms
from django.core.exceptions import ValidationError

from .editor import SEED_DEFAULTS
from .error_messages import message_for
from .phone_mask import format_phone
from .rules import BIO_MAX_LENGTH, validate

INPUT_CLASSES = 'w-full px-4 py-3 border-2 border-gray-200 rounded-xl focus:border-blue-500 focus:ring-4 focus:ring-blue-100 focus:outline-none transition-all duration-300 text-gray-700 font-medium'


class ProfileForm(forms.Form):
    """
    Form for users to edit their profile settings.

    Fields are declared optional so every error, including a missing value,
    comes from the profile rules with a single message per field.
    """

    full_name = forms.CharField(
        required=False,
        label='Full Name',
        widget=forms.TextInput(attrs={
            'class': INPUT_CLASSES,
            'placeholder': 'First and last name'
        })
    )
    username = forms.CharField(
        required=False,
        label='Username',
        widget=forms.TextInput(attrs={
            'class': INPUT_CLASSES,
            'placeholder': 'username'
        })
    )
    bio = forms.CharField(
        required=False,
        label='Bio',
        help_text=f'Optional, up to {BIO_MAX_LENGTH} characters.',
        widget=forms.Textarea(attrs={
            'class': INPUT_CLASSES,
            'rows': 3,
            'placeholder': 'Tell us about yourself (optional)'
        })
    )
    email = forms.CharField(
        required=False,
        label='Email',
        widget=forms.EmailInput(attrs={
            'class': INPUT_CLASSES,
            'placeholder': 'you@example.com'
        })
    )
    phone = forms.CharField(
        required=False,
        label='Phone Number',
        widget=forms.TextInput(attrs={
            'class': INPUT_CLASSES,
            'placeholder': '+55 XX XXXXX-XXXX',
            'inputmode': 'tel',
            'data-phone-mask': 'true'
        })
    )

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('initial', dict(SEED_DEFAULTS))
        super().__init__(*args, **kwargs)

    def _check(self, field_id, value):
        verdict = validate(field_id, value)
        if not verdict.is_valid:
            raise ValidationError(
                message_for(field_id, verdict.error), code=verdict.error.value
            )
        return value

    def clean_full_name(self):
        return self._check('full_name', self.cleaned_data.get('full_name'))

    def clean_username(self):
        return self._check('username', self.cleaned_data.get('username'))

    def clean_bio(self):
        return self._check('bio', self.cleaned_data.get('bio'))

    def clean_email(self):
        return self._check('email', self.cleaned_data.get('email'))

    def clean_phone(self):
        """Mask the submitted number before validating it."""
        return self._check('phone', format_phone(self.cleaned_data.get('phone')))
