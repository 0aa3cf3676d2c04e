"""
Management command to check a single profile field value.
Usage: python manage.py check_profile_field phone "11 99999 9999" --mask
"""

from django.core.management.base import BaseCommand, CommandError

from profiles.error_messages import message_for
from profiles.phone_mask import format_phone
from profiles.rules import FIELD_IDS, validate


class Command(BaseCommand):
    help = 'Validate a profile field value (optionally applying the phone mask first)'

    def add_arguments(self, parser):
        parser.add_argument('field', choices=FIELD_IDS)
        parser.add_argument('value')
        parser.add_argument(
            '--mask',
            action='store_true',
            help='Format the value with the phone mask before validating',
        )

    def handle(self, *args, **options):
        field_id = options['field']
        value = options['value']

        if options['mask']:
            value = format_phone(value)
            self.stdout.write(f'Masked value: {value}')

        verdict = validate(field_id, value)
        if not verdict.is_valid:
            raise CommandError(
                f'{field_id} is invalid ({verdict.error.value}): {message_for(field_id, verdict.error)}'
            )

        self.stdout.write(self.style.SUCCESS(f'{field_id} is valid'))
