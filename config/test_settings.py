"""
Settings used by the test suite.

Provides the values that settings.py refuses to default, then relaxes the
production-only options that get in the way of the test client.
"""

import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')

from .settings import *  # noqa: E402,F401,F403

DEBUG = False
SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
SECURE_HSTS_SECONDS = 0

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
