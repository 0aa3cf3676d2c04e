"""
Tests for project settings.
"""

from config import settings as project_settings


class TestDatabaseSettings:

    def test_uses_sqlite_only(self):
        """
        Nothing about a profile is persisted, so no database driver is declared.

        Why it matters: a server backend here would need an undeclared driver.
        """
        assert project_settings.DATABASES['default']['ENGINE'] == 'django.db.backends.sqlite3'
        assert not hasattr(project_settings, 'USE_SQLITE')
