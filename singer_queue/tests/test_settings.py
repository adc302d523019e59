import importlib
import os

from django.test import SimpleTestCase
from mock import patch

import karaoke.settings


class TestSettings(SimpleTestCase):
    def tearDown(self):
        importlib.reload(karaoke.settings)

    def test_debug_off_without_environment(self):
        environ = {key: value for key, value in os.environ.items() if key != 'DJANGO_DEBUG'}
        with patch.dict(os.environ, environ, clear=True):
            settings = importlib.reload(karaoke.settings)
        self.assertFalse(settings.DEBUG)

    def test_debug_from_environment(self):
        with patch.dict(os.environ, {'DJANGO_DEBUG': 'True'}):
            settings = importlib.reload(karaoke.settings)
        self.assertTrue(settings.DEBUG)
