#!/usr/bin/env python
"""
Prepare a fresh checkout: create the config/flags tables, an admin user for the host, and open signup.
"""
import os
import django
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "karaoke.settings")
django.setup()

import constance
from django.core.management import call_command
from django.contrib.auth import get_user_model
from flags.state import disable_flag

HOST_USER = ('host', os.environ.get('KARAOKE_HOST_PASSWORD', 'dev'))


def create_superuser(username, password):
    User = get_user_model()
    if not User.objects.filter(username=username).exists():
        User.objects.create_superuser(username=username, email='', password=password)


if __name__ == '__main__':
    call_command('migrate')
    create_superuser(*HOST_USER)
    constance.config.UP_NEXT_COUNT = 3
    disable_flag('SIGNUP_CLOSED')
