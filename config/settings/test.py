"""Test settings.

Isolates the test run from the developer's environment: no gateway
secret, no live exchange rate, in-memory mail and database.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'adm-travels-tests',
    }
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

YOCO_SECRET_KEY = 'sk_test_dummy'
YOCO_API_URL = 'https://payments.yoco.com/api/checkouts'
SITE_URL = 'https://admtravelssa.com'
CHECKOUT_SOURCE = 'admtravels-website'
FX_RATE_API_URL = ''
FX_RATE_API_KEY = ''
FX_DEFAULT_RATE = '18.0'
CONTACT_EMAIL = 'bookings@admtravelssa.com'

LOGGING['handlers']['console']['level'] = 'CRITICAL'  # noqa: F405
