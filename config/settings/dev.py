"""Development settings.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts, readable log
output and the console email backend. Do not use these settings in
production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Human readable logs
LOGGING['handlers']['console']['formatter'] = 'console'  # noqa: F405

# Redirects go back to the local front-end
SITE_URL = get_env('SITE_URL', 'http://localhost:5173').rstrip('/')  # noqa: F405

# Use console email backend during development
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# Plain static storage, no manifest needed
STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}
