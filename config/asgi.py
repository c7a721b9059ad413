"""ASGI config for the ADM Travels backend.

Exposes the same application for ASGI servers (uvicorn, daphne). The
views are synchronous; Django runs them in a thread pool.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

# Use the development settings by default. Production servers should set
# DJANGO_SETTINGS_MODULE accordingly.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
