"""
ASGI config for the SES 1on1 portal.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sesportal.settings")

application = get_asgi_application()
