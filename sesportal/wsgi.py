"""
WSGI config for the SES 1on1 portal.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sesportal.settings")

application = get_wsgi_application()
