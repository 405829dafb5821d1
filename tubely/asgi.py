"""
ASGI entrypoint for tubely.

Upload views are async and await ffprobe/ffmpeg subprocesses, so the
service must run under an ASGI server for one request's transcoding not to
hold up the others, e.g.:

    uvicorn tubely.asgi:application --port 8091
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tubely.settings')

application = get_asgi_application()
