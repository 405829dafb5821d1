"""
Django settings for the tubely project.

Every deployment-specific value is read from the environment so the same
settings module serves local development, tests and containers.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-tubely-dev-key')

DEBUG = _env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = [h for h in os.environ.get('DJANGO_ALLOWED_HOSTS', '*').split(',') if h]

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.staticfiles',
    'videos',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'tubely.urls'

ASGI_APPLICATION = 'tubely.asgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('TUBELY_DB_PATH', str(BASE_DIR / 'tubely.db')),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'

STATIC_URL = 'static/'

# Uploads above this size are spooled to disk by Django before the view runs.
FILE_UPLOAD_MAX_MEMORY_SIZE = 10 << 20

# Tubely
TUBELY_PORT = int(os.environ.get('TUBELY_PORT', '8091'))
TUBELY_ASSETS_ROOT = os.environ.get('TUBELY_ASSETS_ROOT', str(BASE_DIR / 'assets'))
TUBELY_TEMP_ROOT = os.environ.get('TUBELY_TEMP_ROOT', str(Path(TUBELY_ASSETS_ROOT) / 'tmp'))
TUBELY_ASSETS_BASE_URL = os.environ.get(
    'TUBELY_ASSETS_BASE_URL', f'http://localhost:{TUBELY_PORT}/assets'
)
TUBELY_JWT_SECRET = os.environ.get('TUBELY_JWT_SECRET', '')
TUBELY_S3_BUCKET = os.environ.get('TUBELY_S3_BUCKET', '')
TUBELY_S3_REGION = os.environ.get('TUBELY_S3_REGION', 'us-east-1')
TUBELY_S3_ENDPOINT_URL = os.environ.get('TUBELY_S3_ENDPOINT_URL') or None
TUBELY_PRESIGN_TTL = int(os.environ.get('TUBELY_PRESIGN_TTL', '3600'))
TUBELY_FFPROBE_TIMEOUT = float(os.environ.get('TUBELY_FFPROBE_TIMEOUT', '30'))
TUBELY_FFMPEG_TIMEOUT = float(os.environ.get('TUBELY_FFMPEG_TIMEOUT', '600'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'videos': {
            'handlers': ['console'],
            'level': os.environ.get('TUBELY_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
