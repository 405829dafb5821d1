"""
Upload and media constants.

Centralized definitions of accepted media types, size ceilings and
orientation buckets.
"""

# Accepted declared content types
VIDEO_MEDIA_TYPE = 'video/mp4'
THUMBNAIL_MEDIA_TYPES = ['image/jpeg', 'image/png']

# Size ceilings
MAX_VIDEO_UPLOAD_SIZE = 1 << 30  # 1 GiB
MAX_THUMBNAIL_UPLOAD_SIZE = 10 << 20  # 10 MiB

# Multipart form field names
VIDEO_FORM_FIELD = 'video'
THUMBNAIL_FORM_FIELD = 'thumbnail'

# Orientation buckets, used as storage key prefixes
ORIENTATION_LANDSCAPE = 'landscape'
ORIENTATION_PORTRAIT = 'portrait'
ORIENTATION_OTHER = 'other'

FALLBACK_EXTENSION = '.bin'
FAST_START_SUFFIX = '.processed'

# Random bytes per generated filename
FILENAME_RANDOM_BYTES = 32

DEFAULT_PRESIGN_TTL = 3600
