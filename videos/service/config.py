"""
Configuration adapter for the video service layer.

Centralizes access to Django settings in a single immutable struct that is
passed explicitly to every service function, so the service modules never
read settings themselves.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from django.conf import settings

from videos.service.constants import DEFAULT_PRESIGN_TTL


@dataclass(frozen=True)
class ApiConfig:
    """Runtime configuration for the ingestion pipeline"""
    port: int
    assets_root: Path
    temp_root: Path
    assets_base_url: str
    jwt_secret: str
    s3_bucket: str
    s3_region: str
    s3_endpoint_url: Optional[str] = None
    presign_ttl: int = DEFAULT_PRESIGN_TTL
    ffprobe_timeout: Optional[float] = None
    ffmpeg_timeout: Optional[float] = None


def get_api_config():
    """
    Build an ApiConfig from the current Django settings.

    Called per request so that override_settings in tests takes effect.

    Returns:
        ApiConfig
    """
    return ApiConfig(
        port=settings.TUBELY_PORT,
        assets_root=Path(settings.TUBELY_ASSETS_ROOT),
        temp_root=Path(settings.TUBELY_TEMP_ROOT),
        assets_base_url=settings.TUBELY_ASSETS_BASE_URL.rstrip('/'),
        jwt_secret=settings.TUBELY_JWT_SECRET,
        s3_bucket=settings.TUBELY_S3_BUCKET,
        s3_region=settings.TUBELY_S3_REGION,
        s3_endpoint_url=settings.TUBELY_S3_ENDPOINT_URL,
        presign_ttl=settings.TUBELY_PRESIGN_TTL,
        ffprobe_timeout=settings.TUBELY_FFPROBE_TIMEOUT,
        ffmpeg_timeout=settings.TUBELY_FFMPEG_TIMEOUT,
    )
