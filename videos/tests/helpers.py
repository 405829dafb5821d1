"""
Shared builders for the test suites.
"""

import datetime
from pathlib import Path

import boto3
import jwt
from botocore.config import Config

from videos.service.auth import JWT_ALGORITHM, TOKEN_ISSUER
from videos.service.config import ApiConfig

JWT_SECRET = 'test-jwt-secret'
BUCKET = 'tubely-test-bucket'
REGION = 'us-east-1'


def make_config(base_dir, **overrides):
    """ApiConfig rooted in a temporary directory"""
    base_dir = Path(base_dir)
    values = dict(
        port=8091,
        assets_root=base_dir / 'assets',
        temp_root=base_dir / 'assets' / 'tmp',
        assets_base_url='http://localhost:8091/assets',
        jwt_secret=JWT_SECRET,
        s3_bucket=BUCKET,
        s3_region=REGION,
        presign_ttl=3600,
        ffprobe_timeout=5,
        ffmpeg_timeout=5,
    )
    values.update(overrides)
    return ApiConfig(**values)


def settings_for(base_dir):
    """Keyword arguments for override_settings matching make_config(base_dir)"""
    base_dir = Path(base_dir)
    return dict(
        TUBELY_ASSETS_ROOT=str(base_dir / 'assets'),
        TUBELY_TEMP_ROOT=str(base_dir / 'assets' / 'tmp'),
        TUBELY_ASSETS_BASE_URL='http://localhost:8091/assets',
        TUBELY_JWT_SECRET=JWT_SECRET,
        TUBELY_S3_BUCKET=BUCKET,
        TUBELY_S3_REGION=REGION,
        TUBELY_S3_ENDPOINT_URL=None,
        TUBELY_PRESIGN_TTL=3600,
    )


def make_s3_client():
    """Real boto3 client with dummy credentials; presigning works offline."""
    return boto3.client(
        's3',
        region_name=REGION,
        aws_access_key_id='AKIDTESTTESTTEST',
        aws_secret_access_key='test-secret-access-key',
        config=Config(signature_version='s3v4'),
    )


def make_jwt(user_id, secret=JWT_SECRET, expires_in=3600):
    """Access token for user_id, signed the way the auth service issues them"""
    now = datetime.datetime.now(tz=datetime.timezone.utc)
    payload = {
        'iss': TOKEN_ISSUER,
        'sub': str(user_id),
        'iat': now,
        'exp': now + datetime.timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)
