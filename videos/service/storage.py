"""
Object storage gateway.

Thin wrapper over a boto3 S3 client bound to one bucket: upload a local
file under a key, and presign time-limited GET URLs for keys.
"""

import boto3
from boto3.exceptions import Boto3Error
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from videos.service.errors import UploadError


def s3_client(cfg):
    """Build an S3 client for cfg; credentials come from the standard boto3 chain."""
    return boto3.client(
        's3',
        region_name=cfg.s3_region,
        endpoint_url=cfg.s3_endpoint_url,
        config=Config(signature_version='s3v4'),
    )


class ObjectStore:
    """Bucket-scoped put/presign operations"""

    def __init__(self, cfg, client=None):
        self.bucket = cfg.s3_bucket
        self.region = cfg.s3_region
        self.client = client if client is not None else s3_client(cfg)

    def put(self, key, local_path, content_type):
        """
        Upload local_path to the bucket under key.

        Raises:
            UploadError: On any transport, auth or local read failure
        """
        try:
            self.client.upload_file(
                str(local_path),
                self.bucket,
                key,
                ExtraArgs={'ContentType': content_type},
            )
        except (Boto3Error, BotoCoreError, ClientError, OSError) as e:
            raise UploadError(detail=f'Upload of {key} to {self.bucket} failed: {e}')

    def presign(self, key, ttl_seconds):
        """
        Return a GET URL for key that is valid for ttl_seconds.

        Signing happens locally; nothing in the bucket changes.
        """
        return self.client.generate_presigned_url(
            ClientMethod='get_object',
            Params={'Bucket': self.bucket, 'Key': key},
            ExpiresIn=int(ttl_seconds),
        )

    def public_url(self, key):
        """Unsigned virtual-hosted URL for key (not readable for private buckets)"""
        return f'https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}'
