"""
Metadata store operations shared by the API views and the ingest pipeline.

The Video table is the authoritative record. Signed URLs are produced here
for responses only and never written back.
"""

from asgiref.sync import sync_to_async

from videos.models import Video
from videos.service.auth import get_bearer_token, validate_jwt
from videos.service.errors import BadRequest, Forbidden, NotFound


def authenticate(cfg, headers):
    """Return the user id for the request's bearer token."""
    token = get_bearer_token(headers)
    return validate_jwt(token, cfg.jwt_secret)


async def get_video(video_id):
    """Return the Video with video_id, or None."""
    return await Video.objects.filter(pk=video_id).afirst()


async def update_video(video):
    """Persist the mutable fields of video."""
    await video.asave(update_fields=['video_url', 'thumbnail_url', 'updated_at'])


async def get_owned_video(video_id, user_id):
    """
    Fetch a video and check that user_id owns it.

    Raises:
        BadRequest: If video_id is empty
        NotFound: If no such video exists
        Forbidden: If the video belongs to someone else
    """
    if not video_id:
        raise BadRequest('Invalid video ID')
    video = await get_video(video_id)
    if video is None:
        raise NotFound("Couldn't find video")
    if not video.is_owned_by(user_id):
        raise Forbidden('User not authorized')
    return video


async def sign_video(video, store, ttl_seconds):
    """
    Presentation dict for video with video_url replaced by a presigned URL.

    The Video instance itself is not modified.
    """
    data = video.to_dict()
    if video.video_url:
        data['video_url'] = await sync_to_async(store.presign)(video.video_url, ttl_seconds)
    return data


async def create_video(user_id, title, description=''):
    if not title or not str(title).strip():
        raise BadRequest('Missing required field: title')
    return await Video.objects.acreate(
        user_id=str(user_id),
        title=str(title).strip(),
        description=str(description or ''),
    )


async def list_videos(user_id):
    return [video async for video in Video.objects.filter(user_id=str(user_id))]
