"""
Upload pipelines for videos and thumbnails.

A video upload runs these steps in order and stops at the first failure:

    authorize -> check ownership -> validate -> write temp copy
    -> ffprobe (orientation) -> ffmpeg (fast start) -> S3 put
    -> record storage key -> remove temp files -> presign for the response

Every temp file is registered for removal as soon as its path is known, so
it is removed on success and on every failure path alike.
"""

import logging
from contextlib import ExitStack

from asgiref.sync import sync_to_async

from videos.operations import (
    authenticate,
    get_owned_video,
    sign_video,
    update_video,
)
from videos.service.assets import (
    local_path_for,
    new_filename,
    public_url_for,
    temp_path_for,
)
from videos.service.constants import (
    MAX_THUMBNAIL_UPLOAD_SIZE,
    MAX_VIDEO_UPLOAD_SIZE,
    THUMBNAIL_FORM_FIELD,
    THUMBNAIL_MEDIA_TYPES,
    VIDEO_FORM_FIELD,
    VIDEO_MEDIA_TYPE,
)
from videos.service.errors import BadRequest
from videos.service.media_info import get_video_orientation
from videos.service.process import fast_start_path_for, process_video_for_fast_start

logger = logging.getLogger(__name__)


def validate_upload(files, field_name, accepted_types, max_size):
    """
    Pick the single uploaded file in field_name and check its type and size.

    Args:
        files: Django MultiValueDict of uploaded files (request.FILES)
        field_name: Expected multipart field
        accepted_types: Declared content types that are allowed
        max_size: Size ceiling in bytes

    Returns:
        UploadedFile

    Raises:
        BadRequest: If the field is missing or repeated, the type isn't
            accepted, or the file is too large
    """
    uploads = files.getlist(field_name) if files is not None else []
    if len(uploads) != 1:
        raise BadRequest(f'Invalid {field_name}: expected exactly one file')

    upload = uploads[0]
    if upload.content_type not in accepted_types:
        raise BadRequest(f"Invalid file type, expected {' or '.join(accepted_types)}")

    if upload.size is None or upload.size > max_size:
        raise BadRequest('File size too large')

    return upload


def write_upload(upload, dest_path):
    """Stream an uploaded file to dest_path."""
    dest_path.parent.mkdir(parents=True, exist_ok=True)
    with open(dest_path, 'wb') as f:
        for chunk in upload.chunks():
            f.write(chunk)
    return dest_path


def discard_file(path):
    """Remove path if it exists."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.error("Failed to remove %s: %s", path, e)


async def upload_video(cfg, video_id, headers, files, store):
    """
    Ingest an MP4 for video_id and point the record at its storage key.

    Args:
        cfg: ApiConfig
        video_id: Target video
        headers: Request headers (for the bearer token)
        files: request.FILES
        store: ObjectStore used for the upload and for presigning

    Returns:
        dict: The video record with a presigned video_url
    """
    user_id = authenticate(cfg, headers)
    video = await get_owned_video(video_id, user_id)

    logger.info("Uploading video %s for user %s", video_id, user_id)

    upload = validate_upload(files, VIDEO_FORM_FIELD, [VIDEO_MEDIA_TYPE], MAX_VIDEO_UPLOAD_SIZE)
    media_type = upload.content_type

    filename = new_filename(media_type)
    temp_path = temp_path_for(cfg, filename)

    with ExitStack() as cleanup:
        cleanup.callback(discard_file, temp_path)
        await sync_to_async(write_upload, thread_sensitive=False)(upload, temp_path)
        logger.info("Wrote %d bytes to %s", upload.size, temp_path)

        orientation = await get_video_orientation(
            temp_path, timeout=cfg.ffprobe_timeout, logger=logger.info
        )
        key = f'{orientation}/{filename}'

        # ffmpeg may leave a partial output behind when it fails
        cleanup.callback(discard_file, fast_start_path_for(temp_path))
        processed_path = await process_video_for_fast_start(
            temp_path, timeout=cfg.ffmpeg_timeout, logger=logger.info
        )

        await sync_to_async(store.put, thread_sensitive=False)(key, processed_path, media_type)
        logger.info("Uploaded %s to %s", key, store.public_url(key))

        video.video_url = key
        await update_video(video)

    logger.info("Video %s now stored at %s", video_id, key)
    return await sign_video(video, store, cfg.presign_ttl)


async def upload_thumbnail(cfg, video_id, headers, files, store):
    """
    Save a thumbnail image under the assets root and link it from the record.

    Thumbnails are served directly from local storage, not through S3. The
    saved file is removed again if the record can't be updated.

    Returns:
        dict: The video record (video_url presigned, if present)
    """
    user_id = authenticate(cfg, headers)
    video = await get_owned_video(video_id, user_id)

    logger.info("Uploading thumbnail for video %s by user %s", video_id, user_id)

    upload = validate_upload(
        files, THUMBNAIL_FORM_FIELD, THUMBNAIL_MEDIA_TYPES, MAX_THUMBNAIL_UPLOAD_SIZE
    )

    filename = new_filename(upload.content_type)
    asset_path = local_path_for(cfg, filename)

    with ExitStack() as cleanup:
        cleanup.callback(discard_file, asset_path)
        await sync_to_async(write_upload, thread_sensitive=False)(upload, asset_path)

        video.thumbnail_url = public_url_for(cfg, filename)
        await update_video(video)

        # Keep the file now that the record points at it
        cleanup.pop_all()

    logger.info("Thumbnail for video %s saved as %s", video_id, asset_path)
    return await sign_video(video, store, cfg.presign_ttl)
