import functools
import json
import logging

from django.http import JsonResponse
from django.http.multipartparser import MultiPartParserError
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from videos import operations
from videos.ingest import upload_thumbnail, upload_video
from videos.service.config import get_api_config
from videos.service.errors import ApiError, BadRequest
from videos.service.storage import ObjectStore

logger = logging.getLogger(__name__)


def api_view(view):
    """
    Turn ApiError into a JSON error response.

    Client errors return their message. Server errors are logged with their
    detail and return only a generic message.
    """
    @functools.wraps(view)
    async def wrapper(request, *args, **kwargs):
        try:
            return await view(request, *args, **kwargs)
        except ApiError as e:
            if e.is_server_error:
                logger.error(
                    "%s %s failed: %s: %s", request.method, request.path, e.message, e.detail
                )
                return JsonResponse({'error': e.public_message}, status=e.status_code)
            logger.info(
                "%s %s rejected (%s): %s", request.method, request.path, e.status_code, e.message
            )
            return JsonResponse({'error': e.message}, status=e.status_code)
        except MultiPartParserError as e:
            logger.info("%s %s rejected: malformed form data: %s", request.method, request.path, e)
            return JsonResponse({'error': "Couldn't parse form data"}, status=400)
        except Exception:
            logger.exception("%s %s crashed", request.method, request.path)
            return JsonResponse({'error': 'Internal server error'}, status=500)

    return wrapper


def _parse_json_body(request):
    try:
        payload = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise BadRequest("Couldn't decode parameters")
    if not isinstance(payload, dict):
        raise BadRequest("Couldn't decode parameters")
    return payload


@csrf_exempt
@require_http_methods(['GET', 'POST'])
@api_view
async def videos_view(request):
    """
    GET: list the caller's videos (signed).
    POST: create a video record from {"title": ..., "description": ...}.
    """
    cfg = get_api_config()
    user_id = operations.authenticate(cfg, request.headers)
    store = ObjectStore(cfg)

    if request.method == 'POST':
        payload = _parse_json_body(request)
        video = await operations.create_video(
            user_id, payload.get('title'), payload.get('description', '')
        )
        logger.info("Created video %s for user %s", video.id, user_id)
        return JsonResponse(video.to_dict(), status=201)

    videos = await operations.list_videos(user_id)
    signed = [await operations.sign_video(v, store, cfg.presign_ttl) for v in videos]
    return JsonResponse(signed, safe=False)


@require_http_methods(['GET'])
@api_view
async def video_detail_view(request, video_id):
    """Return one of the caller's videos with a presigned video_url."""
    cfg = get_api_config()
    user_id = operations.authenticate(cfg, request.headers)
    video = await operations.get_owned_video(video_id, user_id)
    return JsonResponse(await operations.sign_video(video, ObjectStore(cfg), cfg.presign_ttl))


@csrf_exempt
@require_http_methods(['POST'])
@api_view
async def video_upload_view(request, video_id):
    """
    Upload an MP4 (multipart field "video") for a video the caller owns.

    Returns:
        JSON of the updated video with a presigned video_url
    """
    cfg = get_api_config()
    data = await upload_video(cfg, video_id, request.headers, request.FILES, ObjectStore(cfg))
    return JsonResponse(data)


@csrf_exempt
@require_http_methods(['POST'])
@api_view
async def thumbnail_upload_view(request, video_id):
    """Upload a JPEG/PNG thumbnail (multipart field "thumbnail")."""
    cfg = get_api_config()
    data = await upload_thumbnail(cfg, video_id, request.headers, request.FILES, ObjectStore(cfg))
    return JsonResponse(data)
