"""
Media inspection helpers.

Centralizes ffprobe parsing and orientation classification.
"""

import asyncio
import json

from videos.service.commands import run_command
from videos.service.constants import (
    ORIENTATION_LANDSCAPE,
    ORIENTATION_OTHER,
    ORIENTATION_PORTRAIT,
)
from videos.service.errors import MediaInspectionError


def classify_aspect_ratio(width, height):
    """
    Bucket a frame size into an orientation.

    Uses floor(width / height): 1 is landscape, 0 is portrait, anything else
    is other. A square frame floors to 1 and is therefore landscape.

    Args:
        width: Pixel width
        height: Pixel height (must be non-zero)

    Returns:
        str: 'landscape', 'portrait' or 'other'
    """
    ratio = width // height
    if ratio == 1:
        return ORIENTATION_LANDSCAPE
    if ratio == 0:
        return ORIENTATION_PORTRAIT
    return ORIENTATION_OTHER


async def probe_streams(file_path, timeout=None, logger=None):
    """
    List the streams of a media file using ffprobe.

    Returns:
        list[dict]: The 'streams' array from ffprobe's JSON output

    Raises:
        MediaInspectionError: If ffprobe fails, times out or prints bad JSON
    """
    def log(message):
        if logger:
            logger(message)

    cmd = [
        'ffprobe',
        '-v', 'error',
        '-print_format', 'json',
        '-show_streams',
        str(file_path),
    ]
    log(f"Running: {' '.join(cmd)}")

    try:
        result = await run_command(cmd, timeout=timeout)
    except FileNotFoundError as e:
        raise MediaInspectionError(detail=f'ffprobe not available: {e}')
    except asyncio.TimeoutError:
        raise MediaInspectionError(detail=f'ffprobe timed out after {timeout}s')

    if result.returncode != 0:
        raise MediaInspectionError(
            detail=f'ffprobe failed with code {result.returncode}: {result.stderr.strip()}'
        )

    try:
        metadata = json.loads(result.stdout)
    except json.JSONDecodeError:
        raise MediaInspectionError(detail=f'ffprobe output is not JSON: {result.stdout[:200]}')

    streams = metadata.get('streams') if isinstance(metadata, dict) else None
    return streams or []


async def get_video_orientation(file_path, timeout=None, logger=None):
    """
    Classify the orientation of the first video stream in a file.

    Args:
        file_path: Path to a local media file
        timeout: Seconds to allow ffprobe
        logger: Optional callable(str) for logging

    Returns:
        str: 'landscape', 'portrait' or 'other'

    Raises:
        MediaInspectionError: If no usable video stream is found
    """
    streams = await probe_streams(file_path, timeout=timeout, logger=logger)

    for stream in streams:
        width = stream.get('width')
        height = stream.get('height')
        if width is None or height is None:
            continue
        try:
            width, height = int(width), int(height)
        except (TypeError, ValueError):
            break
        if height <= 0:
            break
        orientation = classify_aspect_ratio(width, height)
        if logger:
            logger(f'Video is {width}x{height}: {orientation}')
        return orientation

    raise MediaInspectionError(detail=f'No video stream with dimensions in {file_path}')
