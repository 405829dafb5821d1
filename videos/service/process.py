"""
Media repackaging service.

Rewrites MP4 containers for fast-start playback using ffmpeg stream copy.
"""

import asyncio
from pathlib import Path

from videos.service.commands import run_command
from videos.service.constants import FAST_START_SUFFIX
from videos.service.errors import MediaRepackagingError


def fast_start_path_for(input_path):
    """Output path for the fast-start copy of input_path"""
    input_path = Path(input_path)
    return input_path.with_name(input_path.name + FAST_START_SUFFIX)


async def process_video_for_fast_start(input_path, timeout=None, logger=None):
    """
    Move the moov atom of an MP4 to the front of the file.

    Streams are copied, not re-encoded, and existing metadata is kept. The
    input file is left in place; the caller owns both files.

    Args:
        input_path: Path to a local MP4 file
        timeout: Seconds to allow ffmpeg
        logger: Optional callable(str) for logging

    Returns:
        Path: The processed file (input path + '.processed')

    Raises:
        MediaRepackagingError: If ffmpeg fails or times out
    """
    def log(message):
        if logger:
            logger(message)

    input_path = Path(input_path)
    output_path = fast_start_path_for(input_path)

    # The output suffix isn't a container extension, so the muxer is explicit.
    cmd = [
        'ffmpeg',
        '-i', str(input_path),
        '-y',  # Overwrite output file
        '-movflags', 'faststart',
        '-map_metadata', '0',  # Copy existing metadata from input
        '-codec', 'copy',  # Copy all streams without re-encoding
        '-f', 'mp4',
        str(output_path),
    ]

    log(f"Running: {' '.join(cmd)}")

    try:
        result = await run_command(cmd, timeout=timeout)
    except FileNotFoundError as e:
        raise MediaRepackagingError(detail=f'ffmpeg not available: {e}')
    except asyncio.TimeoutError:
        raise MediaRepackagingError(detail=f'ffmpeg timed out after {timeout}s')

    if result.returncode != 0:
        log(f'ffmpeg stderr: {result.stderr}')
        raise MediaRepackagingError(
            detail=f'ffmpeg failed with code {result.returncode}: {result.stderr.strip()[-2000:]}'
        )

    log(f'Fast-start copy written: {output_path}')
    return output_path
