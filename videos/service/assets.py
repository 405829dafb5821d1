"""
Asset naming and path helpers.

Derives collision-resistant filenames from a declared media type and maps
filenames to local paths and public URLs. Apart from ensure_assets_dir,
nothing here touches the filesystem.
"""

import secrets
from pathlib import Path

from videos.service.constants import FALLBACK_EXTENSION, FILENAME_RANDOM_BYTES


def extension_for(media_type):
    """
    Derive a file extension from a MIME type.

    Args:
        media_type: Declared content type (e.g., 'video/mp4')

    Returns:
        str: '.' + subtype (e.g., '.mp4'), or '.bin' for malformed input
    """
    if not isinstance(media_type, str):
        return FALLBACK_EXTENSION
    parts = media_type.split('/')
    if len(parts) != 2:
        return FALLBACK_EXTENSION
    return f'.{parts[1]}'


def new_filename(media_type):
    """Generate a random hex filename with the extension for media_type."""
    return f'{secrets.token_hex(FILENAME_RANDOM_BYTES)}{extension_for(media_type)}'


def local_path_for(cfg, filename):
    """Path of a permanent asset under the assets root"""
    return Path(cfg.assets_root) / filename


def temp_path_for(cfg, filename):
    """Path of an upload's working copy under the temp root"""
    return Path(cfg.temp_root) / filename


def public_url_for(cfg, filename):
    """URL under which a local asset is served"""
    return f'{cfg.assets_base_url}/{filename}'


def ensure_assets_dir(cfg):
    """Create the assets and temp roots if they don't exist."""
    Path(cfg.assets_root).mkdir(parents=True, exist_ok=True)
    Path(cfg.temp_root).mkdir(parents=True, exist_ok=True)
