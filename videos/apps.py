import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class VideosConfig(AppConfig):
    name = 'videos'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        """Create the asset directories when the app is ready"""
        from videos.service.assets import ensure_assets_dir
        from videos.service.config import get_api_config

        cfg = get_api_config()
        try:
            ensure_assets_dir(cfg)
        except OSError as e:
            logger.warning("Could not create asset directories under %s: %s", cfg.assets_root, e)
