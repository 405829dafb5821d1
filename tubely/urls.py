"""
URL configuration for the tubely project.

All API endpoints speak JSON. Thumbnails are served from the local assets
directory under /assets/ in development.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.urls import path

from videos.views import (
    thumbnail_upload_view,
    video_detail_view,
    video_upload_view,
    videos_view,
)

urlpatterns = [
    path('api/videos', videos_view, name='videos'),
    path('api/videos/<str:video_id>', video_detail_view, name='video_detail'),
    path('api/videos/<str:video_id>/upload', video_upload_view, name='video_upload'),
    path('api/thumbnails/<str:video_id>', thumbnail_upload_view, name='thumbnail_upload'),
]

# Serve thumbnails in development
urlpatterns += static('/assets/', document_root=settings.TUBELY_ASSETS_ROOT)
