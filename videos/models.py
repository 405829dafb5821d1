from django.db import models
from nanoid import generate


def generate_nanoid():
    """Generate NanoID with A-Z a-z 0-9 alphabet"""
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    return generate(alphabet, size=21)


class Video(models.Model):
    """A user's video and its uploaded assets"""

    id = models.CharField(
        max_length=21, primary_key=True, default=generate_nanoid, editable=False
    )

    # Owner (JWT subject)
    user_id = models.CharField(max_length=200, db_index=True)

    title = models.CharField(max_length=500)
    description = models.TextField(blank=True)

    # Storage key of the processed video, never a signed URL
    video_url = models.CharField(max_length=500, null=True, blank=True)
    thumbnail_url = models.CharField(max_length=2048, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.title} ({self.id})"

    def is_owned_by(self, user_id):
        return self.user_id == str(user_id)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'description': self.description,
            'video_url': self.video_url,
            'thumbnail_url': self.thumbnail_url,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
