"""media_playerアプリケーションのデータモデル定義。"""

import os
import uuid

from django.conf import settings
from django.db import models


class MediaType(models.TextChoices):
    """メディアの種別。"""

    AUDIO = "audio", "Audio"
    VIDEO = "video", "Video"


def media_upload_to(instance: "MediaFile", filename: str) -> str:
    """メディアファイルの保存先パス（'uploads/<user_id>/<ランダム名>.<拡張子>'）を返す。"""
    _, ext = os.path.splitext(filename)
    return f"uploads/{instance.user_id}/{uuid.uuid4().hex}{ext.lower()}"


class MediaFile(models.Model):
    """アップロードされた音声/動画ファイル。

    Attributes:
        user: 所有ユーザー。
        title: 表示名。
        file: 保存したファイル。
        file_type: 種別（audio / video）。アップロード時の content_type から決める。
        duration: 再生時間（秒）。メタデータ読み込み時に記録する。
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="media_files",
    )
    title = models.CharField(max_length=255)
    file = models.FileField(upload_to=media_upload_to)
    file_type = models.CharField(max_length=10, choices=MediaType.choices)
    duration = models.FloatField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        indexes = [
            models.Index(fields=["user", "-created_at"], name="media_user_created_at"),
        ]

    def __str__(self) -> str:
        return self.title

    @property
    def is_video(self) -> bool:
        return self.file_type == MediaType.VIDEO
