"""Notesアプリケーションのデータモデル定義。"""

import os
import uuid

from django.conf import settings
from django.db import models


def note_image_upload_to(instance: "Note", filename: str) -> str:
    """ノート画像の保存先パスを返す。

    ファイル名はランダムに置き換え、拡張子だけを引き継ぐ。

    Args:
        instance: 保存対象のノート。user_idが設定済みであること。
        filename: アップロードされた元のファイル名。

    Returns:
        'uploads/<user_id>/<ランダム名>.<拡張子>' 形式の相対パス。
    """
    _, ext = os.path.splitext(filename)
    return f"uploads/{instance.user_id}/{uuid.uuid4().hex}{ext.lower()}"


class Note(models.Model):
    """ノートを表すモデル。

    Attributes:
        user: 所有ユーザー。
        title: タイトル。必須。
        content: 本文。任意。
        image: 添付画像。任意。
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notes",
    )
    title = models.CharField(max_length=255)
    content = models.TextField(blank=True)
    image = models.FileField(upload_to=note_image_upload_to, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["user", "-created_at"], name="note_user_created_at"),
        ]

    def __str__(self) -> str:
        return self.title
