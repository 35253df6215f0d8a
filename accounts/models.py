"""accountsアプリケーションのデータモデル定義。

ユーザーごとのプロフィールを提供する。
"""

from django.conf import settings
from django.db import models

DEFAULT_FULL_NAME = "User"


class Profile(models.Model):
    """ユーザーのプロフィール。

    ユーザー作成時にシグナルで自動作成される。

    Attributes:
        user: 対応するユーザー（1対1）。
        full_name: 表示名。2〜100文字。
        email: メールアドレス（サインイン時のIDと同じ）。
        avatar_url: アバター画像のURL。任意。
        created_at: 作成日時。
        updated_at: 最終更新日時。
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    full_name = models.CharField(max_length=100, default=DEFAULT_FULL_NAME)
    email = models.EmailField()
    avatar_url = models.URLField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.full_name
