"""Passwordsアプリケーションのデータモデル定義。"""

from django.conf import settings
from django.db import models


class PasswordEntry(models.Model):
    """保存したパスワードを表すモデル。

    パスワードは入力された値をそのまま保存する（暗号化・変換はしない）。

    Attributes:
        user: 所有ユーザー。
        title: 表示名。必須。
        username: ログインID。任意。
        password: パスワード。必須。
        website_url: サイトURL。任意。
        notes: メモ。任意。
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="password_entries",
    )
    title = models.CharField(max_length=255)
    username = models.CharField(max_length=255, blank=True)
    password = models.CharField(max_length=1024)
    website_url = models.URLField(blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "password entries"
        indexes = [
            models.Index(fields=["user", "-created_at"], name="password_user_created_at"),
        ]

    def __str__(self) -> str:
        return self.title
