"""Projectsアプリケーションのデータモデル定義。"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class ProjectStatus(models.TextChoices):
    """プロジェクトの状態。"""

    ACTIVE = "active", "Active"
    COMPLETED = "completed", "Completed"
    ON_HOLD = "on-hold", "On Hold"


class Project(models.Model):
    """進行中のプロジェクトを表すモデル。

    Attributes:
        user: 所有ユーザー。
        title: タイトル。必須。
        description: 説明文。任意。
        status: 状態（active / completed / on-hold）。
        progress: 進捗率（0〜100）。
        created_at: 作成日時。
        updated_at: 最終更新日時。
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="projects",
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    status = models.CharField(max_length=20, choices=ProjectStatus.choices, default=ProjectStatus.ACTIVE)
    progress = models.PositiveSmallIntegerField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["user", "-created_at"], name="project_user_created_at"),
        ]

    def __str__(self) -> str:
        return self.title
