"""Todoアプリケーションのデータモデル定義。

Todoアイテムを管理するためのモデルを提供する。
"""

from django.conf import settings
from django.db import models


class TodoPriority(models.TextChoices):
    """Todoの優先度。"""

    HIGH = "high", "High"
    MEDIUM = "medium", "Medium"
    LOW = "low", "Low"


class TodoItem(models.Model):
    """Todoアイテムを表すモデル。

    各Todoアイテムはタイトル、説明文、期限、優先度、完了状態を持ち、作成者（User）に紐づく。
    completed_at は completed が True の間だけ値を持つ（完了トグルのサービスで維持する）。

    Attributes:
        id: 自動生成されるプライマリキー。
        user: Todoアイテムの所有者（ユーザー）。
        title: タイトル。最大255文字。
        description: 説明文。任意。
        due_date: 期限日時。任意。
        completed: 完了状態を示すブール値。デフォルトはFalse。
        completed_at: 完了日時。未完了ならNone。
        priority: 優先度（high / medium / low）。デフォルトはmedium。
        created_at: アイテムの作成日時。自動設定される。
        updated_at: アイテムの最終更新日時。自動更新される。
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="todo_items",
        db_index=True,
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    due_date = models.DateTimeField(null=True, blank=True)
    completed = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)
    priority = models.CharField(max_length=10, choices=TodoPriority.choices, default=TodoPriority.MEDIUM)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["user", "due_date"], name="todo_user_due_date"),
            models.Index(fields=["user", "-created_at"], name="todo_user_created_at"),
        ]

    def __str__(self) -> str:
        """Todoアイテムの文字列表現を返す。

        Returns:
            Todoアイテムのタイトル。
        """
        return self.title
