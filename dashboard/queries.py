"""ダッシュボードの集計クエリ。

各アプリのモデルを横断して、ユーザーごとの件数を取得する。
"""

from dataclasses import dataclass

from django.utils import timezone

from notes.models import Note
from passwords.models import PasswordEntry
from projects.models import Project
from todo.models import TodoItem
from todo.queries import get_today_completed_count

UPCOMING_TODOS_LIMIT = 5


@dataclass(frozen=True)
class DashboardStats:
    """ダッシュボードに表示する件数。

    Attributes:
        projects: プロジェクト数。
        passwords: 保存パスワード数。
        notes: ノート数。
        todos: Todo総数。
        pending_todos: 未完了のTodo数。
        completed_today: 今日完了したTodo数。
    """

    projects: int = 0
    passwords: int = 0
    notes: int = 0
    todos: int = 0
    pending_todos: int = 0
    completed_today: int = 0


def get_dashboard_stats(user_id: int) -> DashboardStats:
    """ユーザーのダッシュボード集計を取得する。

    Args:
        user_id: 対象ユーザーID。

    Returns:
        DashboardStats。
    """
    todos = TodoItem.objects.filter(user_id=user_id)
    return DashboardStats(
        projects=Project.objects.filter(user_id=user_id).count(),
        passwords=PasswordEntry.objects.filter(user_id=user_id).count(),
        notes=Note.objects.filter(user_id=user_id).count(),
        todos=todos.count(),
        pending_todos=todos.filter(completed=False).count(),
        completed_today=get_today_completed_count(user_id),
    )


def get_upcoming_todos(user_id: int, *, limit: int = UPCOMING_TODOS_LIMIT) -> list[TodoItem]:
    """期限が近い順に未完了Todoを取得する（期限切れ・期限なしは含めない）。"""
    return list(
        TodoItem.objects.filter(
            user_id=user_id,
            completed=False,
            due_date__gt=timezone.now(),
        ).order_by("due_date")[:limit]
    )
