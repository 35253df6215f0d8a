"""Todo一覧の読み取りクエリ。

データベースからTodoを取得するQuery Objectパターン。
Django ORMに依存するが、ビジネスロジックは含まない。
フィルタ・並び替えは取得後に engine で行う。
"""

from django.db.models import F
from django.utils import timezone

from .models import TodoItem


def get_user_todos(user_id: int) -> list[TodoItem]:
    """指定ユーザーの全Todoを取得する。

    期限の昇順（期限なしは末尾）、同じ期限内は作成日時の降順で返す。
    この順序が engine の安定ソートにおける同順位の並びになる。

    Args:
        user_id: 対象ユーザーID。

    Returns:
        TodoItemのリスト。
    """
    return list(
        TodoItem.objects.filter(user_id=user_id).order_by(
            F("due_date").asc(nulls_last=True),
            "-created_at",
        )
    )


def get_today_completed_count(user_id: int) -> int:
    """今日完了したTodoの件数を取得する。

    Args:
        user_id: 対象ユーザーID。

    Returns:
        今日（ローカル日付）に完了したTodoの件数。
    """
    today = timezone.localdate()
    return TodoItem.objects.filter(
        user_id=user_id,
        completed=True,
        completed_at__date=today,
    ).count()
