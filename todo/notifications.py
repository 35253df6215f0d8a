"""期限通知の発行判定（リクエスト/セッションとの橋渡し）。

期限間近の判定そのものは engine が行い、ここではブラウザの通知許可状態と
通知モード（repeat / once）に応じて、今回のレスポンスで発行する通知を選ぶ。
"""

import logging
from datetime import datetime, timedelta
from typing import Final

from django.conf import settings
from django.http import HttpRequest
from django.utils import timezone

from accounts.signals import register_session_state_key

from . import engine
from .models import TodoItem
from .params import (
    NOTIFICATION_PERMISSION_HEADER,
    DueNotificationMode,
    NotificationPermission,
    parse_due_notification_mode,
    parse_notification_permission,
)

logger = logging.getLogger(__name__)

# once モードで通知済みのTodo ID（サインイン/サインアウトで破棄）
NOTIFIED_TODO_IDS_SESSION_KEY: Final[str] = "todo_notified_ids"
register_session_state_key(NOTIFIED_TODO_IDS_SESSION_KEY)


def get_notification_mode() -> DueNotificationMode:
    return parse_due_notification_mode(getattr(settings, "TODO_DUE_NOTIFICATION_MODE", None))


def get_due_window() -> timedelta:
    return timedelta(minutes=getattr(settings, "TODO_DUE_WINDOW_MINUTES", 60))


def get_notification_permission(request: HttpRequest) -> NotificationPermission:
    """リクエストヘッダからブラウザの通知許可状態を取得する。"""
    return parse_notification_permission(request.headers.get(NOTIFICATION_PERMISSION_HEADER))


def select_notifications_to_emit(
    request: HttpRequest,
    todos: list[TodoItem],
    *,
    now: datetime | None = None,
) -> list[engine.DueNotification]:
    """今回のレスポンスで発行する期限通知を選ぶ。

    通知が許可（granted）されていなければ何も発行しない。
    once モードでは、同じログインセッション中に通知済みのTodoを除外し、
    今回発行するTodoを通知済みとして記録する。

    Args:
        request: HTTPリクエスト。
        todos: 取得済みの全Todo（フィルタ適用前）。
        now: 現在時刻。Noneなら timezone.now()。

    Returns:
        発行する通知のリスト。
    """
    if get_notification_permission(request) != NotificationPermission.GRANTED:
        return []

    notifications = engine.collect_due_notifications(
        todos,
        now=now or timezone.now(),
        window=get_due_window(),
    )

    if get_notification_mode() == DueNotificationMode.ONCE:
        stored_ids = request.session.get(NOTIFIED_TODO_IDS_SESSION_KEY, [])
        # 削除済みのTodoは記録から外す
        current_ids = {todo.pk for todo in todos}
        notified_ids = {todo_id for todo_id in stored_ids if todo_id in current_ids}
        notifications = [n for n in notifications if n.todo_id not in notified_ids]
        notified_ids.update(n.todo_id for n in notifications)
        if sorted(notified_ids) != stored_ids:
            request.session[NOTIFIED_TODO_IDS_SESSION_KEY] = sorted(notified_ids)

    if notifications:
        logger.info(
            "期限間近のTodoを通知します: user_id=%s, todo_ids=%s",
            request.user.pk,
            [n.todo_id for n in notifications],
        )
    return notifications
