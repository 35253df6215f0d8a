"""HTMX固有のレスポンス生成。

Todo一覧パーシャルの組み立て（表示用の絞り込み・件数・期限通知のJSON埋め込み）を提供する。
API化時には使用しない（捨てて良い）レイヤー。
"""

from http import HTTPStatus
from typing import Final

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from django.template.loader import render_to_string

from shared.htmx import with_messages

from . import engine
from .models import TodoItem, TodoPriority
from .params import TodoFilterStatus, TodoListParams, TodoPriorityFilter, TodoSortKey

# =============================================================================
# DOM ID 定数
# =============================================================================

TODO_LIST_ID: Final[str] = "todo-list"
TODO_FILTERS_ID: Final[str] = "todo-filters"
DUE_NOTIFICATIONS_ID: Final[str] = "due-notifications"


def get_refresh_interval_seconds() -> int:
    return getattr(settings, "TODO_REFRESH_INTERVAL_SECONDS", 60)


def build_todo_list_context(
    todos: list[TodoItem],
    params: TodoListParams,
    *,
    notifications: list[engine.DueNotification] | None = None,
) -> dict[str, object]:
    """Todo一覧テンプレートのコンテキストを組み立てる。

    Args:
        todos: 取得済みの全Todo。
        params: 表示条件。
        notifications: 今回発行する期限通知。

    Returns:
        テンプレートコンテキスト。todo_items はフィルタ・並び替え適用後の一覧。
    """
    visible_todos = engine.apply_todo_view(
        todos,
        status=params.status,
        priority=params.priority,
        sort_key=params.sort_key,
    )
    return {
        "todo_items": visible_todos,
        "total_count": len(todos),
        "pending_count": sum(1 for todo in todos if not todo.completed),
        "current_status": params.status.value,
        "current_priority": params.priority.value,
        "current_sort": params.sort_key.value,
        "list_querystring": params.querystring,
        "due_notifications": [notification.as_dict() for notification in notifications or []],
        "refresh_interval": get_refresh_interval_seconds(),
    }


def build_filter_choices() -> dict[str, object]:
    """フィルタ/並び替えのセレクトボックス用の選択肢を返す。"""
    return {
        "status_choices": [(status.value, status.value.capitalize()) for status in TodoFilterStatus],
        "priority_choices": [(TodoPriorityFilter.ALL.value, "All priorities"), *TodoPriority.choices],
        "sort_choices": [
            (TodoSortKey.DUE_DATE.value, "Due date"),
            (TodoSortKey.PRIORITY.value, "Priority"),
            (TodoSortKey.CREATED.value, "Newest"),
        ],
    }


def render_todo_list_response(
    request: HttpRequest,
    todos: list[TodoItem],
    params: TodoListParams,
    *,
    notifications: list[engine.DueNotification] | None = None,
    status: HTTPStatus = HTTPStatus.OK,
) -> HttpResponse:
    """Todo一覧パーシャルとトーストのOOB更新を返す。

    Args:
        request: HTTPリクエスト。
        todos: 取得済みの全Todo。
        params: 表示条件。
        notifications: 今回発行する期限通知。
        status: 返却するHTTPステータス。

    Returns:
        一覧HTMLを含むHttpResponse。
    """
    html = render_to_string(
        "todo/_todo_list.html",
        build_todo_list_context(todos, params, notifications=notifications),
        request=request,
    )
    return with_messages(request, html, status=status)
