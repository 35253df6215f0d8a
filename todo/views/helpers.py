"""Todoビュー用のヘルパー関数。

一覧の再取得と期限通知の選択を、ビュー本体から切り出した共通処理として提供する。
"""

import logging
from http import HTTPStatus

from django.contrib import messages
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse

from shared.htmx import messages_only

from .. import htmx_responses, notifications, queries
from ..params import TodoListParams

logger = logging.getLogger(__name__)

FETCH_TODOS_ERROR_MESSAGE = "Failed to fetch todos"


def respond_with_todo_list(request: HttpRequest, *, user_id: int, params: TodoListParams) -> HttpResponse:
    """全Todoを再取得し、表示条件を適用した一覧パーシャルを返す。

    取得のたびに期限間近のTodoを判定し、発行する通知を一覧に埋め込む。

    Args:
        request: HTTPリクエスト。
        user_id: 対象ユーザーID。
        params: 表示条件。

    Returns:
        一覧HTMLのHttpResponse。取得失敗時はトーストのみの503。
    """
    try:
        todos = queries.get_user_todos(user_id)
    except DatabaseError:
        logger.exception("Todo一覧の取得に失敗しました: user_id=%s", user_id)
        messages.error(request, FETCH_TODOS_ERROR_MESSAGE)
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    due_notifications = notifications.select_notifications_to_emit(request, todos)
    return htmx_responses.render_todo_list_response(
        request,
        todos,
        params,
        notifications=due_notifications,
    )
