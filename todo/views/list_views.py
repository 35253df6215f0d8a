import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render

from personal_hub.auth import get_authenticated_user_id

from .. import htmx_responses, notifications, queries
from ..engine import DueNotification
from ..models import TodoItem
from ..params import parse_todo_list_params
from .helpers import FETCH_TODOS_ERROR_MESSAGE, respond_with_todo_list

logger = logging.getLogger(__name__)


@login_required
def todo_list(request: HttpRequest) -> HttpResponse:
    """Todoリストのメインページを表示する。

    フィルタ/並び替えのコントロールと、条件を適用したTodo一覧を表示する。
    一覧は一定間隔で自動的に再取得される（期限通知の判定もその都度行う）。

    Args:
        request: HTTPリクエストオブジェクト。

    Returns:
        レンダリングされたTodoリストページのHttpResponse。
    """
    user_id = get_authenticated_user_id(request)
    params = parse_todo_list_params(request.GET)

    todos: list[TodoItem]
    due_notifications: list[DueNotification]
    try:
        todos = queries.get_user_todos(user_id)
    except DatabaseError:
        logger.exception("Todo一覧の取得に失敗しました: user_id=%s", user_id)
        messages.error(request, FETCH_TODOS_ERROR_MESSAGE)
        todos = []
        due_notifications = []
    else:
        due_notifications = notifications.select_notifications_to_emit(request, todos)
    context = htmx_responses.build_todo_list_context(todos, params, notifications=due_notifications)
    context.update(htmx_responses.build_filter_choices())
    context.update(
        {
            "todo_list_id": htmx_responses.TODO_LIST_ID,
            "todo_filters_id": htmx_responses.TODO_FILTERS_ID,
        }
    )
    return render(request, "todo/todo_list.html", context)


@login_required
def todo_items(request: HttpRequest) -> HttpResponse:
    """HTMX用のTodoリスト部分テンプレートを返す。

    フィルタ変更時と自動更新（ポーリング）で使用される。

    Args:
        request: HTTPリクエストオブジェクト。

    Returns:
        レンダリングされたTodoリスト部分テンプレートのHttpResponse。
    """
    user_id = get_authenticated_user_id(request)
    params = parse_todo_list_params(request.GET)
    return respond_with_todo_list(request, user_id=user_id, params=params)
