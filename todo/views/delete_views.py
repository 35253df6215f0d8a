import logging
from http import HTTPStatus

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404

from personal_hub.auth import get_authenticated_user_id
from shared.enums import RequestMethod
from shared.htmx import messages_only

from .. import services
from ..models import TodoItem
from ..params import parse_todo_list_params
from .helpers import respond_with_todo_list

logger = logging.getLogger(__name__)


@login_required
def delete_todo_item(request: HttpRequest, item_id: int) -> HttpResponse:
    """Todoアイテムを削除する。

    指定されたIDのTodoアイテムを削除し、再取得した一覧を返す。

    Args:
        request: HTTPリクエストオブジェクト。
        item_id: 削除するTodoアイテムのID。

    Returns:
        削除成功時: 再取得したTodo一覧のHttpResponse。
        削除失敗時: トーストのみの503。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。

    Raises:
        Http404: 指定されたIDのTodoアイテムが存在しない場合。
    """
    if request.method != RequestMethod.DELETE:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    params = parse_todo_list_params(request.GET)
    todo_item = get_object_or_404(TodoItem, id=item_id, user_id=user_id)

    result = services.delete_todo(todo_item)
    if not result.success:
        messages.error(request, result.error or "Failed to delete todo")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    logger.info(
        "Todoアイテムを削除しました: user_id=%s, id=%d, title='%s'",
        user_id,
        item_id,
        result.title,
    )
    messages.success(request, "Todo deleted successfully")
    return respond_with_todo_list(request, user_id=user_id, params=params)
