import logging
from http import HTTPStatus

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, render
from django.template.loader import render_to_string

from personal_hub.auth import get_authenticated_user_id
from shared.enums import RequestMethod
from shared.forms import first_form_error
from shared.htmx import messages_only, retarget_and_close_modal, with_messages

from .. import htmx_responses, services
from ..forms import TodoItemForm
from ..models import TodoItem
from ..params import parse_todo_list_params
from .create_views import TODO_FORM_TEMPLATE
from .helpers import respond_with_todo_list

logger = logging.getLogger(__name__)


@login_required
def edit_todo_form(request: HttpRequest, item_id: int) -> HttpResponse:
    """モーダルに表示する編集フォームを返す。

    Raises:
        Http404: 指定されたIDのTodoアイテムが存在しない場合。
    """
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    params = parse_todo_list_params(request.GET)
    todo_item = get_object_or_404(TodoItem, id=item_id, user_id=user_id)
    return render(
        request,
        TODO_FORM_TEMPLATE,
        {"form": TodoItemForm(instance=todo_item), "editing": todo_item, "list_querystring": params.querystring},
    )


@login_required
def update_todo_item(request: HttpRequest, item_id: int) -> HttpResponse:
    """Todoアイテムのタイトル/説明/期限/優先度を更新する。

    Args:
        request: HTTPリクエストオブジェクト。
        item_id: 更新するTodoアイテムのID。

    Returns:
        更新成功時: 再取得したTodo一覧（HX-Retargetで一覧へ差し替え）。
        バリデーション失敗時: フォームHTMLを含む400 Bad Request。
        保存失敗時: トーストのみの503。
        メソッド不正時: 405 Method Not Allowed。

    Raises:
        Http404: 指定されたIDのTodoアイテムが存在しない場合。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    params = parse_todo_list_params(request.GET)
    todo_item = get_object_or_404(TodoItem, id=item_id, user_id=user_id)

    form = TodoItemForm(request.POST, instance=todo_item)
    if not form.is_valid():
        logger.warning(
            "Todoアイテムの編集に失敗しました: user_id=%s, id=%d, errors=%s",
            user_id,
            item_id,
            form.errors.as_json(),
        )
        messages.error(request, first_form_error(form))
        html = render_to_string(
            TODO_FORM_TEMPLATE,
            {"form": form, "editing": todo_item, "list_querystring": params.querystring},
            request=request,
        )
        return with_messages(request, html, status=HTTPStatus.BAD_REQUEST)

    result = services.update_todo(form)
    if not result.success:
        messages.error(request, result.error or "Failed to update todo")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    logger.info("Todoアイテムを編集しました: user_id=%s, id=%d", user_id, item_id)
    messages.success(request, "Todo updated successfully")

    response = respond_with_todo_list(request, user_id=user_id, params=params)
    if response.status_code != HTTPStatus.OK:
        return response
    return retarget_and_close_modal(response, f"#{htmx_responses.TODO_LIST_ID}")


@login_required
def toggle_todo_item(request: HttpRequest, item_id: int) -> HttpResponse:
    """Todoアイテムの完了状態を反転させる。

    完了にした場合は完了日時を記録し、未完了に戻した場合は消去する。
    その後、全Todoを再取得して一覧を返す。

    Args:
        request: HTTPリクエストオブジェクト。
        item_id: 更新するTodoアイテムのID。

    Returns:
        更新成功時: 再取得したTodo一覧のHttpResponse。
        保存失敗時: トーストのみの503（一覧はそのまま）。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。

    Raises:
        Http404: 指定されたIDのTodoアイテムが存在しない場合。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    params = parse_todo_list_params(request.GET)
    todo_item = get_object_or_404(TodoItem, id=item_id, user_id=user_id)

    result = services.toggle_todo_completion(todo_item)
    if not result.success:
        messages.error(request, result.error or "Failed to update todo")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    logger.info(
        "Todoアイテムの完了状態を更新しました: user_id=%s, id=%d, completed=%s -> %s",
        user_id,
        item_id,
        result.old_status,
        todo_item.completed,
    )
    return respond_with_todo_list(request, user_id=user_id, params=params)
