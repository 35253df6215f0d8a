import logging
from http import HTTPStatus

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.template.loader import render_to_string

from personal_hub.auth import get_authenticated_user_id
from shared.enums import RequestMethod
from shared.forms import first_form_error
from shared.htmx import messages_only, retarget_and_close_modal, with_messages

from .. import htmx_responses, services
from ..forms import TodoItemForm
from ..params import parse_todo_list_params
from .helpers import respond_with_todo_list

logger = logging.getLogger(__name__)

TODO_FORM_TEMPLATE = "todo/_todo_form.html"


@login_required
def new_todo_form(request: HttpRequest) -> HttpResponse:
    """モーダルに表示する新規作成フォームを返す。

    Args:
        request: HTTPリクエストオブジェクト。クエリに現在の表示条件を含む。

    Returns:
        フォームHTMLのHttpResponse。メソッド不正時は405。
    """
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    params = parse_todo_list_params(request.GET)
    return render(
        request,
        TODO_FORM_TEMPLATE,
        {"form": TodoItemForm(), "editing": None, "list_querystring": params.querystring},
    )


@login_required
def create_todo_item(request: HttpRequest) -> HttpResponse:
    """新しいTodoアイテムを作成する。

    POSTリクエストで送信されたフォームデータからTodoアイテムを作成し、
    モーダルを閉じて再取得した一覧を返す。

    Args:
        request: HTTPリクエストオブジェクト。

    Returns:
        作成成功時: 再取得したTodo一覧（HX-Retargetで一覧へ差し替え）。
        バリデーション失敗時: フォームHTMLを含む400 Bad Request。
        保存失敗時: トーストのみの503。
        メソッド不正時: 400 Bad Request。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.BAD_REQUEST)

    user_id = get_authenticated_user_id(request)
    params = parse_todo_list_params(request.GET)

    form = TodoItemForm(request.POST)
    if not form.is_valid():
        logger.warning("Todoアイテムの作成に失敗しました: user_id=%s, errors=%s", user_id, form.errors.as_json())
        messages.error(request, first_form_error(form))
        html = render_to_string(
            TODO_FORM_TEMPLATE,
            {"form": form, "editing": None, "list_querystring": params.querystring},
            request=request,
        )
        return with_messages(request, html, status=HTTPStatus.BAD_REQUEST)

    result = services.create_todo(form, user_id=user_id)
    if not result.success:
        messages.error(request, result.error or "Failed to create todo")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    logger.info(
        "Todoアイテムを作成しました: user_id=%s, id=%s, title='%s'",
        user_id,
        result.todo_item.pk if result.todo_item else None,
        result.todo_item.title if result.todo_item else None,
    )
    messages.success(request, "Todo created successfully")

    response = respond_with_todo_list(request, user_id=user_id, params=params)
    if response.status_code != HTTPStatus.OK:
        return response
    return retarget_and_close_modal(response, f"#{htmx_responses.TODO_LIST_ID}")
