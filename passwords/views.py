"""Passwordsアプリケーションのビュー。

CRUDは共通のエンティティビューに委譲する。
表示/非表示の切り替えはパスワード欄だけを差し替えるパーシャルで行う。
"""

from http import HTTPStatus

from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, render

from personal_hub.auth import get_authenticated_user_id
from shared import entity_views
from shared.entity_views import EntityConfig
from shared.enums import RequestMethod

from .forms import PasswordEntryForm
from .models import PasswordEntry

PASSWORD_ENTITY = EntityConfig(
    model=PasswordEntry,
    form_class=PasswordEntryForm,
    label="password",
    plural_label="passwords",
    template_dir="passwords",
    list_element_id="password-list",
    created_verb="saved",
)


@login_required
def password_list(request: HttpRequest) -> HttpResponse:
    """パスワード一覧ページを表示する。"""
    return entity_views.render_list_page(request, PASSWORD_ENTITY)


@login_required
def password_items(request: HttpRequest) -> HttpResponse:
    """HTMX用のパスワード一覧部分テンプレートを返す。"""
    return entity_views.render_list_partial(request, PASSWORD_ENTITY)


@login_required
def new_password_form(request: HttpRequest) -> HttpResponse:
    return entity_views.render_form(request, PASSWORD_ENTITY)


@login_required
def edit_password_form(request: HttpRequest, item_id: int) -> HttpResponse:
    return entity_views.render_form(request, PASSWORD_ENTITY, item_id=item_id)


@login_required
def create_password(request: HttpRequest) -> HttpResponse:
    return entity_views.handle_save(request, PASSWORD_ENTITY)


@login_required
def update_password(request: HttpRequest, item_id: int) -> HttpResponse:
    return entity_views.handle_save(request, PASSWORD_ENTITY, item_id=item_id)


@login_required
def delete_password(request: HttpRequest, item_id: int) -> HttpResponse:
    return entity_views.handle_delete(request, PASSWORD_ENTITY, item_id=item_id)


@login_required
def reveal_password(request: HttpRequest, item_id: int) -> HttpResponse:
    """パスワード欄の表示/非表示を切り替える。

    Args:
        request: HTTPリクエスト。クエリ visible=1 で表示、それ以外は伏せ字。
        item_id: 対象のパスワードID。

    Returns:
        パスワード欄のパーシャルHTML。メソッド不正時は405。

    Raises:
        Http404: 対象が存在しない、または他ユーザーの所有の場合。
    """
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    entry = get_object_or_404(PasswordEntry, id=item_id, user_id=user_id)
    visible = request.GET.get("visible") == "1"
    return render(request, "passwords/_password_secret.html", {"entry": entry, "visible": visible})
