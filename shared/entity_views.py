"""ユーザー所有エンティティの一覧/フォーム/保存/削除ビューの共通処理。

各アプリ（projects / passwords / notes）のビューは、ここにEntityConfigを渡すだけの薄い関数になる。
一覧は作成日時の降順で取得し、全ての書き込みの後に丸ごと再取得して返す。
"""

import logging
from dataclasses import dataclass
from http import HTTPStatus

from django import forms
from django.contrib import messages
from django.db import DatabaseError, models
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, render
from django.template.loader import render_to_string

from personal_hub.auth import get_authenticated_user_id

from .enums import RequestMethod
from .forms import first_form_error
from .htmx import messages_only, retarget_and_close_modal, with_messages
from .services import delete_owned_instance, save_owned_instance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityConfig:
    """エンティティごとのビュー設定。

    Attributes:
        model: 対象モデル（user FK と created_at を持つ）。
        form_class: 作成・編集に使うModelForm。
        label: 単数形の表示名（例: "project"）。
        plural_label: 複数形の表示名。テンプレートのコンテキスト名にも使う。
        template_dir: テンプレートのディレクトリ名。
        list_element_id: 一覧コンテナのDOM ID。
        created_verb: 作成成功メッセージの動詞（例: "saved" なら "Password saved successfully"）。
    """

    model: type[models.Model]
    form_class: type[forms.ModelForm]
    label: str
    plural_label: str
    template_dir: str
    list_element_id: str
    created_verb: str = "created"

    @property
    def page_template(self) -> str:
        return f"{self.template_dir}/{self.label}_list.html"

    @property
    def list_template(self) -> str:
        return f"{self.template_dir}/_{self.label}_list.html"

    @property
    def form_template(self) -> str:
        return f"{self.template_dir}/_{self.label}_form.html"


def fetch_owned_list(config: EntityConfig, user_id: int) -> list[models.Model]:
    """ユーザーのエンティティ一覧を作成日時の降順で取得する。"""
    return list(config.model._default_manager.filter(user_id=user_id).order_by("-created_at"))


def _get_owned_or_404(config: EntityConfig, *, item_id: int, user_id: int) -> models.Model:
    return get_object_or_404(config.model, id=item_id, user_id=user_id)


def render_list_page(request: HttpRequest, config: EntityConfig) -> HttpResponse:
    """一覧ページ全体を表示する。

    取得に失敗した場合は空の一覧とエラーメッセージを表示する。
    """
    user_id = get_authenticated_user_id(request)
    try:
        items = fetch_owned_list(config, user_id)
    except DatabaseError:
        logger.exception("%s一覧の取得に失敗しました: user_id=%s", config.label, user_id)
        messages.error(request, f"Failed to fetch {config.plural_label}")
        items = []

    return render(
        request,
        config.page_template,
        {config.plural_label: items, "list_element_id": config.list_element_id},
    )


def render_list_partial(request: HttpRequest, config: EntityConfig) -> HttpResponse:
    """一覧コンテナの中身（とトーストのOOB更新）を返す。

    取得に失敗した場合は一覧を差し替えず、エラートーストのみ返す。
    """
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    return _respond_with_list(request, config)


def _respond_with_list(request: HttpRequest, config: EntityConfig) -> HttpResponse:
    user_id = get_authenticated_user_id(request)
    try:
        items = fetch_owned_list(config, user_id)
    except DatabaseError:
        logger.exception("%s一覧の取得に失敗しました: user_id=%s", config.label, user_id)
        messages.error(request, f"Failed to fetch {config.plural_label}")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    html = render_to_string(config.list_template, {config.plural_label: items}, request=request)
    return with_messages(request, html)


def render_form(request: HttpRequest, config: EntityConfig, *, item_id: int | None = None) -> HttpResponse:
    """モーダルに表示する作成/編集フォームを返す。

    Args:
        request: HTTPリクエスト。
        config: エンティティ設定。
        item_id: 編集対象のID。Noneなら新規作成フォーム。

    Returns:
        フォームHTMLのHttpResponse。メソッド不正時は405。
    """
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    instance = _get_owned_or_404(config, item_id=item_id, user_id=user_id) if item_id is not None else None
    form = config.form_class(instance=instance)
    return render(request, config.form_template, {"form": form, "editing": instance})


def handle_save(request: HttpRequest, config: EntityConfig, *, item_id: int | None = None) -> HttpResponse:
    """フォーム送信を受け取り、作成または更新する。

    編集対象（item_id）の有無で作成/更新を切り替える。
    成功時はモーダルを閉じて再取得した一覧を返す。

    Returns:
        成功時: 一覧HTML（HX-Retargetで一覧コンテナへ差し替え）。
        バリデーション失敗時: フォームHTMLを含む400。
        保存失敗時: トーストのみの503。
        メソッド不正時: 405。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    instance = _get_owned_or_404(config, item_id=item_id, user_id=user_id) if item_id is not None else None
    form = config.form_class(request.POST, request.FILES, instance=instance)

    if not form.is_valid():
        logger.warning(
            "%sの入力が不正です: user_id=%s, errors=%s",
            config.label,
            user_id,
            form.errors.as_json(),
        )
        messages.error(request, first_form_error(form))
        html = render_to_string(
            config.form_template,
            {"form": form, "editing": instance},
            request=request,
        )
        return with_messages(request, html, status=HTTPStatus.BAD_REQUEST)

    result = save_owned_instance(form, user_id=user_id, entity_label=config.label)
    if not result.success:
        messages.error(request, result.error or f"Failed to save {config.label}")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    logger.info(
        "%sを%sしました: user_id=%s, id=%s",
        config.label,
        "作成" if result.created else "更新",
        user_id,
        result.instance.pk if result.instance else None,
    )
    verb = config.created_verb if result.created else "updated"
    messages.success(request, f"{config.label.capitalize()} {verb} successfully")

    response = _respond_with_list(request, config)
    if response.status_code != HTTPStatus.OK:
        return response
    return retarget_and_close_modal(response, f"#{config.list_element_id}")


def handle_delete(request: HttpRequest, config: EntityConfig, *, item_id: int) -> HttpResponse:
    """エンティティを削除し、再取得した一覧を返す。

    Returns:
        成功時: 一覧HTML。削除失敗時: トーストのみの503。メソッド不正時: 405。

    Raises:
        Http404: 対象が存在しない、または他ユーザーの所有の場合。
    """
    if request.method != RequestMethod.DELETE:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    instance = _get_owned_or_404(config, item_id=item_id, user_id=user_id)
    result = delete_owned_instance(instance, entity_label=config.label)

    if not result.success:
        messages.error(request, result.error or f"Failed to delete {config.label}")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    logger.info(
        "%sを削除しました: user_id=%s, id=%d, label='%s'",
        config.label,
        user_id,
        item_id,
        result.label,
    )
    messages.success(request, f"{config.label.capitalize()} deleted successfully")
    return _respond_with_list(request, config)
