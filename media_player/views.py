"""media_playerアプリケーションのビュー。

ライブラリ（アップロード/一覧/削除）と、1ファイルを再生するプレーヤーを提供する。
プレーヤーの操作は control エンドポイントで再生状態に反映し、JSONで返す。
"""

import logging
from dataclasses import replace
from http import HTTPStatus

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, render
from django.template.loader import render_to_string

from personal_hub.auth import get_authenticated_user_id
from shared.enums import RequestMethod
from shared.forms import first_form_error
from shared.htmx import messages_only, with_messages
from shared.services import delete_owned_instance, save_owned_instance

from .forms import MediaUploadForm
from .models import MediaFile
from .playback import (
    PlaybackAction,
    PlaybackError,
    PlaybackStore,
    apply_action,
    format_time,
    get_playback_rates,
    get_skip_seconds,
    parse_action,
)

logger = logging.getLogger(__name__)

MEDIA_LIST_ID = "media-list"
MEDIA_LABEL = "media file"


def _fetch_media_files(user_id: int) -> list[MediaFile]:
    return list(MediaFile.objects.filter(user_id=user_id).order_by("-created_at"))


def _respond_with_media_list(request: HttpRequest, user_id: int) -> HttpResponse:
    try:
        media_files = _fetch_media_files(user_id)
    except DatabaseError:
        logger.exception("メディア一覧の取得に失敗しました: user_id=%s", user_id)
        messages.error(request, "Failed to fetch media files")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    html = render_to_string("media_player/_media_list.html", {"media_files": media_files}, request=request)
    return with_messages(request, html)


@login_required
def media_library(request: HttpRequest) -> HttpResponse:
    """メディアライブラリ（アップロードフォームと一覧）を表示する。"""
    user_id = get_authenticated_user_id(request)
    try:
        media_files = _fetch_media_files(user_id)
    except DatabaseError:
        logger.exception("メディア一覧の取得に失敗しました: user_id=%s", user_id)
        messages.error(request, "Failed to fetch media files")
        media_files = []

    return render(
        request,
        "media_player/media_library.html",
        {"media_files": media_files, "form": MediaUploadForm(), "media_list_id": MEDIA_LIST_ID},
    )


@login_required
def upload_media(request: HttpRequest) -> HttpResponse:
    """音声/動画ファイルをアップロードし、再取得した一覧を返す。

    Returns:
        成功時: 一覧HTML。
        検証失敗時（音声/動画以外など）: トーストのみの400。
        保存失敗時: トーストのみの503。
        メソッド不正時: 405。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    form = MediaUploadForm(request.POST, request.FILES)
    if not form.is_valid():
        logger.warning("メディアの入力が不正です: user_id=%s, errors=%s", user_id, form.errors.as_json())
        messages.error(request, first_form_error(form))
        return messages_only(request, status=HTTPStatus.BAD_REQUEST)

    result = save_owned_instance(form, user_id=user_id, entity_label=MEDIA_LABEL)
    if not result.success:
        messages.error(request, "Failed to upload media file")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    logger.info(
        "メディアをアップロードしました: user_id=%s, id=%s",
        user_id,
        result.instance.pk if result.instance else None,
    )
    messages.success(request, "Media uploaded successfully")
    return _respond_with_media_list(request, user_id)


@login_required
def media_player(request: HttpRequest, media_id: int) -> HttpResponse:
    """1つのメディアファイルのプレーヤーページを表示する。

    Raises:
        Http404: 対象が存在しない、または他ユーザーの所有の場合。
    """
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    media_file = get_object_or_404(MediaFile, id=media_id, user_id=user_id)
    store = PlaybackStore(request)
    # 読み込み直後の要素は停止中かつ通常表示
    state = replace(store.get(media_id), playing=False, fullscreen=False)
    if not state.duration and media_file.duration:
        state = apply_action(state, PlaybackAction.METADATA_LOADED, media_file.duration)
    store.save(media_id, state)

    return render(
        request,
        "media_player/player.html",
        {
            "media_file": media_file,
            "state": state,
            "playback_rates": get_playback_rates(),
            "skip_seconds": int(get_skip_seconds()),
        },
    )


@login_required
def playback_control(request: HttpRequest, media_id: int) -> HttpResponse:
    """再生操作・メディア要素のイベントを再生状態に反映する。

    POSTパラメータ:
        action: PlaybackAction の値。
        value: 操作の値（seek位置、音量、速度、全画面フラグなど）。

    Returns:
        新しい再生状態のJSON。操作名や値が不正な場合は400、メソッド不正時は405。

    Raises:
        Http404: 対象が存在しない、または他ユーザーの所有の場合。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    media_file = get_object_or_404(MediaFile, id=media_id, user_id=user_id)
    store = PlaybackStore(request)

    try:
        action = parse_action(request.POST.get("action"))
        state = apply_action(
            store.get(media_id),
            action,
            request.POST.get("value"),
            skip_seconds=get_skip_seconds(),
            rates=get_playback_rates(),
        )
    except PlaybackError as e:
        logger.warning("再生操作が不正です: user_id=%s, id=%d, error=%s", user_id, media_id, e)
        return JsonResponse({"error": str(e)}, status=HTTPStatus.BAD_REQUEST)

    store.save(media_id, state)

    if action == PlaybackAction.METADATA_LOADED and media_file.duration != state.duration:
        media_file.duration = state.duration
        try:
            media_file.save(update_fields=["duration"])
        except DatabaseError:
            logger.exception("再生時間の記録に失敗しました: id=%d", media_id)

    payload = state.as_dict()
    payload["position_label"] = format_time(state.position)
    payload["duration_label"] = format_time(state.duration)
    return JsonResponse(payload)


@login_required
def delete_media(request: HttpRequest, media_id: int) -> HttpResponse:
    """メディアファイルを削除し、再取得した一覧を返す。

    Raises:
        Http404: 対象が存在しない、または他ユーザーの所有の場合。
    """
    if request.method != RequestMethod.DELETE:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    user_id = get_authenticated_user_id(request)
    media_file = get_object_or_404(MediaFile, id=media_id, user_id=user_id)
    stored_file = media_file.file

    result = delete_owned_instance(media_file, entity_label=MEDIA_LABEL)
    if not result.success:
        messages.error(request, result.error or "Failed to delete media file")
        return messages_only(request, status=HTTPStatus.SERVICE_UNAVAILABLE)

    try:
        stored_file.delete(save=False)
    except OSError:
        logger.exception("メディアファイルの削除に失敗しました: id=%d, name=%s", media_id, stored_file.name)

    PlaybackStore(request).discard(media_id)
    logger.info("メディアを削除しました: user_id=%s, id=%d, title='%s'", user_id, media_id, result.label)
    messages.success(request, "Media file deleted successfully")
    return _respond_with_media_list(request, user_id)
