"""HTMX固有のレスポンス生成（全アプリ共通）。

OOBスワップ属性の付与、トーストメッセージのOOB描画、
モーダルを閉じて一覧へ差し替えるためのヘッダ設定を提供する。
"""

import json
from typing import Final

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.template.loader import render_to_string

from .enums import HtmxHeader

TOASTS_ID: Final[str] = "toasts"
MODAL_CLOSE_EVENT: Final[str] = "modal:close"


def is_htmx_request(request: HttpRequest) -> bool:
    """HTMXからのリクエストか判定する。"""
    return request.headers.get(HtmxHeader.REQUEST) == "true"


def add_oob_attribute(html: str, element_id: str, oob_value: str = "true") -> str:
    """HTML断片にOOBスワップ属性を追加する。

    Args:
        html: 対象のHTML文字列。
        element_id: 対象要素のID。
        oob_value: hx-swap-oobの値。

    Returns:
        OOB属性が追加されたHTML。
    """
    return html.replace(
        f'id="{element_id}"',
        f'id="{element_id}" hx-swap-oob="{oob_value}"',
        1,
    )


def render_messages_oob(request: HttpRequest) -> str:
    """未表示のメッセージをトースト領域のOOB HTMLとして描画する。

    描画したメッセージは消費済みになる。

    Args:
        request: HTTPリクエスト。

    Returns:
        OOB属性付きのトースト領域HTML。
    """
    html = render_to_string("_messages.html", {"messages": messages.get_messages(request)})
    return add_oob_attribute(html, TOASTS_ID)


def with_messages(request: HttpRequest, html: str, *, status: int = 200) -> HttpResponse:
    """HTML断片にトーストのOOB更新を付けてレスポンス化する。"""
    return HttpResponse(html + render_messages_oob(request), status=status)


def messages_only(request: HttpRequest, *, status: int) -> HttpResponse:
    """トーストだけを更新し、メインのスワップは行わないレスポンスを返す。

    失敗時に画面上の一覧をそのまま残すために使う。
    """
    response = HttpResponse(render_messages_oob(request), status=status)
    response[HtmxHeader.RESWAP] = "none"
    return response


def retarget_and_close_modal(response: HttpResponse, target_selector: str) -> HttpResponse:
    """モーダルを閉じ、レスポンスを一覧コンテナへ差し替えるヘッダを設定する。

    Args:
        response: 一覧HTMLを含むレスポンス。
        target_selector: 差し替え先のCSSセレクタ。

    Returns:
        ヘッダを設定したレスポンス。
    """
    response[HtmxHeader.RETARGET] = target_selector
    response[HtmxHeader.RESWAP] = "innerHTML"
    response[HtmxHeader.TRIGGER] = json.dumps({MODAL_CLOSE_EVENT: True})
    return response
