"""案内ページ（ヘルプ）のビュー。

各機能とは独立した、サイト共通の情報ページを提供する。
"""

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render


def docs(request: HttpRequest) -> HttpResponse:
    """Docsページ（各機能の使い方）を表示する。

    期限通知やメディア操作の説明には、現在の設定値を表示する。

    Args:
        request: HTTPリクエストオブジェクト。

    Returns:
        docsページのHttpResponse。
    """
    return render(
        request,
        "docs.html",
        {
            "due_window_minutes": getattr(settings, "TODO_DUE_WINDOW_MINUTES", 60),
            "refresh_interval_seconds": getattr(settings, "TODO_REFRESH_INTERVAL_SECONDS", 60),
            "notification_mode": getattr(settings, "TODO_DUE_NOTIFICATION_MODE", "repeat"),
            "skip_seconds": getattr(settings, "MEDIA_SKIP_SECONDS", 10),
        },
    )
