"""ダッシュボードのビュー。"""

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render

from personal_hub.auth import get_authenticated_user_id

from .queries import DashboardStats, get_dashboard_stats, get_upcoming_todos

logger = logging.getLogger(__name__)


@login_required
def index(request: HttpRequest) -> HttpResponse:
    """ダッシュボード（各機能の件数と期限の近いTodo）を表示する。

    集計に失敗した場合は件数0で表示し、エラーメッセージを出す。

    Args:
        request: HTTPリクエストオブジェクト。

    Returns:
        ダッシュボードページのHttpResponse。
    """
    user_id = get_authenticated_user_id(request)
    try:
        stats = get_dashboard_stats(user_id)
        upcoming_todos = get_upcoming_todos(user_id)
    except DatabaseError:
        logger.exception("ダッシュボードの集計に失敗しました: user_id=%s", user_id)
        messages.error(request, "Failed to load dashboard")
        stats = DashboardStats()
        upcoming_todos = []

    return render(
        request,
        "dashboard/index.html",
        {"stats": stats, "upcoming_todos": upcoming_todos},
    )
