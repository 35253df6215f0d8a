"""利用者のタイムゾーンを有効化するミドルウェア。

ブラウザが Cookie で送るIANAタイムゾーン名（例: "Asia/Tokyo"）をリクエストの間だけ有効にする。
期限の入力（datetime-local）の解釈、日時の表示、「今日」の判定がこのタイムゾーンで行われる。
Cookie がない、または不正な名前の場合は settings.TIME_ZONE を使う。
"""

import logging
from collections.abc import Callable
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.http import HttpRequest, HttpResponse
from django.utils import timezone

logger = logging.getLogger(__name__)

TIMEZONE_COOKIE_NAME: Final[str] = "personal_hub_tz"


def parse_timezone(name: str | None) -> ZoneInfo | None:
    """タイムゾーン名を解釈する。未指定・未知の名前はNone。"""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("不正なタイムゾーン名です: %r", name)
        return None


class UserTimezoneMiddleware:
    """Cookie のタイムゾーンをリクエストごとに有効化する。"""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        zone = parse_timezone(request.COOKIES.get(TIMEZONE_COOKIE_NAME))
        if zone is None:
            timezone.deactivate()
        else:
            timezone.activate(zone)
        try:
            return self.get_response(request)
        finally:
            timezone.deactivate()
