"""テンプレート共通コンテキスト。"""

from django.conf import settings
from django.http import HttpRequest

from .auth import get_session_identity


def current_identity(request: HttpRequest) -> dict[str, object]:
    """現在のアイデンティティと画面共通の設定値をテンプレートへ渡す。

    Args:
        request: HTTPリクエスト。

    Returns:
        テンプレートコンテキストに追加する辞書。
    """
    return {
        "current_identity": get_session_identity(request),
        "app_name": getattr(settings, "APP_DISPLAY_NAME", "PersonalHub"),
    }
