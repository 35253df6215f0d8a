"""accountsアプリケーションの設定。"""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """accountsアプリケーションの設定クラス。

    起動時にシグナル受信を登録する。
    """

    name = "accounts"

    def ready(self) -> None:
        from . import signals  # noqa: F401
