"""Todoアプリケーションの設定。

Djangoアプリケーションの設定クラスを定義する。
"""

from django.apps import AppConfig


class TodoConfig(AppConfig):
    """Todoアプリケーションの設定クラス。

    Attributes:
        name: アプリケーション名。
    """

    name = "todo"

    def ready(self) -> None:
        # 通知済みTodoのセッションキーをサインイン/サインアウト時の破棄対象に登録する
        from . import notifications  # noqa: F401
