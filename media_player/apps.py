from django.apps import AppConfig


class MediaPlayerConfig(AppConfig):
    name = "media_player"

    def ready(self) -> None:
        # 再生状態のセッションキーをサインイン/サインアウト時の破棄対象に登録する
        from . import playback  # noqa: F401
