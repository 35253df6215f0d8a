"""セッションのライフサイクルに対するシグナル受信。

- ユーザー作成時にプロフィールを作成する。
- サインイン/サインアウトを購読し、セッションに紐づく状態を初期化・破棄する。
"""

import logging
from typing import Final

from django.conf import settings
from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.db.models.signals import post_save
from django.dispatch import receiver
from django.http import HttpRequest

from .models import DEFAULT_FULL_NAME, Profile

logger = logging.getLogger(__name__)

# サインアウト時に破棄するセッションキー（各アプリが登録する）
SESSION_STATE_KEYS: Final[list[str]] = []


def register_session_state_key(key: str) -> None:
    """サインイン/サインアウト時に破棄するセッションキーを登録する。

    Args:
        key: セッションキー。
    """
    if key not in SESSION_STATE_KEYS:
        SESSION_STATE_KEYS.append(key)


def clear_session_state(request: HttpRequest | None) -> None:
    """登録済みのセッション状態を破棄する。"""
    session = getattr(request, "session", None)
    if session is None:
        return
    for key in SESSION_STATE_KEYS:
        session.pop(key, None)


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_profile_for_new_user(sender, instance, created: bool, **kwargs) -> None:
    """ユーザー作成時にプロフィールを作成する。"""
    if not created:
        return
    Profile.objects.get_or_create(
        user=instance,
        defaults={"full_name": DEFAULT_FULL_NAME, "email": instance.email or instance.get_username()},
    )


@receiver(user_logged_in)
def on_user_logged_in(sender, request: HttpRequest | None, user, **kwargs) -> None:
    """サインイン時にセッション状態を初期化する。"""
    clear_session_state(request)
    logger.info("サインインしました: user_id=%s", user.pk)


@receiver(user_logged_out)
def on_user_logged_out(sender, request: HttpRequest | None, user, **kwargs) -> None:
    """サインアウト時にセッション状態を破棄する。"""
    clear_session_state(request)
    logger.info("サインアウトしました: user_id=%s", getattr(user, "pk", None))
