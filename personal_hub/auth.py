"""セッション上の認証済みユーザー（現在のアイデンティティ）を扱う補助関数。

全てのデータ取得はこのモジュールで得たユーザーIDで絞り込む。
django-stubs では ``request.user`` が ``AbstractBaseUser | AnonymousUser`` になり得るため、
@login_required 配下でも型安全に取り出せるようにしている。
"""

from dataclasses import dataclass
from typing import TypeGuard

from django.contrib.auth.models import AbstractBaseUser, AnonymousUser
from django.core.exceptions import PermissionDenied
from django.http import HttpRequest


@dataclass(frozen=True)
class SessionIdentity:
    """テンプレートやビューが参照する現在のアイデンティティ。"""

    user_id: int
    email: str
    full_name: str


def is_authenticated_user(
    user: AbstractBaseUser | AnonymousUser,
) -> TypeGuard[AbstractBaseUser]:
    """ユーザーが認証済みかつ主キーを持つかを実行時チェックする。

    Args:
        user: チェック対象のユーザー。

    Returns:
        認証済みで主キーが存在する場合True。
    """
    return user.is_authenticated and user.pk is not None


def get_authenticated_user_id(request: HttpRequest) -> int:
    """認証済みユーザーのIDを取得する。

    Args:
        request: HTTPリクエスト。

    Returns:
        認証済みユーザーの主キー。

    Raises:
        PermissionDenied: 未認証、またはユーザーIDが取得できない場合。
    """
    if not is_authenticated_user(request.user):
        raise PermissionDenied("User must be authenticated")

    user_pk = request.user.pk
    if user_pk is None:
        raise PermissionDenied("User must have a primary key")

    return int(user_pk)


def get_session_identity(request: HttpRequest) -> SessionIdentity | None:
    """現在のセッションのアイデンティティを返す。

    プロフィールが未作成の場合は、メールアドレスを表示名として使う。

    Args:
        request: HTTPリクエスト。

    Returns:
        認証済みならSessionIdentity、未認証ならNone。
    """
    user = getattr(request, "user", None)
    if user is None or not is_authenticated_user(user):
        return None

    email = str(getattr(user, "email", "") or user.get_username())
    profile = getattr(user, "profile", None)
    full_name = profile.full_name if profile is not None else email
    return SessionIdentity(user_id=int(user.pk), email=email, full_name=full_name)
