"""ユーザー所有エンティティの書き込み操作（共通サービス層）。

プロジェクト/パスワード/ノートは「作成・更新・削除の後に一覧を再取得する」だけの
単純なCRUDなので、書き込み処理と失敗時の扱いをここにまとめる。
Result型で成功/失敗を表現し、DB障害は汎用メッセージに変換する。
"""

import logging
from dataclasses import dataclass

from django import forms
from django.db import DatabaseError, models

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveResult:
    """作成・更新の結果。"""

    success: bool
    created: bool
    instance: models.Model | None = None
    error: str | None = None


@dataclass(frozen=True)
class DeleteResult:
    """削除の結果。"""

    success: bool
    label: str | None = None  # ログ用
    error: str | None = None


def save_owned_instance(form: forms.ModelForm, *, user_id: int, entity_label: str) -> SaveResult:
    """検証済みフォームの内容を保存する。

    インスタンスに主キーがなければ作成、あれば更新（後勝ち）として扱う。

    Args:
        form: is_valid() 済みのModelForm。
        user_id: 所有ユーザーID。新規作成時に設定する。
        entity_label: メッセージ用のエンティティ名（例: "project"）。

    Returns:
        SaveResult。失敗時はerrorに利用者向けメッセージ。
    """
    created = form.instance.pk is None
    try:
        instance = form.save(commit=False)
        if created:
            instance.user_id = user_id
        instance.save()
    except DatabaseError:
        logger.exception(
            "%sの保存に失敗しました: user_id=%s, created=%s",
            entity_label,
            user_id,
            created,
        )
        verb = "create" if created else "update"
        return SaveResult(success=False, created=created, error=f"Failed to {verb} {entity_label}")

    return SaveResult(success=True, created=created, instance=instance)


def delete_owned_instance(instance: models.Model, *, entity_label: str) -> DeleteResult:
    """単一のエンティティを削除する。

    Args:
        instance: 削除対象（所有者チェック済み）。
        entity_label: メッセージ用のエンティティ名。

    Returns:
        DeleteResult。
    """
    label = str(instance)
    try:
        instance.delete()
    except DatabaseError:
        logger.exception("%sの削除に失敗しました: id=%s", entity_label, instance.pk)
        return DeleteResult(success=False, label=label, error=f"Failed to delete {entity_label}")

    return DeleteResult(success=True, label=label)
