"""Todo操作のビジネスロジック（サービス層）。

書き込み操作（create/update/toggle/delete）を提供する。
Result型で成功/失敗を表現し、DB障害は利用者向けの汎用メッセージに変換する。
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from django.db import DatabaseError
from django.utils import timezone

from .forms import TodoItemForm
from .models import TodoItem

logger = logging.getLogger(__name__)

# =============================================================================
# Result 型
# =============================================================================


@dataclass(frozen=True)
class SaveTodoResult:
    """Todo作成・更新の結果。"""

    success: bool
    created: bool
    todo_item: TodoItem | None = None
    error: str | None = None


@dataclass(frozen=True)
class ToggleCompletionResult:
    """Todo完了状態トグルの結果。"""

    success: bool
    todo_item: TodoItem | None = None
    old_status: bool = False
    error: str | None = None


@dataclass(frozen=True)
class DeleteResult:
    """Todo削除の結果。"""

    success: bool
    title: str | None = None  # ログ用
    error: str | None = None


# =============================================================================
# 作成・更新
# =============================================================================


def create_todo(form: TodoItemForm, *, user_id: int) -> SaveTodoResult:
    """検証済みフォームからTodoを作成する。

    Args:
        form: is_valid() 済みの新規作成フォーム。
        user_id: 所有ユーザーID。

    Returns:
        SaveTodoResult。成功時はtodo_itemにインスタンス、失敗時はerrorにメッセージ。
    """
    try:
        todo_item = form.save(commit=False)
        todo_item.user_id = user_id
        todo_item.save()
    except DatabaseError:
        logger.exception("Todoの作成に失敗しました: user_id=%s", user_id)
        return SaveTodoResult(success=False, created=True, error="Failed to create todo")

    return SaveTodoResult(success=True, created=True, todo_item=todo_item)


def update_todo(form: TodoItemForm) -> SaveTodoResult:
    """検証済みフォームで既存Todoの全フィールド（タイトル/説明/期限/優先度）を更新する。

    競合検知は行わず、後勝ちで上書きする。

    Args:
        form: is_valid() 済みの編集フォーム（instance は所有者チェック済み）。

    Returns:
        SaveTodoResult。
    """
    try:
        todo_item = form.save()
    except DatabaseError:
        logger.exception("Todoの更新に失敗しました: id=%s", form.instance.pk)
        return SaveTodoResult(success=False, created=False, error="Failed to update todo")

    return SaveTodoResult(success=True, created=False, todo_item=todo_item)


def toggle_todo_completion(todo_item: TodoItem, *, now: datetime | None = None) -> ToggleCompletionResult:
    """完了状態をトグルする。

    未完了→完了では completed_at に現在時刻を設定し、完了→未完了では None に戻す。
    保存に失敗した場合はインスタンスの状態を元に戻す。

    Args:
        todo_item: 対象のTodoItem。
        now: 完了日時として使う時刻。Noneなら現在時刻。

    Returns:
        ToggleCompletionResult。old_statusに変更前の状態。
    """
    old_status = todo_item.completed
    old_completed_at = todo_item.completed_at

    todo_item.completed = not old_status
    todo_item.completed_at = (now or timezone.now()) if todo_item.completed else None
    try:
        todo_item.save(update_fields=["completed", "completed_at", "updated_at"])
    except DatabaseError:
        logger.exception("Todoの完了状態の更新に失敗しました: id=%s", todo_item.pk)
        todo_item.completed = old_status
        todo_item.completed_at = old_completed_at
        return ToggleCompletionResult(
            success=False,
            todo_item=todo_item,
            old_status=old_status,
            error="Failed to update todo",
        )

    return ToggleCompletionResult(success=True, todo_item=todo_item, old_status=old_status)


# =============================================================================
# 削除
# =============================================================================


def delete_todo(todo_item: TodoItem) -> DeleteResult:
    """単一のTodoを削除する。

    Args:
        todo_item: 削除対象のTodoItem。

    Returns:
        DeleteResult。titleにログ用のタイトル。
    """
    title = todo_item.title
    try:
        todo_item.delete()
    except DatabaseError:
        logger.exception("Todoの削除に失敗しました: id=%s", todo_item.pk)
        return DeleteResult(success=False, title=title, error="Failed to delete todo")

    return DeleteResult(success=True, title=title)
