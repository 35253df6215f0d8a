"""Todoのフィルタ・並び替え・期限通知の判定ロジック。

取得済みのTodo一覧に対する純粋関数のみを提供する。
Django非依存（標準ライブラリのみ）で、DBアクセスや現在時刻の取得は呼び出し側が行う。
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Final, Protocol, TypeVar

from .params import (
    DEFAULT_TODO_FILTER_STATUS,
    DEFAULT_TODO_PRIORITY_FILTER,
    DEFAULT_TODO_SORT_KEY,
    TodoFilterStatus,
    TodoPriorityFilter,
    TodoSortKey,
)

# =============================================================================
# 定数
# =============================================================================

PRIORITY_RANK: Final[dict[str, int]] = {"high": 0, "medium": 1, "low": 2}
UNKNOWN_PRIORITY_RANK: Final[int] = len(PRIORITY_RANK)

DEFAULT_DUE_WINDOW: Final[timedelta] = timedelta(hours=1)
DUE_NOTIFICATION_TITLE: Final[str] = "Task Due Soon!"

SECONDS_PER_HOUR: Final[int] = 3600


class TodoLike(Protocol):
    """判定に必要な属性を持つTodo（TodoItemモデルもこれを満たす）。"""

    pk: int | None
    title: str
    completed: bool
    priority: str
    due_date: datetime | None
    created_at: datetime


T = TypeVar("T", bound=TodoLike)


@dataclass(frozen=True)
class DueNotification:
    """期限間近のTodoに対して発行する通知。

    Attributes:
        todo_id: 対象TodoのID。
        title: 通知タイトル。
        body: 通知本文。
    """

    todo_id: int
    title: str
    body: str

    def as_dict(self) -> dict[str, object]:
        return {"todo_id": self.todo_id, "title": self.title, "body": self.body}


# =============================================================================
# フィルタ・並び替え
# =============================================================================


def filter_todos(
    todos: Iterable[T],
    *,
    status: TodoFilterStatus = DEFAULT_TODO_FILTER_STATUS,
    priority: TodoPriorityFilter = DEFAULT_TODO_PRIORITY_FILTER,
) -> list[T]:
    """完了状態と優先度でTodoを絞り込む。

    2つの条件は AND で組み合わせる。all は絞り込みなし。元の順序は保つ。

    Args:
        todos: 対象のTodo。
        status: 完了状態フィルタ。
        priority: 優先度フィルタ。

    Returns:
        条件を満たすTodoのリスト。
    """
    result = list(todos)

    if status == TodoFilterStatus.ACTIVE:
        result = [todo for todo in result if not todo.completed]
    elif status == TodoFilterStatus.COMPLETED:
        result = [todo for todo in result if todo.completed]

    if priority != TodoPriorityFilter.ALL:
        result = [todo for todo in result if todo.priority == priority.value]

    return result


def priority_rank(priority: str) -> int:
    """優先度の並び順（high=0, medium=1, low=2、未知の値は最後）を返す。"""
    return PRIORITY_RANK.get(priority, UNKNOWN_PRIORITY_RANK)


def _due_date_sort_key(todo: TodoLike) -> tuple[bool, float]:
    # 期限なしは期限ありの全件より後ろ
    if todo.due_date is None:
        return (True, 0.0)
    return (False, todo.due_date.timestamp())


def sort_todos(todos: Iterable[T], sort_key: TodoSortKey = DEFAULT_TODO_SORT_KEY) -> list[T]:
    """Todoを並び替える。

    いずれのキーも安定ソートで、同順位の要素は入力順を保つ。

    - due_date: 期限の昇順。期限なしは末尾。
    - priority: high → medium → low。
    - created: 作成日時の降順（新しい順）。

    Args:
        todos: 対象のTodo。
        sort_key: 並び替えキー。

    Returns:
        並び替え後の新しいリスト。
    """
    if sort_key == TodoSortKey.PRIORITY:
        return sorted(todos, key=lambda todo: priority_rank(todo.priority))
    if sort_key == TodoSortKey.CREATED:
        return sorted(todos, key=lambda todo: todo.created_at, reverse=True)
    return sorted(todos, key=_due_date_sort_key)


def apply_todo_view(
    todos: Iterable[T],
    *,
    status: TodoFilterStatus = DEFAULT_TODO_FILTER_STATUS,
    priority: TodoPriorityFilter = DEFAULT_TODO_PRIORITY_FILTER,
    sort_key: TodoSortKey = DEFAULT_TODO_SORT_KEY,
) -> list[T]:
    """フィルタと並び替えをまとめて適用し、表示用の一覧を返す。"""
    return sort_todos(filter_todos(todos, status=status, priority=priority), sort_key)


# =============================================================================
# 期限通知
# =============================================================================


def hours_until_due(due_date: datetime, now: datetime) -> float:
    """期限までの残り時間（時間単位、過ぎていれば負）を返す。"""
    return (due_date - now).total_seconds() / SECONDS_PER_HOUR


def is_due_soon(todo: TodoLike, *, now: datetime, window: timedelta = DEFAULT_DUE_WINDOW) -> bool:
    """Todoが期限間近（(now, now + window] に期限がある未完了Todo）か判定する。

    期限ちょうど（残り0）や期限切れは対象外。

    Args:
        todo: 対象のTodo。
        now: 現在時刻。
        window: 期限間近とみなす幅。

    Returns:
        期限間近ならTrue。
    """
    if todo.completed or todo.due_date is None:
        return False
    remaining_hours = hours_until_due(todo.due_date, now)
    return 0 < remaining_hours <= window.total_seconds() / SECONDS_PER_HOUR


def describe_due_window(window: timedelta) -> str:
    """通知本文用に期限までの幅を文章化する（例: "an hour", "30 minutes"）。"""
    minutes = int(window.total_seconds() // 60)
    if minutes == 60:
        return "an hour"
    if minutes > 0 and minutes % 60 == 0:
        return f"{minutes // 60} hours"
    if minutes == 1:
        return "a minute"
    return f"{minutes} minutes"


def build_due_notification(todo: TodoLike, *, window: timedelta = DEFAULT_DUE_WINDOW) -> DueNotification:
    """期限間近のTodoに対する通知を組み立てる。"""
    return DueNotification(
        todo_id=int(todo.pk or 0),
        title=DUE_NOTIFICATION_TITLE,
        body=f'"{todo.title}" is due in less than {describe_due_window(window)}',
    )


def collect_due_notifications(
    todos: Sequence[TodoLike],
    *,
    now: datetime,
    window: timedelta = DEFAULT_DUE_WINDOW,
) -> list[DueNotification]:
    """期限間近の全Todoについて通知を1件ずつ作成する。

    Args:
        todos: 取得済みの全Todo（フィルタ適用前）。
        now: 現在時刻。
        window: 期限間近とみなす幅。

    Returns:
        通知のリスト（入力順）。
    """
    return [build_due_notification(todo, window=window) for todo in todos if is_due_soon(todo, now=now, window=window)]
