"""Todo一覧のパラメータ解析・正規化。

HTTPリクエストのクエリパラメータやヘッダを型安全な値に変換する。
Django非依存（標準ライブラリのみ）で、API化時にも再利用可能。
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, TypeVar
from urllib.parse import urlencode

# =============================================================================
# 定数
# =============================================================================

TITLE_MAX_LENGTH: Final[int] = 255
NOTIFICATION_PERMISSION_HEADER: Final[str] = "X-Notification-Permission"


# =============================================================================
# Enum
# =============================================================================


class TodoFilterStatus(StrEnum):
    """Todoの完了状態フィルタ。"""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


DEFAULT_TODO_FILTER_STATUS: Final[TodoFilterStatus] = TodoFilterStatus.ALL


class TodoPriorityFilter(StrEnum):
    """Todoの優先度フィルタ。"""

    ALL = "all"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


DEFAULT_TODO_PRIORITY_FILTER: Final[TodoPriorityFilter] = TodoPriorityFilter.ALL


class TodoSortKey(StrEnum):
    """Todo一覧の並び替えキー。"""

    DUE_DATE = "due_date"
    PRIORITY = "priority"
    CREATED = "created"


DEFAULT_TODO_SORT_KEY: Final[TodoSortKey] = TodoSortKey.DUE_DATE


class NotificationPermission(StrEnum):
    """ブラウザの通知許可状態（Notification.permission）。"""

    DEFAULT = "default"
    GRANTED = "granted"
    DENIED = "denied"


class DueNotificationMode(StrEnum):
    """期限通知の発行モード。

    REPEAT: 取得のたびに期限間近のTodoを通知する（同じTodoが何度も通知され得る）。
    ONCE: ログインセッション中、Todoごとに1回だけ通知する。
    """

    REPEAT = "repeat"
    ONCE = "once"


# =============================================================================
# パラメータ正規化
# =============================================================================

_E = TypeVar("_E", bound=StrEnum)


def _normalize_choice(raw_value: str | _E | None, enum_class: type[_E], default: _E) -> _E:
    """文字列をStrEnumへ正規化する。

    前後空白を除去し小文字化してから変換する。未指定・空文字・不正値はデフォルト。
    """
    if raw_value is None:
        return default
    if isinstance(raw_value, enum_class):
        return raw_value

    value = str(raw_value).strip().lower()
    if not value:
        return default

    try:
        return enum_class(value)
    except ValueError:
        return default


def normalize_todo_filter_status(raw_status: str | TodoFilterStatus | None) -> TodoFilterStatus:
    """Todoの完了状態フィルタを正規化する。

    Args:
        raw_status: クエリパラメータ等で受け取ったフィルタ状態。

    Returns:
        正規化されたフィルタ状態。未指定・不正値は all。
    """
    return _normalize_choice(raw_status, TodoFilterStatus, DEFAULT_TODO_FILTER_STATUS)


def normalize_todo_priority_filter(raw_priority: str | TodoPriorityFilter | None) -> TodoPriorityFilter:
    """Todoの優先度フィルタを正規化する。

    Args:
        raw_priority: クエリパラメータ等で受け取った優先度。

    Returns:
        正規化された優先度フィルタ。未指定・不正値は all。
    """
    return _normalize_choice(raw_priority, TodoPriorityFilter, DEFAULT_TODO_PRIORITY_FILTER)


def normalize_todo_sort_key(raw_sort: str | TodoSortKey | None) -> TodoSortKey:
    """Todo一覧の並び替えキーを正規化する。

    Args:
        raw_sort: クエリパラメータ等で受け取った並び替えキー。

    Returns:
        正規化された並び替えキー。未指定・不正値は due_date。
    """
    return _normalize_choice(raw_sort, TodoSortKey, DEFAULT_TODO_SORT_KEY)


def parse_notification_permission(raw_permission: str | None) -> NotificationPermission:
    """ブラウザから送られた通知許可状態を正規化する。

    Args:
        raw_permission: X-Notification-Permission ヘッダの値。

    Returns:
        正規化された許可状態。未指定・不正値は default（未許可扱い）。
    """
    return _normalize_choice(raw_permission, NotificationPermission, NotificationPermission.DEFAULT)


def parse_due_notification_mode(raw_mode: str | None) -> DueNotificationMode:
    """設定値の通知モードを正規化する。不正値は repeat。"""
    return _normalize_choice(raw_mode, DueNotificationMode, DueNotificationMode.REPEAT)


def build_todo_list_querystring(
    *,
    status: TodoFilterStatus,
    priority: TodoPriorityFilter,
    sort_key: TodoSortKey,
) -> str:
    """Todo一覧（フィルタ/並び替え）用のクエリ文字列を生成する。

    Args:
        status: 完了状態フィルタ。
        priority: 優先度フィルタ。
        sort_key: 並び替えキー。

    Returns:
        URLエンコード済みのクエリ文字列。
        デフォルト状態（status="all" かつ priority="all" かつ sort_key="due_date"）は空文字。
    """
    params: dict[str, str] = {}

    if status != DEFAULT_TODO_FILTER_STATUS:
        params["status"] = status.value
    if priority != DEFAULT_TODO_PRIORITY_FILTER:
        params["priority"] = priority.value
    if sort_key != DEFAULT_TODO_SORT_KEY:
        params["sort"] = sort_key.value

    if not params:
        return ""
    return urlencode(params)


@dataclass(frozen=True)
class TodoListParams:
    """Todo一覧の表示条件（フィルタと並び替え）。"""

    status: TodoFilterStatus = DEFAULT_TODO_FILTER_STATUS
    priority: TodoPriorityFilter = DEFAULT_TODO_PRIORITY_FILTER
    sort_key: TodoSortKey = DEFAULT_TODO_SORT_KEY

    @property
    def querystring(self) -> str:
        return build_todo_list_querystring(status=self.status, priority=self.priority, sort_key=self.sort_key)


def parse_todo_list_params(query: Mapping[str, str]) -> TodoListParams:
    """クエリパラメータ（status / priority / sort）から表示条件を組み立てる。

    Args:
        query: request.GET 等のマッピング。

    Returns:
        正規化済みの表示条件。
    """
    return TodoListParams(
        status=normalize_todo_filter_status(query.get("status")),
        priority=normalize_todo_priority_filter(query.get("priority")),
        sort_key=normalize_todo_sort_key(query.get("sort")),
    )
