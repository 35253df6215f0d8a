"""期限通知の発行判定のテスト。"""

from datetime import UTC, datetime, timedelta
from types import SimpleNamespace

from django.test import RequestFactory, SimpleTestCase, override_settings

from ..notifications import NOTIFIED_TODO_IDS_SESSION_KEY, select_notifications_to_emit

NOW = datetime(2030, 1, 1, 12, 0, tzinfo=UTC)


def make_todo(pk, minutes_until_due, *, completed=False):
    return SimpleNamespace(
        pk=pk,
        title=f"todo {pk}",
        completed=completed,
        priority="medium",
        due_date=NOW + timedelta(minutes=minutes_until_due),
        created_at=NOW,
    )


class SelectNotificationsTests(SimpleTestCase):
    """select_notifications_to_emit のテストケース。"""

    def make_request(self, permission="granted"):
        headers = {"X-Notification-Permission": permission} if permission is not None else {}
        request = RequestFactory().get("/todos/items/", headers=headers)
        request.session = {}
        request.user = SimpleNamespace(pk=1)
        return request

    def test_granted_permission_emits_notification(self):
        """通知が許可されていれば期限間近のTodoを通知することを確認する。"""
        request = self.make_request("granted")
        notifications = select_notifications_to_emit(request, [make_todo(1, 30)], now=NOW)
        self.assertEqual([n.todo_id for n in notifications], [1])

    def test_no_notification_without_permission(self):
        """許可されていない（default / denied / ヘッダなし）場合は通知しないことを確認する。"""
        for permission in ("default", "denied", None):
            with self.subTest(permission=permission):
                request = self.make_request(permission)
                self.assertEqual(select_notifications_to_emit(request, [make_todo(1, 30)], now=NOW), [])

    def test_due_in_two_hours_is_not_notified(self):
        """2時間後が期限のTodoは通知しないことを確認する。"""
        request = self.make_request()
        self.assertEqual(select_notifications_to_emit(request, [make_todo(1, 120)], now=NOW), [])

    @override_settings(TODO_DUE_NOTIFICATION_MODE="repeat")
    def test_repeat_mode_notifies_every_fetch(self):
        """repeat モードでは取得のたびに通知することを確認する。"""
        request = self.make_request()
        todos = [make_todo(1, 30)]
        self.assertEqual(len(select_notifications_to_emit(request, todos, now=NOW)), 1)
        self.assertEqual(len(select_notifications_to_emit(request, todos, now=NOW)), 1)
        self.assertNotIn(NOTIFIED_TODO_IDS_SESSION_KEY, request.session)

    @override_settings(TODO_DUE_NOTIFICATION_MODE="once")
    def test_once_mode_notifies_each_todo_once(self):
        """once モードでは同じTodoを2回通知しないことを確認する。"""
        request = self.make_request()
        first = select_notifications_to_emit(request, [make_todo(1, 30)], now=NOW)
        second = select_notifications_to_emit(request, [make_todo(1, 30), make_todo(2, 45)], now=NOW)
        self.assertEqual([n.todo_id for n in first], [1])
        self.assertEqual([n.todo_id for n in second], [2])
        self.assertEqual(request.session[NOTIFIED_TODO_IDS_SESSION_KEY], [1, 2])

    @override_settings(TODO_DUE_NOTIFICATION_MODE="once")
    def test_once_mode_forgets_deleted_todos(self):
        """once モードの通知済み記録から、一覧にないTodoが取り除かれることを確認する。"""
        request = self.make_request()
        select_notifications_to_emit(request, [make_todo(1, 30), make_todo(2, 45)], now=NOW)
        self.assertEqual(request.session[NOTIFIED_TODO_IDS_SESSION_KEY], [1, 2])

        notifications = select_notifications_to_emit(request, [make_todo(2, 40)], now=NOW)

        self.assertEqual(notifications, [])
        self.assertEqual(request.session[NOTIFIED_TODO_IDS_SESSION_KEY], [2])

    @override_settings(TODO_DUE_WINDOW_MINUTES=180)
    def test_configurable_window(self):
        """期限間近の幅を設定で変更できることを確認する。"""
        request = self.make_request()
        notifications = select_notifications_to_emit(request, [make_todo(1, 120)], now=NOW)
        self.assertEqual(len(notifications), 1)
        self.assertIn("less than 3 hours", notifications[0].body)
