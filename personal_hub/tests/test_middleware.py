"""タイムゾーンミドルウェアのテスト。"""

from datetime import UTC, datetime, timedelta
from http import HTTPStatus
from zoneinfo import ZoneInfo

from django.contrib.auth import get_user_model
from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase, TestCase, override_settings
from django.urls import reverse
from django.utils import timezone

from todo.models import TodoItem

from ..middleware import TIMEZONE_COOKIE_NAME, UserTimezoneMiddleware, parse_timezone


class ParseTimezoneTests(SimpleTestCase):
    def test_known_zone(self):
        self.assertEqual(parse_timezone("Asia/Tokyo"), ZoneInfo("Asia/Tokyo"))

    def test_missing_or_unknown_zone(self):
        for name in [None, "", "Mars/Olympus", "../etc/passwd"]:
            with self.subTest(name=name):
                self.assertIsNone(parse_timezone(name))


@override_settings(TIME_ZONE="UTC")
class UserTimezoneMiddlewareTests(SimpleTestCase):
    """UserTimezoneMiddlewareのテストケース。"""

    def run_middleware(self, cookie=None):
        seen = {}

        def get_response(request):
            seen["zone"] = timezone.get_current_timezone_name()
            return HttpResponse()

        request = RequestFactory().get("/")
        if cookie is not None:
            request.COOKIES[TIMEZONE_COOKIE_NAME] = cookie
        UserTimezoneMiddleware(get_response)(request)
        return seen["zone"]

    def test_cookie_zone_is_active_during_request(self):
        """Cookie のタイムゾーンがリクエスト中に有効になることを確認する。"""
        self.assertEqual(self.run_middleware("Asia/Tokyo"), "Asia/Tokyo")
        self.assertEqual(timezone.get_current_timezone_name(), "UTC")

    def test_default_zone_without_cookie(self):
        self.assertEqual(self.run_middleware(), "UTC")

    def test_invalid_cookie_falls_back_to_default(self):
        self.assertEqual(self.run_middleware("Not/AZone"), "UTC")


@override_settings(TIME_ZONE="UTC")
class UserTimezoneTodoTests(TestCase):
    """利用者のタイムゾーンで期限を扱うことを確認する。"""

    def setUp(self):
        user_model = get_user_model()
        self.user = user_model.objects.create_user(username="user@example.com", password="pass")
        self.client.force_login(self.user)
        self.client.cookies[TIMEZONE_COOKIE_NAME] = "Asia/Tokyo"

    def test_due_date_is_read_in_user_zone(self):
        """datetime-local の入力が利用者のタイムゾーンの時刻として保存されることを確認する。"""
        response = self.client.post(
            reverse("todo:create_todo_item"),
            {"title": "提出", "priority": "medium", "due_date": "2030-01-01T15:00"},
        )
        self.assertEqual(response.status_code, HTTPStatus.OK)
        todo = TodoItem.objects.get()
        self.assertEqual(todo.due_date, datetime(2030, 1, 1, 6, 0, tzinfo=UTC))
        self.assertContains(response, "Jan 1, 2030 15:00")

    def test_due_soon_uses_stored_instant(self):
        """利用者の現地時刻で30分後が期限のTodoが通知されることを確認する。"""
        local_due = timezone.localtime(timezone.now() + timedelta(minutes=30), ZoneInfo("Asia/Tokyo"))
        self.client.post(
            reverse("todo:create_todo_item"),
            {"title": "提出", "priority": "medium", "due_date": local_due.strftime("%Y-%m-%dT%H:%M")},
        )
        response = self.client.get(reverse("todo:todo_items"), HTTP_X_NOTIFICATION_PERMISSION="granted")
        self.assertContains(response, "Task Due Soon!")
