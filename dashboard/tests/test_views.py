"""ダッシュボードのテスト。"""

from datetime import timedelta
from http import HTTPStatus
from unittest import mock

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from notes.models import Note
from passwords.models import PasswordEntry
from projects.models import Project
from todo.models import TodoItem

from ..queries import DashboardStats, get_dashboard_stats, get_upcoming_todos


class DashboardTestMixin:
    def setUp(self):
        user_model = get_user_model()
        self.user = user_model.objects.create_user(username="user@example.com", password="pass")
        self.other_user = user_model.objects.create_user(username="other@example.com", password="pass")


class DashboardQueriesTests(DashboardTestMixin, TestCase):
    """集計クエリのテストケース。"""

    def test_counts_only_own_entities(self):
        """自分のデータだけが数えられることを確認する。"""
        Project.objects.create(user=self.user, title="P1")
        Project.objects.create(user=self.user, title="P2")
        Project.objects.create(user=self.other_user, title="他人")
        PasswordEntry.objects.create(user=self.user, title="Mail", password="x")
        Note.objects.create(user=self.user, title="N")
        TodoItem.objects.create(user=self.user, title="未完了")
        TodoItem.objects.create(user=self.user, title="完了", completed=True, completed_at=timezone.now())
        TodoItem.objects.create(user=self.other_user, title="他人")

        stats = get_dashboard_stats(self.user.pk)

        self.assertEqual(
            stats,
            DashboardStats(projects=2, passwords=1, notes=1, todos=2, pending_todos=1, completed_today=1),
        )

    def test_empty_user(self):
        self.assertEqual(get_dashboard_stats(self.user.pk), DashboardStats())

    def test_upcoming_todos(self):
        """期限が未来の未完了Todoだけが期限順に返ることを確認する。"""
        now = timezone.now()
        later = TodoItem.objects.create(user=self.user, title="後", due_date=now + timedelta(days=2))
        sooner = TodoItem.objects.create(user=self.user, title="先", due_date=now + timedelta(hours=1))
        TodoItem.objects.create(user=self.user, title="期限切れ", due_date=now - timedelta(hours=1))
        TodoItem.objects.create(user=self.user, title="期限なし")
        TodoItem.objects.create(user=self.user, title="完了済み", due_date=now + timedelta(hours=2), completed=True)

        self.assertEqual(get_upcoming_todos(self.user.pk), [sooner, later])
        self.assertEqual(get_upcoming_todos(self.user.pk, limit=1), [sooner])


class DashboardViewTests(DashboardTestMixin, TestCase):
    """indexビューのテストケース。"""

    def setUp(self):
        super().setUp()
        self.client.force_login(self.user)

    def test_index(self):
        Project.objects.create(user=self.user, title="P1")
        response = self.client.get(reverse("dashboard:index"))
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertTemplateUsed(response, "dashboard/index.html")
        self.assertEqual(response.context["stats"].projects, 1)
        self.assertContains(response, "Welcome Back")

    def test_root_redirects_to_dashboard(self):
        response = self.client.get("/")
        self.assertRedirects(response, reverse("dashboard:index"))

    def test_index_database_error(self):
        """集計に失敗した場合は件数0とエラーメッセージを表示することを確認する。"""
        with mock.patch("dashboard.views.get_dashboard_stats", side_effect=DatabaseError("down")):
            response = self.client.get(reverse("dashboard:index"))
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.context["stats"], DashboardStats())
        self.assertContains(response, "Failed to load dashboard")
