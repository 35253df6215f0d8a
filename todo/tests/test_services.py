"""サービス層のテスト。"""

from datetime import UTC, datetime
from unittest import mock

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import TestCase

from .. import services
from ..forms import TodoItemForm
from ..models import TodoItem


class TodoServiceTests(TestCase):
    """Todoの作成・更新・完了トグル・削除のテストケース。"""

    def setUp(self):
        user_model = get_user_model()
        self.user = user_model.objects.create_user(username="user@example.com", password="pass")

    def test_create_todo_sets_owner(self):
        """作成したTodoがユーザーに紐づくことを確認する。"""
        form = TodoItemForm(data={"title": "買い物", "priority": "low"})
        self.assertTrue(form.is_valid())
        result = services.create_todo(form, user_id=self.user.pk)
        self.assertTrue(result.success)
        self.assertTrue(result.created)
        self.assertEqual(result.todo_item.user_id, self.user.pk)
        self.assertEqual(TodoItem.objects.get().priority, "low")

    def test_create_todo_database_error(self):
        """DB障害時は汎用メッセージで失敗し、何も作成されないことを確認する。"""
        form = TodoItemForm(data={"title": "買い物", "priority": "low"})
        self.assertTrue(form.is_valid())
        with mock.patch.object(TodoItem, "save", side_effect=DatabaseError("down")):
            result = services.create_todo(form, user_id=self.user.pk)
        self.assertFalse(result.success)
        self.assertEqual(result.error, "Failed to create todo")
        self.assertEqual(TodoItem.objects.count(), 0)

    def test_update_todo_overwrites_all_fields(self):
        """編集でタイトル・説明・期限・優先度が上書きされることを確認する。"""
        todo = TodoItem.objects.create(user=self.user, title="旧タイトル")
        form = TodoItemForm(
            data={
                "title": "新タイトル",
                "description": "詳細",
                "due_date": "2030-05-01T10:00",
                "priority": "high",
            },
            instance=todo,
        )
        self.assertTrue(form.is_valid(), form.errors)
        result = services.update_todo(form)
        self.assertTrue(result.success)
        todo.refresh_from_db()
        self.assertEqual(todo.title, "新タイトル")
        self.assertEqual(todo.description, "詳細")
        self.assertEqual(todo.priority, "high")
        self.assertIsNotNone(todo.due_date)

    def test_toggle_sets_and_clears_completed_at(self):
        """完了で completed_at が設定され、再トグルで消去されることを確認する。"""
        todo = TodoItem.objects.create(user=self.user, title="タスク")
        now = datetime(2030, 1, 1, 9, 0, tzinfo=UTC)

        result = services.toggle_todo_completion(todo, now=now)
        self.assertTrue(result.success)
        self.assertFalse(result.old_status)
        todo.refresh_from_db()
        self.assertTrue(todo.completed)
        self.assertEqual(todo.completed_at, now)

        result = services.toggle_todo_completion(todo)
        self.assertTrue(result.success)
        self.assertTrue(result.old_status)
        todo.refresh_from_db()
        self.assertFalse(todo.completed)
        self.assertIsNone(todo.completed_at)

    def test_toggle_database_error_restores_state(self):
        """DB障害時はインスタンスの状態が元に戻ることを確認する。"""
        todo = TodoItem.objects.create(user=self.user, title="タスク")
        with mock.patch.object(TodoItem, "save", side_effect=DatabaseError("down")):
            result = services.toggle_todo_completion(todo)
        self.assertFalse(result.success)
        self.assertEqual(result.error, "Failed to update todo")
        self.assertFalse(todo.completed)
        self.assertIsNone(todo.completed_at)
        todo.refresh_from_db()
        self.assertFalse(todo.completed)

    def test_delete_todo(self):
        """Todoが削除されることを確認する。"""
        todo = TodoItem.objects.create(user=self.user, title="タスク")
        result = services.delete_todo(todo)
        self.assertTrue(result.success)
        self.assertEqual(result.title, "タスク")
        self.assertFalse(TodoItem.objects.exists())

    def test_delete_todo_database_error(self):
        """削除時のDB障害は汎用メッセージで失敗することを確認する。"""
        todo = TodoItem.objects.create(user=self.user, title="タスク")
        with mock.patch.object(TodoItem, "delete", side_effect=DatabaseError("down")):
            result = services.delete_todo(todo)
        self.assertFalse(result.success)
        self.assertEqual(result.error, "Failed to delete todo")
        self.assertTrue(TodoItem.objects.exists())
