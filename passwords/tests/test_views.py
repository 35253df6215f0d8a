"""パスワード管理のビューのテスト。"""

from http import HTTPStatus

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from ..models import PasswordEntry


class PasswordViewTests(TestCase):
    def setUp(self):
        user_model = get_user_model()
        self.user = user_model.objects.create_user(username="user@example.com", password="pass")
        self.other_user = user_model.objects.create_user(username="other@example.com", password="pass")
        self.client.force_login(self.user)

    def test_list_masks_passwords(self):
        """一覧ではパスワードが伏せ字で表示されることを確認する。"""
        PasswordEntry.objects.create(user=self.user, title="Mail", password="hunter2")
        response = self.client.get(reverse("passwords:password_list"))
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertContains(response, "Mail")
        self.assertNotContains(response, "hunter2")

    def test_list_excludes_other_users(self):
        PasswordEntry.objects.create(user=self.other_user, title="Bank", password="x")
        response = self.client.get(reverse("passwords:password_items"))
        self.assertNotContains(response, "Bank")

    def test_reveal_and_hide(self):
        """visible=1 で平文、それ以外で伏せ字が返ることを確認する。"""
        entry = PasswordEntry.objects.create(user=self.user, title="Mail", password="hunter2")
        url = reverse("passwords:reveal_password", args=[entry.pk])

        response = self.client.get(url, {"visible": "1"})
        self.assertContains(response, 'value="hunter2"')
        self.assertContains(response, "Hide")

        response = self.client.get(url, {"visible": "0"})
        self.assertNotContains(response, "hunter2")
        self.assertContains(response, "Show")

    def test_reveal_other_users_entry(self):
        """他ユーザーのパスワードは表示できないことを確認する。"""
        entry = PasswordEntry.objects.create(user=self.other_user, title="Bank", password="secret")
        response = self.client.get(reverse("passwords:reveal_password", args=[entry.pk]), {"visible": "1"})
        self.assertEqual(response.status_code, HTTPStatus.NOT_FOUND)

    def test_reveal_requires_get(self):
        entry = PasswordEntry.objects.create(user=self.user, title="Mail", password="hunter2")
        response = self.client.post(reverse("passwords:reveal_password", args=[entry.pk]))
        self.assertEqual(response.status_code, HTTPStatus.METHOD_NOT_ALLOWED)

    def test_create_entry(self):
        response = self.client.post(
            reverse("passwords:create_password"),
            {
                "title": "GitHub",
                "username": "octocat",
                "password": "s3cret!",
                "website_url": "https://github.com",
                "notes": "",
            },
        )
        self.assertEqual(response.status_code, HTTPStatus.OK)
        entry = PasswordEntry.objects.get()
        self.assertEqual(entry.user, self.user)
        self.assertEqual(entry.password, "s3cret!")
        self.assertEqual(response["HX-Retarget"], "#password-list")
        self.assertContains(response, "Password saved successfully")

    def test_create_rejects_invalid_url(self):
        """不正なURLは拒否されることを確認する。"""
        response = self.client.post(
            reverse("passwords:create_password"),
            {"title": "GitHub", "password": "s3cret!", "website_url": "not a url"},
        )
        self.assertContains(response, "Invalid website URL", status_code=HTTPStatus.BAD_REQUEST)
        self.assertFalse(PasswordEntry.objects.exists())

    def test_create_requires_password(self):
        response = self.client.post(reverse("passwords:create_password"), {"title": "GitHub", "password": ""})
        self.assertContains(response, "Password is required", status_code=HTTPStatus.BAD_REQUEST)

    def test_update_entry(self):
        entry = PasswordEntry.objects.create(user=self.user, title="Mail", password="old")
        response = self.client.post(
            reverse("passwords:update_password", args=[entry.pk]),
            {"title": "Mail", "password": "new", "username": "me"},
        )
        self.assertContains(response, "Password updated successfully")
        entry.refresh_from_db()
        self.assertEqual(entry.password, "new")
        self.assertEqual(entry.username, "me")

    def test_delete_entry(self):
        entry = PasswordEntry.objects.create(user=self.user, title="Mail", password="x")
        response = self.client.delete(reverse("passwords:delete_password", args=[entry.pk]))
        self.assertContains(response, "Password deleted successfully")
        self.assertFalse(PasswordEntry.objects.exists())
