"""accountsアプリケーションのテスト。

ユーザー登録、サインイン、プロフィール編集、セッション状態の破棄を確認する。
"""

from http import HTTPStatus
from unittest import mock

from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse

from accounts.forms import SignUpForm
from accounts.models import DEFAULT_FULL_NAME, Profile
from accounts.signals import SESSION_STATE_KEYS, register_session_state_key

SIGNUP_DATA = {
    "email": "Alice@Example.com",
    "password": "secret1",
    "confirm_password": "secret1",
    "full_name": "Alice",
}


class SignUpFormTest(TestCase):
    """SignUpFormのテスト。"""

    def test_valid_data_creates_user_and_profile(self) -> None:
        """ユーザーとプロフィールが作成されることを確認する。"""
        form = SignUpForm(data=SIGNUP_DATA)
        self.assertTrue(form.is_valid(), form.errors)
        user = form.save()
        self.assertEqual(user.username, "alice@example.com")
        self.assertEqual(user.profile.full_name, "Alice")
        self.assertEqual(user.profile.email, "alice@example.com")
        self.assertEqual(Profile.objects.get(user=user).full_name, "Alice")

    def test_short_password(self) -> None:
        """6文字未満のパスワードが拒否されることを確認する。"""
        form = SignUpForm(data={**SIGNUP_DATA, "password": "abc", "confirm_password": "abc"})
        self.assertFalse(form.is_valid())
        self.assertIn("Password must be at least 6 characters", form.errors["password"])

    def test_password_mismatch(self) -> None:
        """確認用パスワードの不一致が拒否されることを確認する。"""
        form = SignUpForm(data={**SIGNUP_DATA, "confirm_password": "other12"})
        self.assertFalse(form.is_valid())
        self.assertIn("Passwords don't match", form.errors["confirm_password"])

    def test_short_full_name(self) -> None:
        """1文字の名前が拒否されることを確認する。"""
        form = SignUpForm(data={**SIGNUP_DATA, "full_name": "A"})
        self.assertFalse(form.is_valid())
        self.assertIn("Name must be at least 2 characters", form.errors["full_name"])

    def test_invalid_email(self) -> None:
        """不正なメールアドレスが拒否されることを確認する。"""
        form = SignUpForm(data={**SIGNUP_DATA, "email": "not-an-email"})
        self.assertFalse(form.is_valid())
        self.assertIn("Invalid email address", form.errors["email"])

    def test_duplicate_email_case_insensitive(self) -> None:
        """大文字小文字違いの既存メールアドレスが拒否されることを確認する。"""
        User.objects.create_user(username="alice@example.com", password="secret1")
        form = SignUpForm(data=SIGNUP_DATA)
        self.assertFalse(form.is_valid())
        self.assertIn("An account with this email already exists", form.errors["email"])


class SignUpViewTest(TestCase):
    """signupビューのテスト。"""

    def test_get_renders_form(self) -> None:
        """登録フォームが表示されることを確認する。"""
        response = self.client.get(reverse("accounts:signup"))
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertTemplateUsed(response, "account/signup.html")

    def test_post_creates_user_and_signs_in(self) -> None:
        """登録後にサインイン済みでダッシュボードへ移動することを確認する。"""
        response = self.client.post(reverse("accounts:signup"), SIGNUP_DATA)
        self.assertRedirects(response, reverse("dashboard:index"))
        self.assertTrue(User.objects.filter(username="alice@example.com").exists())
        self.assertIn("_auth_user_id", self.client.session)

    def test_invalid_post_shows_first_error(self) -> None:
        """検証エラーの最初の1件がメッセージに表示されることを確認する。"""
        response = self.client.post(reverse("accounts:signup"), {**SIGNUP_DATA, "email": ""})
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertContains(response, "Invalid email address")
        self.assertFalse(User.objects.exists())

    def test_authenticated_user_is_redirected(self) -> None:
        """サインイン済みならダッシュボードへリダイレクトされることを確認する。"""
        user = User.objects.create_user(username="bob@example.com", password="secret1")
        self.client.force_login(user)
        response = self.client.get(reverse("accounts:signup"))
        self.assertRedirects(response, reverse("dashboard:index"))


class SignInViewTest(TestCase):
    """サインインビューのテスト。"""

    def setUp(self) -> None:
        self.user = User.objects.create_user(username="bob@example.com", password="secret1")

    def test_sign_in_with_valid_credentials(self) -> None:
        """正しい資格情報でサインインできることを確認する。"""
        response = self.client.post(
            reverse("account_login"),
            {"username": "Bob@Example.com", "password": "secret1"},
        )
        self.assertRedirects(response, reverse("dashboard:index"))

    def test_sign_in_with_wrong_password(self) -> None:
        """誤ったパスワードではエラーメッセージが表示されることを確認する。"""
        response = self.client.post(
            reverse("account_login"),
            {"username": "bob@example.com", "password": "wrong-password"},
        )
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertContains(response, "Invalid email or password")

    def test_sign_in_with_malformed_email(self) -> None:
        """不正な形式のメールアドレスは認証前に拒否されることを確認する。"""
        with mock.patch("django.contrib.auth.forms.authenticate") as authenticate:
            response = self.client.post(
                reverse("account_login"),
                {"username": "not-an-email", "password": "abc"},
            )
        authenticate.assert_not_called()
        self.assertEqual(response.status_code, HTTPStatus.OK)
        messages = [str(message) for message in response.context["messages"]]
        self.assertEqual(messages, ["Invalid email address"])

    def test_sign_in_with_short_password(self) -> None:
        """6文字未満のパスワードは認証前に拒否されることを確認する。"""
        response = self.client.post(
            reverse("account_login"),
            {"username": "bob@example.com", "password": "abc"},
        )
        self.assertEqual(response.status_code, HTTPStatus.OK)
        messages = [str(message) for message in response.context["messages"]]
        self.assertEqual(messages, ["Password must be at least 6 characters"])
        self.assertNotIn("_auth_user_id", self.client.session)

    def test_protected_page_redirects_to_sign_in(self) -> None:
        """未サインインで保護ページへアクセスするとサインインへ移動することを確認する。"""
        response = self.client.get(reverse("dashboard:index"))
        self.assertEqual(response.status_code, HTTPStatus.FOUND)
        self.assertTrue(response["Location"].startswith(reverse("account_login")))


class ProfileTest(TestCase):
    """プロフィールのテスト。"""

    def setUp(self) -> None:
        self.user = User.objects.create_user(username="carol@example.com", password="secret1")
        self.client.force_login(self.user)

    def test_profile_is_created_with_user(self) -> None:
        """ユーザー作成時にプロフィールが自動作成されることを確認する。"""
        profile = Profile.objects.get(user=self.user)
        self.assertEqual(profile.full_name, DEFAULT_FULL_NAME)
        self.assertEqual(profile.email, "carol@example.com")

    def test_update_profile(self) -> None:
        """プロフィールを更新できることを確認する。"""
        response = self.client.post(
            reverse("accounts:profile"),
            {"full_name": "  Carol  ", "avatar_url": "https://example.com/a.png"},
        )
        self.assertRedirects(response, reverse("accounts:profile"))
        profile = Profile.objects.get(user=self.user)
        self.assertEqual(profile.full_name, "Carol")
        self.assertEqual(profile.avatar_url, "https://example.com/a.png")

    def test_update_profile_with_invalid_avatar_url(self) -> None:
        """不正なアバターURLが拒否されることを確認する。"""
        response = self.client.post(
            reverse("accounts:profile"),
            {"full_name": "Carol", "avatar_url": "not a url"},
        )
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertContains(response, "Invalid avatar URL")

    def test_profile_name_shown_in_sidebar(self) -> None:
        """サイドバーにプロフィール名が表示されることを確認する。"""
        Profile.objects.filter(user=self.user).update(full_name="Carol Smith")
        response = self.client.get(reverse("accounts:profile"))
        self.assertContains(response, "Carol Smith")


class SessionStateTest(TestCase):
    """サインイン/サインアウト時のセッション状態破棄のテスト。"""

    def setUp(self) -> None:
        self.user = User.objects.create_user(username="dave@example.com", password="secret1")
        register_session_state_key("test_state")

    def tearDown(self) -> None:
        SESSION_STATE_KEYS.remove("test_state")

    def _store_state(self) -> None:
        session = self.client.session
        session["test_state"] = [1, 2]
        session.save()

    def test_register_is_idempotent(self) -> None:
        """同じキーを二重に登録しないことを確認する。"""
        register_session_state_key("test_state")
        self.assertEqual(SESSION_STATE_KEYS.count("test_state"), 1)

    def test_sign_out_clears_state(self) -> None:
        """サインアウトでセッション状態が破棄されることを確認する。"""
        self.client.force_login(self.user)
        self._store_state()
        response = self.client.post(reverse("account_logout"))
        self.assertEqual(response.status_code, HTTPStatus.FOUND)
        self.assertNotIn("test_state", self.client.session)

    def test_sign_in_clears_state(self) -> None:
        """サインイン時にそれ以前のセッション状態が破棄されることを確認する。"""
        self._store_state()
        self.client.post(
            reverse("account_login"),
            {"username": "dave@example.com", "password": "secret1"},
        )
        self.assertNotIn("test_state", self.client.session)
