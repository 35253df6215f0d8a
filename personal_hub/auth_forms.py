"""認証関連フォーム。

Django標準のログインフォームを、メールアドレスでのサインインとBootstrapの見た目に合わせる。
ユーザー名にはサインアップ時のメールアドレスが入っている。
"""

from django import forms
from django.contrib.auth.forms import AuthenticationForm

from accounts.forms import PASSWORD_MIN_LENGTH

SIGN_IN_ERROR_MESSAGE = "Invalid email or password"


class EmailAuthenticationForm(AuthenticationForm):
    """メールアドレス + パスワードのサインインフォーム。

    メールアドレスの形式とパスワードの最小文字数は、認証の前に検証する。
    """

    username = forms.EmailField(
        label="Email Address",
        error_messages={
            "required": "Invalid email address",
            "invalid": "Invalid email address",
        },
        widget=forms.EmailInput(
            attrs={
                "class": "form-control",
                "placeholder": "you@example.com",
                "autocomplete": "email",
                "autofocus": True,
            }
        ),
    )

    password = forms.CharField(
        label="Password",
        strip=False,
        min_length=PASSWORD_MIN_LENGTH,
        error_messages={
            "required": "Password must be at least 6 characters",
            "min_length": "Password must be at least 6 characters",
        },
        widget=forms.PasswordInput(
            attrs={
                "class": "form-control",
                "placeholder": "••••••••",
                "autocomplete": "current-password",
            }
        ),
    )

    error_messages = {
        **AuthenticationForm.error_messages,
        "invalid_login": SIGN_IN_ERROR_MESSAGE,
    }

    def clean_username(self) -> str:
        """メールアドレスを小文字へ正規化する。"""
        return str(self.cleaned_data.get("username", "")).strip().lower()
