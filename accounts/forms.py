"""ユーザー登録・プロフィールのフォーム。

サインアップはメールアドレスをユーザー名として使い、
各制約の違反メッセージはトーストにそのまま表示できる文言にしている。
"""

from django import forms
from django.contrib.auth import get_user_model
from django.db import transaction

from shared.forms import BootstrapFormMixin

from .models import Profile

PASSWORD_MIN_LENGTH = 6
FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 100


class SignUpForm(BootstrapFormMixin, forms.Form):
    """ユーザー登録フォーム。

    フィールドの宣言順がそのままエラーの優先順になる。
    """

    email = forms.EmailField(
        label="Email Address",
        error_messages={
            "required": "Invalid email address",
            "invalid": "Invalid email address",
        },
        widget=forms.EmailInput(attrs={"placeholder": "you@example.com", "autocomplete": "email"}),
    )
    password = forms.CharField(
        label="Password",
        strip=False,
        min_length=PASSWORD_MIN_LENGTH,
        error_messages={
            "required": "Password must be at least 6 characters",
            "min_length": "Password must be at least 6 characters",
        },
        widget=forms.PasswordInput(attrs={"autocomplete": "new-password"}),
    )
    full_name = forms.CharField(
        label="Full Name",
        min_length=FULL_NAME_MIN_LENGTH,
        max_length=FULL_NAME_MAX_LENGTH,
        error_messages={
            "required": "Name must be at least 2 characters",
            "min_length": "Name must be at least 2 characters",
            "max_length": "Name is too long",
        },
        widget=forms.TextInput(attrs={"placeholder": "John Doe", "autocomplete": "name"}),
    )
    confirm_password = forms.CharField(
        label="Confirm Password",
        strip=False,
        required=False,
        widget=forms.PasswordInput(attrs={"autocomplete": "new-password"}),
    )

    def clean_email(self) -> str:
        """メールアドレスを正規化し、重複を拒否する。"""
        email = self.cleaned_data["email"].strip().lower()
        user_model = get_user_model()
        if user_model._default_manager.filter(username__iexact=email).exists():
            raise forms.ValidationError("An account with this email already exists")
        return email

    def clean(self) -> dict[str, object]:
        """パスワード確認の一致を検証する。"""
        cleaned_data = super().clean() or {}
        password = cleaned_data.get("password")
        confirm_password = cleaned_data.get("confirm_password")
        if password and password != confirm_password:
            self.add_error("confirm_password", "Passwords don't match")
        return cleaned_data

    @transaction.atomic
    def save(self):
        """ユーザーとプロフィールを作成する。

        Returns:
            作成されたユーザー。
        """
        email = self.cleaned_data["email"]
        user = get_user_model()._default_manager.create_user(
            username=email,
            email=email,
            password=self.cleaned_data["password"],
        )
        # 作成シグナルで既定名のプロフィールが作られ、user.profile にキャッシュされている
        profile = getattr(user, "profile", None) or Profile(user=user)
        profile.full_name = self.cleaned_data["full_name"]
        profile.email = email
        profile.save()
        return user


class ProfileForm(BootstrapFormMixin, forms.ModelForm):
    """プロフィール編集フォーム。"""

    class Meta:
        model = Profile
        fields = ["full_name", "avatar_url"]
        labels = {"full_name": "Full Name", "avatar_url": "Avatar URL"}
        error_messages = {
            "full_name": {
                "required": "Name must be at least 2 characters",
                "max_length": "Name is too long",
            },
            "avatar_url": {"invalid": "Invalid avatar URL"},
        }

    def clean_full_name(self) -> str:
        full_name = self.cleaned_data["full_name"].strip()
        if len(full_name) < FULL_NAME_MIN_LENGTH:
            raise forms.ValidationError("Name must be at least 2 characters")
        return full_name
