"""Passwordsアプリケーションのフォーム定義。"""

from django import forms

from shared.forms import BootstrapFormMixin

from .models import PasswordEntry


class PasswordEntryForm(BootstrapFormMixin, forms.ModelForm):
    """パスワードの作成・編集フォーム。

    編集時は保存済みの値を入力欄に表示する（render_value=True）。
    """

    class Meta:
        model = PasswordEntry
        fields = ["title", "username", "password", "website_url", "notes"]
        widgets = {
            "password": forms.PasswordInput(render_value=True, attrs={"autocomplete": "new-password"}),
            "notes": forms.Textarea(attrs={"rows": 3}),
        }
        labels = {"website_url": "Website URL"}
        error_messages = {
            "title": {"required": "Title is required"},
            "password": {"required": "Password is required"},
            "website_url": {"invalid": "Invalid website URL"},
        }
