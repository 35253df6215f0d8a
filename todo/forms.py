"""Todoアプリケーションのフォーム定義。

Todoアイテムの作成・編集に使用するフォームを提供する。
"""

from django import forms

from shared.forms import BootstrapFormMixin

from .models import TodoItem

DATETIME_LOCAL_FORMAT = "%Y-%m-%dT%H:%M"


class TodoItemForm(BootstrapFormMixin, forms.ModelForm):
    """Todoアイテムの作成・編集フォーム。

    作成と編集で同じフォームを使う。期限はブラウザの datetime-local 入力で受け取り、
    現在のタイムゾーンの時刻として解釈する。
    """

    due_date = forms.DateTimeField(
        required=False,
        input_formats=[DATETIME_LOCAL_FORMAT, "%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S"],
        widget=forms.DateTimeInput(attrs={"type": "datetime-local"}, format=DATETIME_LOCAL_FORMAT),
        error_messages={"invalid": "Invalid due date"},
    )

    class Meta:
        model = TodoItem
        fields = ["title", "description", "due_date", "priority"]
        widgets = {
            "title": forms.TextInput(attrs={"placeholder": "What needs to be done?"}),
            "description": forms.Textarea(attrs={"rows": 3}),
        }
        error_messages = {
            "title": {
                "required": "Title is required",
                "max_length": "Title is too long",
            },
            "priority": {"invalid_choice": "Invalid priority"},
        }
