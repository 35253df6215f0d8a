"""Projectsアプリケーションのフォーム定義。"""

from django import forms

from shared.forms import BootstrapFormMixin

from .models import Project


class ProjectForm(BootstrapFormMixin, forms.ModelForm):
    """プロジェクトの作成・編集フォーム。"""

    class Meta:
        model = Project
        fields = ["title", "description", "status", "progress"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
            "progress": forms.NumberInput(attrs={"min": 0, "max": 100}),
        }
        error_messages = {
            "title": {"required": "Title is required"},
            "progress": {
                "min_value": "Progress must be between 0 and 100",
                "max_value": "Progress must be between 0 and 100",
                "invalid": "Progress must be a number",
            },
        }
