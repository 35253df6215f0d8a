"""Notesアプリケーションのフォーム定義。"""

from django import forms

from shared.forms import BootstrapFormMixin

from .models import Note

IMAGE_CONTENT_TYPE_PREFIX = "image/"


class NoteForm(BootstrapFormMixin, forms.ModelForm):
    """ノートの作成・編集フォーム。

    画像は任意。新たにアップロードされたファイルのみ content_type を検証する。
    """

    class Meta:
        model = Note
        fields = ["title", "content", "image"]
        widgets = {
            "content": forms.Textarea(attrs={"rows": 6}),
            "image": forms.ClearableFileInput(attrs={"accept": "image/*"}),
        }
        error_messages = {
            "title": {"required": "Title is required"},
        }

    def clean_image(self):
        image = self.cleaned_data.get("image")
        content_type = getattr(image, "content_type", None)
        # 保存済みのファイルは content_type を持たない
        if content_type is not None and not content_type.startswith(IMAGE_CONTENT_TYPE_PREFIX):
            raise forms.ValidationError("Please upload an image file")
        return image
