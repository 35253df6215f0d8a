"""media_playerアプリケーションのフォーム定義。"""

import os

from django import forms

from shared.forms import BootstrapFormMixin

from .models import MediaFile, MediaType

MEDIA_CONTENT_TYPE_PREFIXES = {
    "audio/": MediaType.AUDIO,
    "video/": MediaType.VIDEO,
}


def detect_media_type(content_type: str | None) -> MediaType | None:
    """content_type から種別を判定する。音声/動画でなければNone。"""
    if not content_type:
        return None
    for prefix, media_type in MEDIA_CONTENT_TYPE_PREFIXES.items():
        if content_type.startswith(prefix):
            return media_type
    return None


class MediaUploadForm(BootstrapFormMixin, forms.ModelForm):
    """メディアファイルのアップロードフォーム。

    タイトルを省略した場合はファイル名（拡張子なし）を使う。
    """

    title = forms.CharField(max_length=255, required=False)

    class Meta:
        model = MediaFile
        fields = ["title", "file"]
        widgets = {
            "file": forms.ClearableFileInput(attrs={"accept": "audio/*,video/*"}),
        }
        error_messages = {
            "file": {"required": "Please select a media file"},
        }

    def clean_file(self):
        uploaded = self.cleaned_data.get("file")
        media_type = detect_media_type(getattr(uploaded, "content_type", None))
        if media_type is None:
            raise forms.ValidationError("Please upload an audio or video file")
        self.instance.file_type = media_type
        return uploaded

    def clean(self):
        cleaned_data = super().clean()
        uploaded = cleaned_data.get("file")
        if not cleaned_data.get("title") and uploaded is not None:
            cleaned_data["title"] = os.path.splitext(os.path.basename(uploaded.name))[0][:255]
        return cleaned_data
