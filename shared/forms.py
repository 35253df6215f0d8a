"""フォーム共通の補助。

Bootstrapクラスの一括適用と、トースト表示用の先頭エラー取得を提供する。
"""

from django import forms

DEFAULT_FORM_ERROR_MESSAGE = "Please check your input."


class BootstrapFormMixin:
    """全フィールドのウィジェットにBootstrapのクラスを付与する。"""

    fields: dict[str, forms.Field]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)  # type: ignore[call-arg]
        for field in self.fields.values():
            widget = field.widget
            if isinstance(widget, forms.CheckboxInput):
                css_class = "form-check-input"
            elif isinstance(widget, forms.Select):
                css_class = "form-select"
            else:
                css_class = "form-control"
            existing = widget.attrs.get("class", "")
            widget.attrs["class"] = f"{existing} {css_class}".strip()


def first_form_error(form: forms.BaseForm, default: str = DEFAULT_FORM_ERROR_MESSAGE) -> str:
    """最初に違反した制約のメッセージを返す。

    フィールドの宣言順（form.errorsの順序）で最初のエラーを採用する。

    Args:
        form: 検証済みのフォーム。
        default: エラーが取得できない場合のメッセージ。

    Returns:
        エラーメッセージ。
    """
    for error_list in form.errors.values():
        for message in error_list:
            return str(message)
    return default
