"""使い方ページのURL設定。

期限通知やメディア操作の説明は設定値に合わせて表示する（views.docs）。
"""

from django.urls import path

from .views import docs

app_name = "info"

urlpatterns = [
    path("docs/", docs, name="docs"),
]
