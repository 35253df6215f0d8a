"""accountsアプリケーションのURL設定。

URLパターン:
    - 'signup/': ユーザー登録ページ
    - 'profile/': プロフィールページ
"""

from django.urls import path

from . import views

app_name = "accounts"

urlpatterns = [
    path("signup/", views.signup, name="signup"),
    path("profile/", views.profile, name="profile"),
]
