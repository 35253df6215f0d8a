"""personal_hubプロジェクトのURL設定。

プロジェクトレベルのURLルーティングを定義する。

URLパターン:
    - 'admin/': Django管理サイト
    - 'accounts/': 認証（サインイン/サインアウト/サインアップ/プロフィール）
    - '': ダッシュボードへのリダイレクト
    - 'dashboard/', 'projects/', 'passwords/', 'notes/', 'todos/', 'media/': 各機能
    - 'docs/': 使い方ページ
"""

import django.contrib.admin
import django.contrib.auth.views
import django.urls
from django.conf import settings
from django.conf.urls.static import static
from django.views.generic import RedirectView

from accounts.views import SignInView

urlpatterns = [
    django.urls.path("admin/", django.contrib.admin.site.urls),
    django.urls.path(
        "accounts/login/",
        SignInView.as_view(),
        name="account_login",
    ),
    django.urls.path(
        "accounts/logout/",
        django.contrib.auth.views.LogoutView.as_view(),
        name="account_logout",
    ),
    django.urls.path("accounts/", django.urls.include("accounts.urls")),
    django.urls.path(
        "",
        RedirectView.as_view(pattern_name="dashboard:index", permanent=False),
        name="home",
    ),
    django.urls.path("dashboard/", django.urls.include("dashboard.urls")),
    django.urls.path("projects/", django.urls.include("projects.urls")),
    django.urls.path("passwords/", django.urls.include("passwords.urls")),
    django.urls.path("notes/", django.urls.include("notes.urls")),
    django.urls.path("todos/", django.urls.include("todo.urls")),
    django.urls.path("media/", django.urls.include("media_player.urls")),
    django.urls.path("", django.urls.include("info.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
