"""personal_hubプロジェクトの設定。

環境変数から実行環境ごとの値を読み込み、アプリケーション固有の設定値を定義する。

環境変数:
    - DJANGO_SECRET_KEY: シークレットキー
    - DJANGO_DEBUG: "1" / "true" でデバッグモード
    - DJANGO_ALLOWED_HOSTS: カンマ区切りのホスト名
    - DJANGO_DB_PATH: SQLiteファイルのパス
    - DJANGO_LOG_LEVEL: ログレベル（デフォルト INFO）
"""

import os
from pathlib import Path


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-personal-hub-dev-key")

DEBUG = _env_bool("DJANGO_DEBUG", default=True)

ALLOWED_HOSTS = [host.strip() for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if host.strip()]


# =============================================================================
# アプリケーション定義
# =============================================================================

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "accounts",
    "dashboard",
    "info",
    "projects",
    "passwords",
    "notes",
    "todo",
    "media_player",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "personal_hub.middleware.UserTimezoneMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "personal_hub.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "personal_hub.context_processors.current_identity",
            ],
        },
    },
]

WSGI_APPLICATION = "personal_hub.wsgi.application"


# =============================================================================
# データベース
# =============================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DJANGO_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# =============================================================================
# 認証
# =============================================================================

AUTH_PASSWORD_VALIDATORS: list[dict[str, object]] = []

LOGIN_URL = "account_login"
LOGIN_REDIRECT_URL = "dashboard:index"
LOGOUT_REDIRECT_URL = "account_login"


# =============================================================================
# 国際化
# =============================================================================

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("DJANGO_TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True


# =============================================================================
# 静的ファイル / アップロード
# =============================================================================

STATIC_URL = "static/"
STATICFILES_DIRS = [BASE_DIR / "static"]
STATIC_ROOT = BASE_DIR / "staticfiles"

MEDIA_URL = "/uploads/"
MEDIA_ROOT = Path(os.environ.get("DJANGO_MEDIA_ROOT", str(BASE_DIR / "media_root")))


# =============================================================================
# メッセージ（トースト表示）
# =============================================================================

MESSAGE_STORAGE = "django.contrib.messages.storage.session.SessionStorage"


# =============================================================================
# ロギング
# =============================================================================

LOG_LEVEL = os.environ.get("DJANGO_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
        **{
            app: {
                "handlers": ["console"],
                "level": LOG_LEVEL,
                "propagate": False,
            }
            for app in (
                "personal_hub",
                "shared",
                "accounts",
                "dashboard",
                "projects",
                "passwords",
                "notes",
                "todo",
                "media_player",
            )
        },
    },
}


# =============================================================================
# アプリケーション固有設定
# =============================================================================

# 期限通知: "repeat"（取得のたびに通知）または "once"（ログインセッション中1回）
TODO_DUE_NOTIFICATION_MODE = os.environ.get("TODO_DUE_NOTIFICATION_MODE", "repeat")
TODO_DUE_WINDOW_MINUTES = _env_int("TODO_DUE_WINDOW_MINUTES", 60)
TODO_REFRESH_INTERVAL_SECONDS = _env_int("TODO_REFRESH_INTERVAL_SECONDS", 60)

MEDIA_SKIP_SECONDS = _env_int("MEDIA_SKIP_SECONDS", 10)
MEDIA_PLAYBACK_RATES = (0.5, 0.75, 1.0, 1.25, 1.5, 2.0)
