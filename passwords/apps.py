"""Passwordsアプリケーションの設定。"""

from django.apps import AppConfig


class PasswordsConfig(AppConfig):
    name = "passwords"
