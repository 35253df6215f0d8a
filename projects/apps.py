"""Projectsアプリケーションの設定。"""

from django.apps import AppConfig


class ProjectsConfig(AppConfig):
    name = "projects"
