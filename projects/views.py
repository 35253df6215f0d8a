"""Projectsアプリケーションのビュー。

一覧は作成日時の降順で表示し、作成/更新/削除のたびに一覧を再取得する。
"""

from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse

from shared import entity_views
from shared.entity_views import EntityConfig

from .forms import ProjectForm
from .models import Project

PROJECT_ENTITY = EntityConfig(
    model=Project,
    form_class=ProjectForm,
    label="project",
    plural_label="projects",
    template_dir="projects",
    list_element_id="project-list",
)


@login_required
def project_list(request: HttpRequest) -> HttpResponse:
    """プロジェクト一覧ページを表示する。"""
    return entity_views.render_list_page(request, PROJECT_ENTITY)


@login_required
def project_items(request: HttpRequest) -> HttpResponse:
    """HTMX用のプロジェクト一覧部分テンプレートを返す。"""
    return entity_views.render_list_partial(request, PROJECT_ENTITY)


@login_required
def new_project_form(request: HttpRequest) -> HttpResponse:
    """新規作成フォームを返す。"""
    return entity_views.render_form(request, PROJECT_ENTITY)


@login_required
def edit_project_form(request: HttpRequest, item_id: int) -> HttpResponse:
    """編集フォームを返す。"""
    return entity_views.render_form(request, PROJECT_ENTITY, item_id=item_id)


@login_required
def create_project(request: HttpRequest) -> HttpResponse:
    """プロジェクトを作成する。"""
    return entity_views.handle_save(request, PROJECT_ENTITY)


@login_required
def update_project(request: HttpRequest, item_id: int) -> HttpResponse:
    """プロジェクトを更新する。"""
    return entity_views.handle_save(request, PROJECT_ENTITY, item_id=item_id)


@login_required
def delete_project(request: HttpRequest, item_id: int) -> HttpResponse:
    """プロジェクトを削除する。"""
    return entity_views.handle_delete(request, PROJECT_ENTITY, item_id=item_id)
