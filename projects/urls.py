"""ProjectsアプリケーションのURL設定。"""

from django.urls import path

from . import views

app_name = "projects"

urlpatterns = [
    path("", views.project_list, name="project_list"),
    path("items/", views.project_items, name="project_items"),
    path("new/", views.new_project_form, name="new_project_form"),
    path("save/", views.create_project, name="create_project"),
    path("<int:item_id>/edit/", views.edit_project_form, name="edit_project_form"),
    path("<int:item_id>/save/", views.update_project, name="update_project"),
    path("<int:item_id>/delete/", views.delete_project, name="delete_project"),
]
