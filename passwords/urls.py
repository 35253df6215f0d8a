"""PasswordsアプリケーションのURL設定。"""

from django.urls import path

from . import views

app_name = "passwords"

urlpatterns = [
    path("", views.password_list, name="password_list"),
    path("items/", views.password_items, name="password_items"),
    path("new/", views.new_password_form, name="new_password_form"),
    path("save/", views.create_password, name="create_password"),
    path("<int:item_id>/edit/", views.edit_password_form, name="edit_password_form"),
    path("<int:item_id>/save/", views.update_password, name="update_password"),
    path("<int:item_id>/delete/", views.delete_password, name="delete_password"),
    path("<int:item_id>/reveal/", views.reveal_password, name="reveal_password"),
]
