"""NotesアプリケーションのURL設定。"""

from django.urls import path

from . import views

app_name = "notes"

urlpatterns = [
    path("", views.note_list, name="note_list"),
    path("items/", views.note_items, name="note_items"),
    path("new/", views.new_note_form, name="new_note_form"),
    path("save/", views.create_note, name="create_note"),
    path("<int:item_id>/edit/", views.edit_note_form, name="edit_note_form"),
    path("<int:item_id>/save/", views.update_note, name="update_note"),
    path("<int:item_id>/delete/", views.delete_note, name="delete_note"),
]
