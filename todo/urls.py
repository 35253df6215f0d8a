"""TodoアプリケーションのURL設定。

Todoアプリケーションの各エンドポイントをビューにマッピングする。

URLパターン:
    - '': Todoリストのメインページ
    - 'items/': HTMX用のTodoリスト部分更新（フィルタ変更・自動更新）
    - 'new/': 新規作成フォーム（モーダル）
    - 'save/': 新規Todoアイテム作成
    - '<item_id>/edit/': 編集フォーム（モーダル）
    - '<item_id>/save/': Todoアイテム更新
    - '<item_id>/toggle/': 完了状態の切り替え
    - '<item_id>/delete/': Todoアイテム削除
"""

from django.urls import path

from . import views

app_name = "todo"

urlpatterns = [
    path("", views.todo_list, name="todo_list"),
    path("items/", views.todo_items, name="todo_items"),
    path("new/", views.new_todo_form, name="new_todo_form"),
    path("save/", views.create_todo_item, name="create_todo_item"),
    path("<int:item_id>/edit/", views.edit_todo_form, name="edit_todo_form"),
    path("<int:item_id>/save/", views.update_todo_item, name="update_todo_item"),
    path("<int:item_id>/toggle/", views.toggle_todo_item, name="toggle_todo_item"),
    path("<int:item_id>/delete/", views.delete_todo_item, name="delete_todo_item"),
]
