"""Todoアプリケーションのビュー。

外部（urls.py / tests）からはこのパッケージを経由して参照する。
"""

from .create_views import create_todo_item, new_todo_form  # noqa: F401
from .delete_views import delete_todo_item  # noqa: F401
from .list_views import todo_items, todo_list  # noqa: F401
from .update_views import edit_todo_form, toggle_todo_item, update_todo_item  # noqa: F401
