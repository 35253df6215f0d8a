"""Todoアプリケーションの管理サイト設定。"""

from django.contrib import admin

from .models import TodoItem


@admin.register(TodoItem)
class TodoItemAdmin(admin.ModelAdmin):
    list_display = ("title", "user", "priority", "due_date", "completed")
    list_filter = ("priority", "completed")
