from django.contrib import admin

from .models import PasswordEntry

admin.site.register(PasswordEntry)
