from django.contrib import admin

from .models import MediaFile

admin.site.register(MediaFile)
