"""media_playerアプリケーションのURL設定。"""

from django.urls import path

from . import views

app_name = "media_player"

urlpatterns = [
    path("", views.media_library, name="media_library"),
    path("upload/", views.upload_media, name="upload_media"),
    path("<int:media_id>/", views.media_player, name="media_player"),
    path("<int:media_id>/control/", views.playback_control, name="playback_control"),
    path("<int:media_id>/delete/", views.delete_media, name="delete_media"),
]
