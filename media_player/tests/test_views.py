"""メディアプレーヤーのビューのテスト。

アップロードしたファイルは一時ディレクトリへ保存する。
"""

import shutil
import tempfile
from http import HTTPStatus

from django.contrib.auth import get_user_model
from django.core.files.base import ContentFile
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.urls import reverse

from ..models import MediaFile, MediaType
from ..playback import PLAYBACK_SESSION_KEY

MEDIA_ROOT = tempfile.mkdtemp()


@override_settings(MEDIA_ROOT=MEDIA_ROOT, MEDIA_SKIP_SECONDS=10)
class MediaViewTestCase(TestCase):
    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def setUp(self):
        user_model = get_user_model()
        self.user = user_model.objects.create_user(username="user@example.com", password="pass")
        self.other_user = user_model.objects.create_user(username="other@example.com", password="pass")
        self.client.force_login(self.user)

    def create_media(self, user=None, *, title="Song", duration=None) -> MediaFile:
        media_file = MediaFile(user=user or self.user, title=title, file_type=MediaType.AUDIO, duration=duration)
        media_file.file.save("song.mp3", ContentFile(b"ID3"), save=False)
        media_file.save()
        return media_file


class MediaLibraryViewTests(MediaViewTestCase):
    def test_library_lists_own_files(self):
        self.create_media(title="自分の曲", duration=75)
        self.create_media(self.other_user, title="他人の曲")
        response = self.client.get(reverse("media_player:media_library"))
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertContains(response, "自分の曲")
        self.assertContains(response, "1:15")
        self.assertNotContains(response, "他人の曲")

    def test_upload_audio(self):
        """音声ファイルをアップロードでき、タイトルがファイル名になることを確認する。"""
        upload = SimpleUploadedFile("Morning Walk.mp3", b"ID3", content_type="audio/mpeg")
        response = self.client.post(reverse("media_player:upload_media"), {"title": "", "file": upload})
        self.assertEqual(response.status_code, HTTPStatus.OK)
        media_file = MediaFile.objects.get()
        self.assertEqual(media_file.title, "Morning Walk")
        self.assertEqual(media_file.file_type, MediaType.AUDIO)
        self.assertEqual(media_file.user, self.user)
        self.assertTrue(media_file.file.name.startswith(f"uploads/{self.user.pk}/"))
        self.assertContains(response, "Media uploaded successfully")

    def test_upload_video_with_title(self):
        upload = SimpleUploadedFile("clip.mp4", b"\x00\x00", content_type="video/mp4")
        self.client.post(reverse("media_player:upload_media"), {"title": "旅行", "file": upload})
        media_file = MediaFile.objects.get()
        self.assertEqual(media_file.title, "旅行")
        self.assertTrue(media_file.is_video)

    def test_upload_rejects_other_types(self):
        """音声/動画以外のファイルは拒否されることを確認する。"""
        upload = SimpleUploadedFile("doc.pdf", b"%PDF", content_type="application/pdf")
        response = self.client.post(reverse("media_player:upload_media"), {"file": upload})
        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)
        self.assertEqual(response["HX-Reswap"], "none")
        self.assertContains(response, "Please upload an audio or video file", status_code=HTTPStatus.BAD_REQUEST)
        self.assertFalse(MediaFile.objects.exists())

    def test_upload_requires_file(self):
        response = self.client.post(reverse("media_player:upload_media"), {"title": "曲"})
        self.assertContains(response, "Please select a media file", status_code=HTTPStatus.BAD_REQUEST)

    def test_upload_requires_post(self):
        response = self.client.get(reverse("media_player:upload_media"))
        self.assertEqual(response.status_code, HTTPStatus.METHOD_NOT_ALLOWED)

    def test_delete_media(self):
        """レコードと保存済みファイルが削除されることを確認する。"""
        media_file = self.create_media()
        storage = media_file.file.storage
        name = media_file.file.name

        response = self.client.delete(reverse("media_player:delete_media", args=[media_file.pk]))

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertFalse(MediaFile.objects.exists())
        self.assertFalse(storage.exists(name))
        self.assertContains(response, "Media file deleted successfully")

    def test_delete_other_users_media(self):
        media_file = self.create_media(self.other_user)
        response = self.client.delete(reverse("media_player:delete_media", args=[media_file.pk]))
        self.assertEqual(response.status_code, HTTPStatus.NOT_FOUND)
        self.assertTrue(MediaFile.objects.filter(pk=media_file.pk).exists())


class MediaPlayerViewTests(MediaViewTestCase):
    def test_player_page(self):
        """保存済みの再生時間を初期状態に反映することを確認する。"""
        media_file = self.create_media(duration=125)
        response = self.client.get(reverse("media_player:media_player", args=[media_file.pk]))
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertTemplateUsed(response, "media_player/player.html")
        self.assertEqual(response.context["state"].duration, 125.0)
        self.assertFalse(response.context["state"].playing)
        self.assertContains(response, "2:05")
        self.assertContains(response, 'id="playback-state"')

    def test_player_for_other_users_media(self):
        media_file = self.create_media(self.other_user)
        response = self.client.get(reverse("media_player:media_player", args=[media_file.pk]))
        self.assertEqual(response.status_code, HTTPStatus.NOT_FOUND)

    def test_reopening_player_keeps_position_and_stops(self):
        """プレーヤーを開き直すと再生位置は保持し、停止状態に戻ることを確認する。"""
        media_file = self.create_media(duration=100)
        control_url = reverse("media_player:playback_control", args=[media_file.pk])
        self.client.get(reverse("media_player:media_player", args=[media_file.pk]))
        self.client.post(control_url, {"action": "seek", "value": "40"})
        self.client.post(control_url, {"action": "play"})

        response = self.client.get(reverse("media_player:media_player", args=[media_file.pk]))

        self.assertEqual(response.context["state"].position, 40.0)
        self.assertFalse(response.context["state"].playing)


class PlaybackControlViewTests(MediaViewTestCase):
    def setUp(self):
        super().setUp()
        self.media_file = self.create_media()
        self.url = reverse("media_player:playback_control", args=[self.media_file.pk])

    def test_metadata_loaded_records_duration(self):
        """メタデータ読み込みで再生時間が記録されることを確認する。"""
        response = self.client.post(self.url, {"action": "metadata_loaded", "value": "125"})
        self.assertEqual(response.status_code, HTTPStatus.OK)
        payload = response.json()
        self.assertEqual(payload["duration"], 125.0)
        self.assertEqual(payload["duration_label"], "2:05")
        self.media_file.refresh_from_db()
        self.assertEqual(self.media_file.duration, 125.0)

    def test_skip_and_seek(self):
        self.client.post(self.url, {"action": "metadata_loaded", "value": "100"})
        payload = self.client.post(self.url, {"action": "skip_forward"}).json()
        self.assertEqual(payload["position"], 10.0)
        payload = self.client.post(self.url, {"action": "seek", "value": "250"}).json()
        self.assertEqual(payload["position"], 100.0)
        self.assertEqual(payload["position_label"], "1:40")

    def test_state_is_kept_in_session(self):
        self.client.post(self.url, {"action": "volume", "value": "0.3"})
        state = self.client.session[PLAYBACK_SESSION_KEY][str(self.media_file.pk)]
        self.assertEqual(state["volume"], 0.3)

    def test_invalid_rate(self):
        """選択肢にない再生速度は400を返すことを確認する。"""
        response = self.client.post(self.url, {"action": "rate", "value": "3"})
        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)
        self.assertIn("error", response.json())

    def test_unknown_action(self):
        response = self.client.post(self.url, {"action": "rewind"})
        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)

    def test_requires_post(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, HTTPStatus.METHOD_NOT_ALLOWED)

    def test_other_users_media(self):
        other = self.create_media(self.other_user)
        response = self.client.post(
            reverse("media_player:playback_control", args=[other.pk]),
            {"action": "play"},
        )
        self.assertEqual(response.status_code, HTTPStatus.NOT_FOUND)

    def test_state_is_cleared_on_sign_out(self):
        """サインアウトで再生状態が破棄されることを確認する。"""
        self.client.post(self.url, {"action": "play"})
        self.client.post(reverse("account_logout"))
        self.assertNotIn(PLAYBACK_SESSION_KEY, self.client.session)
