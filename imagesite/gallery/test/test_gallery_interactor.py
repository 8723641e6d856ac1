import pytest
from django.core.exceptions import ValidationError
from django.test import TestCase

from gallery.logic import gallery_interactor as logic
from gallery.models import Album, AlbumImage, Profile
from validators.test.images import uploaded_image


class TestEditProfile(TestCase):
    def test_create_and_update(self):
        profile = logic.edit_profile(
            display_name="alice",
            icon=uploaded_image(200, 200, name="icon.png"),
            cover_image=uploaded_image(1200, 400, name="cover.png"),
        )

        updated = logic.edit_profile(str(profile.pk), self_introduction="hello")

        assert updated.pk == profile.pk
        assert Profile.objects.get(pk=profile.pk).self_introduction == "hello"

    def test_invalid_icon_is_not_saved(self):
        profile = logic.edit_profile(
            display_name="alice",
            icon=uploaded_image(200, 200, name="icon.png"),
            cover_image=uploaded_image(1200, 400, name="cover.png"),
        )

        with pytest.raises(ValidationError):
            logic.edit_profile(str(profile.pk), icon=uploaded_image(200, 100, name="wide.png"))

        assert Profile.objects.get(pk=profile.pk).icon.name == profile.icon.name

    def test_unknown_profile(self):
        with pytest.raises(Exception, match="指定のプロフィールは存在しません"):
            logic.edit_profile("999", display_name="bob")


class TestAlbums(TestCase):
    def test_create_album_with_images(self):
        album = logic.create_album(
            "trip",
            cover=uploaded_image(300, 400, name="cover.png"),
            images=[uploaded_image(1600, 900, name="a.png")],
        )

        assert AlbumImage.objects.filter(album=album).count() == 1

    def test_invalid_images_create_nothing(self):
        with pytest.raises(ValidationError):
            logic.create_album("trip", images=[uploaded_image(1600, 900), uploaded_image(900, 1600)])

        assert Album.objects.count() == 0
        assert AlbumImage.objects.count() == 0

    def test_add_album_images(self):
        album = logic.create_album("trip")

        logic.add_album_images(str(album.pk), [uploaded_image(800, 600, name="a.png")])

        with pytest.raises(ValidationError):
            logic.add_album_images(str(album.pk), [uploaded_image(600, 800, name="b.png")])

        assert AlbumImage.objects.filter(album=album).count() == 1

    def test_unknown_album(self):
        with pytest.raises(Exception, match="指定のアルバムは存在しません"):
            logic.add_album_images("999", [uploaded_image(800, 600)])
