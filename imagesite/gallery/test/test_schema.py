from django.test import TestCase

from gallery.models import Album, Profile
from imagesite.schema import schema
from validators.test.images import uploaded_image, uploaded_text

EDIT_PROFILE = """
mutation EditProfile($id: ID, $displayName: String, $icon: Upload, $coverImage: Upload) {
    editProfile(id: $id, displayName: $displayName, icon: $icon, coverImage: $coverImage) {
        ok
        profile { id displayName }
    }
}
"""

CREATE_ALBUM = """
mutation CreateAlbum($title: String!, $cover: Upload, $images: [Upload]) {
    createAlbum(title: $title, cover: $cover, images: $images) {
        ok
        album { id title images }
    }
}
"""

ADD_ALBUM_IMAGES = """
mutation AddAlbumImages($albumId: ID!, $images: [Upload]!) {
    addAlbumImages(albumId: $albumId, images: $images) {
        ok
        album { images }
    }
}
"""


class TestGallerySchema(TestCase):
    def test_edit_profile(self):
        result = schema.execute(
            EDIT_PROFILE,
            variable_values={
                "displayName": "alice",
                "icon": uploaded_image(100, 100, name="icon.png"),
                "coverImage": uploaded_image(300, 100, name="cover.png"),
            },
        )

        assert result.errors is None
        assert result.data["editProfile"]["ok"] is True
        assert result.data["editProfile"]["profile"]["displayName"] == "alice"
        assert Profile.objects.count() == 1

    def test_edit_profile_with_invalid_icon(self):
        result = schema.execute(
            EDIT_PROFILE,
            variable_values={
                "displayName": "alice",
                "icon": uploaded_text(),
                "coverImage": uploaded_image(300, 100, name="cover.png"),
            },
        )

        assert result.errors is not None
        assert "画像として認識できないファイルです" in result.errors[0].message
        assert Profile.objects.count() == 0

    def test_create_album(self):
        result = schema.execute(
            CREATE_ALBUM,
            variable_values={
                "title": "trip",
                "cover": uploaded_image(300, 400, name="cover.png"),
                "images": [uploaded_image(1280, 720, name="a.png"), uploaded_image(640, 480, name="b.png")],
            },
        )

        assert result.errors is None
        assert result.data["createAlbum"]["album"]["title"] == "trip"
        assert len(result.data["createAlbum"]["album"]["images"]) == 2

    def test_create_album_with_invalid_images(self):
        result = schema.execute(
            CREATE_ALBUM,
            variable_values={"title": "trip", "images": [uploaded_image(500, 500, name="a.png")]},
        )

        assert result.errors is not None
        assert "16:9, 4:3" in result.errors[0].message
        assert Album.objects.count() == 0

    def test_add_album_images(self):
        album = Album.objects.create(title="trip")

        result = schema.execute(
            ADD_ALBUM_IMAGES,
            variable_values={"albumId": str(album.pk), "images": [uploaded_image(1920, 1080, name="a.png")]},
        )

        assert result.errors is None
        assert len(result.data["addAlbumImages"]["album"]["images"]) == 1

    def test_query_albums(self):
        album = Album.objects.create(title="trip")

        result = schema.execute("query { allAlbums { title } album(id: %d) { title images } }" % album.pk)

        assert result.errors is None
        assert result.data["allAlbums"] == [{"title": "trip"}]
        assert result.data["album"] == {"title": "trip", "images": []}
