from django.core.files.base import ContentFile
from django.test import SimpleTestCase

from gallery.models import Profile
from validators.metadata import MISSING, ImageMetadata, read_metadata
from validators.test.images import bomb_image, image_bytes, uploaded_image, uploaded_text


class TestReadMetadata(SimpleTestCase):
    def test_uploaded_image(self):
        assert read_metadata(uploaded_image(640, 480)) == ImageMetadata(width=640, height=480)

    def test_jpeg_content(self):
        file = ContentFile(image_bytes(300, 500, format="JPEG"), name="photo.jpg")

        assert read_metadata(file) == ImageMetadata(width=300, height=500)

    def test_reading_keeps_file_position(self):
        upload = uploaded_image(10, 20)
        upload.seek(5)

        read_metadata(upload)

        assert upload.tell() == 5

    def test_image_field_file_before_save(self):
        profile = Profile(icon=uploaded_image(128, 128))

        assert read_metadata(profile.icon) == ImageMetadata(width=128, height=128)

    def test_not_an_image(self):
        assert read_metadata(uploaded_text()) == MISSING

    def test_stored_file_missing_from_storage(self):
        profile = Profile(icon="icons/does-not-exist.png")

        assert read_metadata(profile.icon) == MISSING

    def test_image_claiming_huge_size(self):
        assert read_metadata(bomb_image()) == MISSING

    def test_image_field_file_claiming_huge_size(self):
        profile = Profile(icon=bomb_image())

        assert read_metadata(profile.icon) == MISSING
