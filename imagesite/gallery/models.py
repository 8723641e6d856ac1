from typing import Final, List

from django.core.files import File
from django.db import models, transaction

from validators.image import AspectRatioValidator
from validators.models import AttachmentValidationMixin


class Profile(models.Model):
    display_name = models.CharField(
        max_length=30,
        error_messages={
            "max_length": "表示名の文字数の上限は30です"
        }
    )
    self_introduction = models.CharField(max_length=256, blank=True)
    icon = models.ImageField(upload_to="icons/", validators=[AspectRatioValidator("square")])
    cover_image = models.ImageField(upload_to="covers/", validators=[AspectRatioValidator("landscape")])

    def __str__(self):
        return self.display_name


class Album(AttachmentValidationMixin, models.Model):
    IMAGE_RATIOS: Final[List[str]] = ["16:9", "4:3"]

    title = models.CharField(max_length=100)
    create_date = models.DateTimeField(auto_now_add=True)
    cover = models.ImageField(upload_to="albums/covers/", blank=True)

    attachment_validators = {
        "cover": [AspectRatioValidator("portrait")],
        "images": [
            AspectRatioValidator(
                IMAGE_RATIOS,
                message="アルバムの画像の縦横比は%(aspect_ratio)sのいずれかにしてください",
            )
        ],
    }

    def __str__(self):
        return self.title

    @property
    def pending_images(self) -> List[File]:
        """
        attachで追加され、まだ保存されていない画像
        """
        return self.__dict__.setdefault("_pending_images", [])

    @property
    def images(self) -> List[File]:
        stored = [image.image for image in self.images_set.all()] if self.pk else []
        return stored + self.pending_images

    def attach(self, *files: File) -> None:
        self.pending_images.extend(files)

    def save(self, *args, **kwargs):
        with transaction.atomic():
            super().save(*args, **kwargs)

            for file in self.pending_images:
                AlbumImage.objects.create(album=self, image=file)

        self.pending_images.clear()


class AlbumImage(models.Model):
    album = models.ForeignKey(Album, on_delete=models.CASCADE, related_name="images_set")
    image = models.ImageField(upload_to="albums/")
    upload_date = models.DateTimeField(auto_now_add=True)
