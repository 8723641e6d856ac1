import django.db.models.deletion
from django.db import migrations, models

import validators.image
import validators.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Album",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=100)),
                ("create_date", models.DateTimeField(auto_now_add=True)),
                ("cover", models.ImageField(blank=True, upload_to="albums/covers/")),
            ],
            bases=(validators.models.AttachmentValidationMixin, models.Model),
        ),
        migrations.CreateModel(
            name="Profile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "display_name",
                    models.CharField(error_messages={"max_length": "表示名の文字数の上限は30です"}, max_length=30),
                ),
                ("self_introduction", models.CharField(blank=True, max_length=256)),
                (
                    "icon",
                    models.ImageField(upload_to="icons/", validators=[validators.image.AspectRatioValidator("square")]),
                ),
                (
                    "cover_image",
                    models.ImageField(
                        upload_to="covers/", validators=[validators.image.AspectRatioValidator("landscape")]
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="AlbumImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("image", models.ImageField(upload_to="albums/")),
                ("upload_date", models.DateTimeField(auto_now_add=True)),
                (
                    "album",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name="images_set", to="gallery.album"
                    ),
                ),
            ],
        ),
    ]
