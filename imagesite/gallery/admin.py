from django.contrib import admin

from .models import Album, AlbumImage, Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("display_name", "self_introduction", "icon", "cover_image")


class AlbumImageInline(admin.TabularInline):
    model = AlbumImage
    extra = 0


@admin.register(Album)
class AlbumAdmin(admin.ModelAdmin):
    list_display = ("title", "cover", "create_date")
    inlines = (AlbumImageInline, )
