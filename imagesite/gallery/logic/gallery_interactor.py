from typing import List, Optional

import structlog
from django.core.files import File
from django.db import transaction

from gallery.models import Album, Profile

logger = structlog.get_logger(__name__)


def edit_profile(profile_id: Optional[str] = None, **kwargs) -> Profile:
    """
    プロフィールを作成または更新する。profile_idが省略された場合は新規作成
    """
    if profile_id is None:
        profile = Profile()
    else:
        try:
            profile = Profile.objects.get(pk=profile_id)
        except Profile.DoesNotExist as dne:
            raise Exception("指定のプロフィールは存在しません") from dne

    for name in ("display_name", "self_introduction", "icon", "cover_image"):
        if kwargs.get(name) is not None:
            setattr(profile, name, kwargs[name])

    profile.full_clean()
    profile.save()

    logger.info("gallery.profile_updated", profile_id=profile.pk, created=profile_id is None)
    return profile


def create_album(title: str, cover: Optional[File] = None, images: Optional[List[File]] = None) -> Album:
    album = Album(title=title)
    if cover is not None:
        album.cover = cover

    album.attach(*(images or []))
    album.full_clean()
    album.save()

    logger.info("gallery.album_created", album_id=album.pk, image_count=len(images or []))
    return album


def add_album_images(album_id: str, images: List[File]) -> Album:
    try:
        album = Album.objects.get(pk=album_id)
    except Album.DoesNotExist as dne:
        raise Exception("指定のアルバムは存在しません") from dne

    with transaction.atomic():
        album.attach(*images)
        album.full_clean()
        album.save()

    return album
