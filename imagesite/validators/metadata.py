from dataclasses import dataclass

import structlog
from django.core.files import File
from django.core.files.images import ImageFile, get_image_dimensions
from PIL import Image

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ImageMetadata:
    width: int
    height: int


MISSING = ImageMetadata(width=0, height=0)


def read_metadata(file: File) -> ImageMetadata:
    """
    ファイルの幅と高さを取得する。
    画像として解析できない場合や、ストレージ上にファイルが存在しない場合は0x0を返す
    """
    try:
        if isinstance(file, ImageFile):
            # ImageFieldFileは寸法をキャッシュしている
            width, height = file.width, file.height
        else:
            width, height = get_image_dimensions(file)
    except (OSError, ValueError, Image.DecompressionBombError):
        logger.warning("image_metadata.unreadable", file=getattr(file, "name", None), exc_info=True)
        return MISSING

    return ImageMetadata(width=int(width or 0), height=int(height or 0))
