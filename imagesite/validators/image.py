from typing import Dict, Final, Iterator, List, Optional, Tuple

import structlog
from django.core.exceptions import ValidationError
from django.core.files import File
from django.core.validators import BaseValidator
from django.db import models
from django.utils.deconstruct import deconstructible

from .aspect_ratio import Reason, evaluate, parse_constraint
from .attachments import get_attachment_source
from .errors import AttachmentErrors
from .metadata import ImageMetadata, read_metadata

logger = structlog.get_logger(__name__)


DEFAULT_MESSAGES: Final[Dict[str, str]] = {
    Reason.METADATA_MISSING: "画像として認識できないファイルです",
    Reason.NOT_SQUARE: "正方形の画像を指定してください",
    Reason.NOT_PORTRAIT: "縦長の画像を指定してください",
    Reason.NOT_LANDSCAPE: "横長の画像を指定してください",
    Reason.NO_RATIO_MATCH: "画像の縦横比は%(aspect_ratio)sのいずれかにしてください",
    Reason.UNKNOWN_CONSTRAINT: "縦横比の指定が不正です(%(aspect_ratio)s)",
}


@deconstructible
class AspectRatioValidator(BaseValidator):
    """
    画像の縦横比を検証する。

    フィールドのvalidatorsに指定した場合は、そのフィールドの値を検証してValidationErrorを送出する。
    AttachmentValidationMixinのattachment_validatorsに指定した場合は、
    validate_eachでレコードの属性を検証してエラーを集める。

    with_にはsquare / portrait / landscape、または["16:9", "4:3"]のような比率のリストを指定する。
    messageを指定すると全ての理由に対してそのメッセージを使う。
    """
    message = None
    messages = DEFAULT_MESSAGES

    def __init__(self, with_=None, message: Optional[str] = None, attachments: Optional[str] = None):
        super().__init__(with_, message)
        self.constraint = parse_constraint(with_)
        self.attachments = get_attachment_source(attachments)

    def __call__(self, value):
        errors: List[ValidationError] = []
        keys = set()
        for key, error in self.check(value):
            if key in keys:
                continue

            keys.add(key)
            errors.append(error)

        if errors:
            raise ValidationError(errors)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented

        return super().__eq__(other) and self.attachments == other.attachments

    def validate_each(self, record: models.Model, attribute: str, errors: AttachmentErrors) -> None:
        for key, error in self.check(getattr(record, attribute), attribute=attribute):
            errors.add(attribute, key, error)

    def check(self, value, attribute: Optional[str] = None) -> Iterator[Tuple[str, ValidationError]]:
        """
        添付ファイルを1つずつ判定し、不合格だったファイルについて(重複判定用のキー, エラー)を返す
        """
        for file in self.attachments.files(value):
            metadata = self.clean(file)
            result = evaluate(metadata.width, metadata.height, self.constraint)
            if result.passed:
                continue

            logger.debug(
                "aspect_ratio.rejected",
                attribute=attribute,
                file=file.name,
                reason=result.reason.value,
                width=metadata.width,
                height=metadata.height,
            )
            yield self.error_key(result.reason), self.build_error(result.reason)

    def clean(self, x: File) -> ImageMetadata:
        return read_metadata(x)

    def error_key(self, reason: Reason) -> str:
        return self.message or reason.value

    def build_error(self, reason: Reason) -> ValidationError:
        return ValidationError(
            self.message or self.messages[reason],
            code=reason.value,
            params={"aspect_ratio": str(self.constraint)},
        )
