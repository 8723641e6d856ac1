from typing import Dict, Sequence

from .errors import AttachmentErrors
from .image import AspectRatioValidator


class AttachmentValidationMixin:
    """
    attachment_validatorsに属性名とvalidatorのリストを指定すると、Model.clean()で検証する。
    複数のファイルを返す属性(プロパティなど)も検証できる

        class Album(AttachmentValidationMixin, models.Model):
            attachment_validators = {
                "images": [AspectRatioValidator(["16:9", "4:3"])],
            }
    """
    attachment_validators: Dict[str, Sequence[AspectRatioValidator]] = {}

    def clean(self):
        super().clean()

        errors = AttachmentErrors()
        for attribute, validators in self.attachment_validators.items():
            for validator in validators:
                validator.validate_each(self, attribute, errors)

        errors.raise_if_any()
