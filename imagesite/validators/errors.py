from typing import Dict, List, Set, Tuple

from django.core.exceptions import ValidationError


class AttachmentErrors:
    """
    1回の検証で発生したエラーを属性ごとに集める。
    同じ属性に同じキー(理由コードまたはカスタムメッセージ)のエラーは1度しか追加しない
    """
    def __init__(self) -> None:
        self.__errors: Dict[str, List[ValidationError]] = {}
        self.__keys: Set[Tuple[str, str]] = set()

    def added(self, attribute: str, key: str) -> bool:
        return (attribute, key) in self.__keys

    def add(self, attribute: str, key: str, error: ValidationError) -> bool:
        if self.added(attribute, key):
            return False

        self.__keys.add((attribute, key))
        self.__errors.setdefault(attribute, []).append(error)
        return True

    def __bool__(self):
        return bool(self.__errors)

    def __getitem__(self, attribute: str) -> List[ValidationError]:
        return self.__errors.get(attribute, [])

    def raise_if_any(self) -> None:
        if self.__errors:
            raise ValidationError(self.__errors)
