from typing import Dict, Final, List, Optional, Type

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.files import File


DEFAULT_SOURCE: Final[str] = "changed"


def _as_list(value) -> List[File]:
    if value is None:
        return []

    if isinstance(value, File):
        return [value] if value else []

    return [file for file in value if file]


class AttachmentSource:
    """
    属性の値から検証対象のファイルを列挙する
    """
    name = ""

    def files(self, value) -> List[File]:
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class ChangedAttachments(AttachmentSource):
    """
    今回の保存で新たに添付されたファイルだけを返す。
    ストレージに保存済みのFieldFileは_committedがTrueになっている
    """
    name = "changed"

    def files(self, value) -> List[File]:
        return [file for file in _as_list(value) if not getattr(file, "_committed", False)]


class AttachedAttachments(AttachmentSource):
    """
    保存済みかどうかに関わらず、添付されている全てのファイルを返す
    """
    name = "all"

    def files(self, value) -> List[File]:
        return _as_list(value)


SOURCES: Final[Dict[str, Type[AttachmentSource]]] = {
    ChangedAttachments.name: ChangedAttachments,
    AttachedAttachments.name: AttachedAttachments,
}


def get_attachment_source(name: Optional[str] = None) -> AttachmentSource:
    """
    nameが省略された場合はsettings.IMAGE_VALIDATION["ATTACHMENTS"]に従う
    """
    if name is None:
        name = getattr(settings, "IMAGE_VALIDATION", {}).get("ATTACHMENTS", DEFAULT_SOURCE)

    try:
        return SOURCES[name]()
    except KeyError:
        raise ImproperlyConfigured(
            f"attachmentsには{', '.join(SOURCES)}のいずれかを指定してください(指定値: {name})"
        ) from None
