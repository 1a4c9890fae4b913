"""Media attachment resolution.

Attachment storage belongs to the host; the block only needs to turn an
attachment id into a public URL. Unknown ids resolve to None and the
viewer then simply fails to load the document client-side.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from pdfblock.core.logging import get_logger

logger = get_logger(__name__)

# Longer strings cannot be attachment ids (64-bit row ids have at most 20 digits)
MAX_ID_DIGITS = 20


@runtime_checkable
class MediaResolver(Protocol):
    """Anything that maps an attachment id to a URL."""

    def resolve(self, attachment_id: Any) -> str | None:
        ...


class MediaLibrary:
    """In-memory attachment id -> URL mapping.

    Ids may arrive as ints or numeric strings (editor attributes are
    serialized as JSON); both forms address the same attachment.
    """

    def __init__(self, attachments: Mapping[int, str] | None = None) -> None:
        self._attachments: dict[int, str] = dict(attachments or {})

    def add(self, attachment_id: int, url: str) -> None:
        self._attachments[int(attachment_id)] = url

    def resolve(self, attachment_id: Any) -> str | None:
        key = _coerce_id(attachment_id)
        if key is None:
            return None
        url = self._attachments.get(key)
        if url is None:
            logger.debug("attachment_unresolved", attachment_id=attachment_id)
        return url

    def __len__(self) -> int:
        return len(self._attachments)


def _coerce_id(attachment_id: Any) -> int | None:
    """Normalize an attachment id, None for anything that is not an id."""
    if attachment_id is None or isinstance(attachment_id, bool):
        return None
    if isinstance(attachment_id, int):
        return attachment_id
    if isinstance(attachment_id, str):
        return parse_attachment_id(attachment_id)
    return None


def parse_attachment_id(value: str) -> int | None:
    """Parse a decimal attachment id string, None when it is not one."""
    value = value.strip()
    if not value.isascii() or not value.isdigit() or len(value) > MAX_ID_DIGITS:
        return None
    return int(value)
