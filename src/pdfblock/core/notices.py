"""Administrative notices.

The host shows notices at the top of its admin pages. Plugins hand it a
callback; the host invokes every registered callback during page render
and concatenates the markup they return.
"""

from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import Any

from markupsafe import Markup

from pdfblock.contracts import NoticeLevel
from pdfblock.core.logging import get_logger
from pdfblock.core.templates import HtmlTemplate

logger = get_logger(__name__)

# Called with the current request query parameters, or None outside a request.
NoticeCallback = Callable[[MutableMapping[str, Any] | None], str]

_NOTICE_TEMPLATE = HtmlTemplate(
    '<div class="notice notice-{{ level }}{% if dismissible %} is-dismissible{% endif %}">'
    "<p>{{ message }}</p></div>"
)


@dataclass(frozen=True)
class AdminNotice:
    """A single notice. message is trusted markup (already escaped)."""

    message: Markup
    level: NoticeLevel = NoticeLevel.WARNING
    dismissible: bool = True

    def render(self) -> str:
        return _NOTICE_TEMPLATE.render(
            level=self.level.value,
            dismissible=self.dismissible,
            message=self.message,
        )


class NoticeBoard:
    """Collects notice callbacks registered during boot.

    Usage:
        board = NoticeBoard()
        board.add(lambda query_params: AdminNotice(Markup("Hello")).render())
        html = board.render_all(request.query_params)
    """

    def __init__(self) -> None:
        self._callbacks: list[NoticeCallback] = []

    def add(self, callback: NoticeCallback) -> None:
        """Register a notice callback."""
        self._callbacks.append(callback)
        logger.debug("notice_registered", count=len(self._callbacks))

    def render_all(self, query_params: MutableMapping[str, Any] | None = None) -> str:
        """Invoke every callback in registration order and join the markup.

        query_params is handed to each callback, which may modify it.
        """
        return "".join(callback(query_params) for callback in self._callbacks)

    def __len__(self) -> int:
        return len(self._callbacks)
