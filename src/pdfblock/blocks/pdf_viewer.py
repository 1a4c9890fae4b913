"""PDF viewer block.

Declares the block schema (one PDF attachment, width and height) and
renders an <iframe> pointing at the bundled PDF.js viewer with the
resolved document URL as its ``file`` query parameter.

Every interpolated value goes through the autoescaping template, and the
document URL is percent-encoded before it becomes part of ``src``, so
attacker-controlled attribute values stay inside their quoted attribute.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlsplit

from pdfblock.blocks.media import MediaResolver
from pdfblock.contracts import (
    BlockDefinition,
    BlockRenderError,
    FieldDescriptor,
    FieldKind,
    FieldPlacement,
)
from pdfblock.core.logging import get_logger
from pdfblock.core.templates import HtmlTemplate, TemplateError

logger = get_logger(__name__)

BLOCK_NAME = "wcf/pdfjsblock"
BLOCK_TITLE = "PDF Viewer"

FILE_FIELD = "pdfjs_viewer_file"
WIDTH_FIELD = "pdf_width"
HEIGHT_FIELD = "pdf_height"

DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 900

# Location of the vendored PDF.js viewer, relative to the plugin directory
VIEWER_PATH = "assets/js/pdfjs/web/viewer.html"

_ALLOWED_SCHEMES = frozenset({"", "http", "https"})

FIELDS: tuple[FieldDescriptor, ...] = (
    FieldDescriptor(
        id=FILE_FIELD,
        kind=FieldKind.ATTACHMENT,
        title="PDF File",
        label="Choose PDF file",
        placement=FieldPlacement.INSPECTOR,
        attachment_type="application/pdf",
    ),
    FieldDescriptor(
        id=WIDTH_FIELD,
        kind=FieldKind.NUMBER,
        title="Width",
        label="Width",
        default=DEFAULT_WIDTH,
        placement=FieldPlacement.INSPECTOR,
    ),
    FieldDescriptor(
        id=HEIGHT_FIELD,
        kind=FieldKind.NUMBER,
        title="Height",
        label="Height",
        default=DEFAULT_HEIGHT,
        placement=FieldPlacement.INSPECTOR,
    ),
)

_IFRAME_TEMPLATE = HtmlTemplate(
    '<iframe width="{{ width }}" height="{{ height }}" src="{{ src }}"></iframe>'
)


def viewer_url(asset_base_url: str, document_url: str) -> str:
    """Viewer page URL with the document passed as the ``file`` parameter.

    Args:
        asset_base_url: Public URL of the plugin directory ("" for relative)
        document_url: Resolved attachment URL ("" when unresolved)

    Returns:
        Viewer URL, or "" when the base URL uses a scheme other than http(s)
    """
    if urlsplit(asset_base_url).scheme.lower() not in _ALLOWED_SCHEMES:
        return ""

    base = asset_base_url.rstrip("/")
    page = f"{base}/{VIEWER_PATH}" if base else VIEWER_PATH
    return f"{page}?file={quote(document_url, safe='')}"


class PdfViewerBlock:
    """The PDF viewer block: schema plus render callback.

    Example:
        block = PdfViewerBlock("https://site/plugins/pdfblock/", library)
        html = block.render({"pdfjs_viewer_file": 123, "pdf_width": 600, "pdf_height": 900})
    """

    name = BLOCK_NAME
    title = BLOCK_TITLE

    def __init__(self, asset_base_url: str, media: MediaResolver) -> None:
        self.asset_base_url = asset_base_url
        self.media = media

    def definition(self) -> BlockDefinition:
        """Declarative registration record for the host block framework."""
        return BlockDefinition(
            name=self.name,
            title=self.title,
            items=FIELDS,
            render_callback=self.render,
        )

    def render(self, attributes: Mapping[str, Any]) -> str:
        """Render the iframe for one block instance.

        Defaults are applied by the host before this is called; absent
        values render as empty attributes. Unresolvable attachments give an
        empty ``file`` parameter rather than an error.

        Args:
            attributes: Untrusted attribute bag keyed by field id

        Returns:
            A single <iframe> element

        Raises:
            BlockRenderError: If the template fails to render
        """
        document_url = self.media.resolve(attributes.get(FILE_FIELD)) or ""
        try:
            return _IFRAME_TEMPLATE.render(
                width=_attr(attributes.get(WIDTH_FIELD)),
                height=_attr(attributes.get(HEIGHT_FIELD)),
                src=viewer_url(self.asset_base_url, document_url),
            )
        except TemplateError as e:
            raise BlockRenderError(f"Failed to render {self.name}: {e}") from e


def _attr(value: Any) -> str:
    return "" if value is None else str(value)
