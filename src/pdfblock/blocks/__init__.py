"""Built-in blocks and the media resolution they depend on."""

from pdfblock.blocks.media import MediaLibrary, MediaResolver
from pdfblock.blocks.pdf_viewer import PdfViewerBlock, viewer_url

__all__ = [
    "MediaLibrary",
    "MediaResolver",
    "PdfViewerBlock",
    "viewer_url",
]
