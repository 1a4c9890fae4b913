"""Hook implementation for built-in blocks."""

from pdfblock.contracts import BlockDefinition
from pdfblock.core.config import PdfBlockSettings
from pdfblock.plugins.hookspecs import hookimpl


class PdfBlockBuiltinBlocks:
    """Hook implementer for built-in blocks."""

    @hookimpl
    def pdfblock_get_blocks(self, settings: PdfBlockSettings) -> list[BlockDefinition]:
        """Return the PDF viewer block wired to the configured media library."""
        from pdfblock.blocks.media import MediaLibrary
        from pdfblock.blocks.pdf_viewer import PdfViewerBlock

        media = MediaLibrary(settings.media.attachments)
        return [PdfViewerBlock(settings.plugin.asset_base_url, media).definition()]


# Singleton instance for registration
builtin_blocks = PdfBlockBuiltinBlocks()
