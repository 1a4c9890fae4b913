# src/pdfblock/plugins/hookspecs.py
"""pluggy hook specifications for block providers.

Providers implement these hooks to hand block definitions to the host
block framework. The block manager calls them during registration.

Usage (implementing a provider):
    from pdfblock.plugins.hookspecs import hookimpl

    class MyBlocks:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def pdfblock_get_blocks(self, settings):
            return [MyBlock(settings).definition()]

Note: @hookspec defines the hook interface (done here).
      @hookimpl marks provider implementations of those hooks.
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from pdfblock.contracts import BlockDefinition
    from pdfblock.core.config import PdfBlockSettings

# Project name for pluggy
PROJECT_NAME = "pdfblock"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for providers to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class PdfBlockSpec:
    """Hook specifications for block providers."""

    @hookspec
    def pdfblock_get_blocks(  # type: ignore[empty-body]
        self, settings: "PdfBlockSettings"
    ) -> list["BlockDefinition"]:
        """Return block definitions.

        Args:
            settings: Validated plugin settings

        Returns:
            List of BlockDefinition records
        """
