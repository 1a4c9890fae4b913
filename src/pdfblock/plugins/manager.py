"""Block manager: registration, lookup and rendering.

Stands in for the host block framework. Uses pluggy for hook-based
registration; fills declared field defaults before invoking a block's
render callback, the way the host does.
"""

from collections.abc import Mapping
from typing import Any

import pluggy

from pdfblock.contracts import BlockDefinition, BlockNotFoundError
from pdfblock.core.config import PdfBlockSettings
from pdfblock.core.logging import get_logger
from pdfblock.plugins.hookspecs import PROJECT_NAME, PdfBlockSpec

logger = get_logger(__name__)


class BlockManager:
    """Manages block provider registration and block lookup.

    Usage:
        manager = BlockManager(settings)
        manager.register_builtin_blocks()

        html = manager.render_block("wcf/pdfjsblock", {"pdfjs_viewer_file": 123})
    """

    def __init__(self, settings: PdfBlockSettings) -> None:
        self._settings = settings
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(PdfBlockSpec)

        # Cache - map block name to definition for duplicate detection
        self._blocks: dict[str, BlockDefinition] = {}

    def register_builtin_blocks(self) -> None:
        """Register the built-in block provider.

        Call this once at startup to make built-in blocks available.
        """
        from pdfblock.plugins.hookimpl import builtin_blocks

        self.register(builtin_blocks)

    def register(self, provider: Any) -> None:
        """Register a block provider.

        Args:
            provider: Object implementing pdfblock_get_blocks

        Raises:
            ValueError: If the provider supplies a block name already registered
        """
        self._pm.register(provider)
        try:
            self._refresh_cache()
        except ValueError:
            self._pm.unregister(provider)
            raise

    def _refresh_cache(self) -> None:
        """Rebuild the block cache from hooks.

        Raises:
            ValueError: If two blocks share a name
        """
        new_blocks: dict[str, BlockDefinition] = {}

        for blocks in self._pm.hook.pdfblock_get_blocks(settings=self._settings):
            for block in blocks:
                if block.name in new_blocks:
                    raise ValueError(f"Duplicate block name: '{block.name}'")
                new_blocks[block.name] = block

        added = sorted(set(new_blocks) - set(self._blocks))
        self._blocks = new_blocks
        for name in added:
            logger.info("block_registered", block=name)

    # === Getters ===

    def get_blocks(self) -> list[BlockDefinition]:
        """Get all registered blocks."""
        return list(self._blocks.values())

    def get_block_by_name(self, name: str) -> BlockDefinition | None:
        """Get block definition by name."""
        return self._blocks.get(name)

    # === Rendering ===

    def render_block(self, name: str, attributes: Mapping[str, Any]) -> str:
        """Render one block instance.

        Declared defaults fill fields absent from attributes; supplied
        values (including None) are passed through untouched.

        Raises:
            BlockNotFoundError: If no block with this name is registered
        """
        block = self._blocks.get(name)
        if block is None:
            raise BlockNotFoundError(name)

        resolved = {**block.defaults(), **attributes}
        return block.render_callback(resolved)

    def __contains__(self, name: object) -> bool:
        return name in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)
