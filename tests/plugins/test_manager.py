"""Tests for the block manager."""

from collections.abc import Mapping
from typing import Any

import pytest

from pdfblock.contracts import (
    BlockDefinition,
    BlockNotFoundError,
    FieldDescriptor,
    FieldKind,
)
from pdfblock.core.config import PdfBlockSettings
from pdfblock.plugins.hookspecs import hookimpl
from pdfblock.plugins.manager import BlockManager


def _echo_block(name: str = "test/echo") -> BlockDefinition:
    def render(attributes: Mapping[str, Any]) -> str:
        return repr(sorted(attributes.items()))

    return BlockDefinition(
        name=name,
        title="Echo",
        items=(
            FieldDescriptor(id="size", kind=FieldKind.NUMBER, title="Size", label="Size", default=10),
            FieldDescriptor(id="file", kind=FieldKind.ATTACHMENT, title="File", label="File"),
        ),
        render_callback=render,
    )


class EchoBlocks:
    @hookimpl
    def pdfblock_get_blocks(self, settings: PdfBlockSettings) -> list[BlockDefinition]:
        return [_echo_block()]


class TestBlockManager:
    """Block registration and lookup."""

    def test_create_manager(self) -> None:
        manager = BlockManager(PdfBlockSettings())
        assert len(manager) == 0
        assert manager.get_blocks() == []

    def test_register_provider(self) -> None:
        manager = BlockManager(PdfBlockSettings())
        manager.register(EchoBlocks())

        blocks = manager.get_blocks()
        assert len(blocks) == 1
        assert blocks[0].name == "test/echo"
        assert "test/echo" in manager

    def test_get_block_by_name(self) -> None:
        manager = BlockManager(PdfBlockSettings())
        manager.register(EchoBlocks())

        assert manager.get_block_by_name("test/echo") is not None
        assert manager.get_block_by_name("nonexistent") is None

    def test_duplicate_block_name_raises(self) -> None:
        class MoreEchoBlocks:
            @hookimpl
            def pdfblock_get_blocks(self, settings: PdfBlockSettings) -> list[BlockDefinition]:
                return [_echo_block()]

        manager = BlockManager(PdfBlockSettings())
        manager.register(EchoBlocks())

        with pytest.raises(ValueError, match="Duplicate block name: 'test/echo'"):
            manager.register(MoreEchoBlocks())

        # The rejected provider leaves the registry unchanged
        assert len(manager) == 1

    def test_register_builtin_blocks(self) -> None:
        manager = BlockManager(PdfBlockSettings())
        manager.register_builtin_blocks()

        assert "wcf/pdfjsblock" in manager


class TestRenderBlock:
    """Rendering through the manager applies declared defaults."""

    def test_defaults_fill_absent_fields(self) -> None:
        manager = BlockManager(PdfBlockSettings())
        manager.register(EchoBlocks())

        assert manager.render_block("test/echo", {}) == "[('size', 10)]"

    def test_supplied_values_win(self) -> None:
        manager = BlockManager(PdfBlockSettings())
        manager.register(EchoBlocks())

        html = manager.render_block("test/echo", {"size": 3, "file": 7})

        assert html == "[('file', 7), ('size', 3)]"

    def test_unknown_block_raises(self) -> None:
        manager = BlockManager(PdfBlockSettings())

        with pytest.raises(BlockNotFoundError, match="Block not registered: missing"):
            manager.render_block("missing", {})

    def test_pdf_block_defaults(self) -> None:
        settings = PdfBlockSettings(media={"attachments": {123: "https://site/files/doc.pdf"}})
        manager = BlockManager(settings)
        manager.register_builtin_blocks()

        html = manager.render_block("wcf/pdfjsblock", {"pdfjs_viewer_file": 123})

        assert 'width="600"' in html
        assert 'height="900"' in html
        assert "file=https%3A%2F%2Fsite%2Ffiles%2Fdoc.pdf" in html
