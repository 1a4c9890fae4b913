"""Tests for shared value records."""

import pytest

from pdfblock.contracts import (
    BlockDefinition,
    FieldDescriptor,
    FieldKind,
    FieldPlacement,
    HostEnvironment,
)


def _noop(attributes: object) -> str:
    return ""


class TestFieldDescriptor:
    """Field descriptors serialize in the host's item format."""

    def test_to_dict_number_field(self) -> None:
        item = FieldDescriptor(
            id="pdf_width",
            kind=FieldKind.NUMBER,
            title="Width",
            label="Width",
            default=600,
        )

        assert item.to_dict() == {
            "type": "number",
            "title": "Width",
            "id": "pdf_width",
            "label": "Width",
            "position": "inspector",
            "default": 600,
        }

    def test_to_dict_attachment_field_omits_missing_default(self) -> None:
        item = FieldDescriptor(
            id="pdfjs_viewer_file",
            kind=FieldKind.ATTACHMENT,
            title="PDF File",
            label="Choose PDF file",
            attachment_type="application/pdf",
        )

        data = item.to_dict()
        assert "default" not in data
        assert data["attachment_type"] == "application/pdf"
        assert data["type"] == "attachment"

    def test_frozen(self) -> None:
        item = FieldDescriptor(
            id="x", kind=FieldKind.NUMBER, title="X", label="X"
        )
        with pytest.raises(AttributeError):
            item.id = "y"  # type: ignore[misc]

    def test_default_placement_is_inspector(self) -> None:
        item = FieldDescriptor(id="x", kind=FieldKind.NUMBER, title="X", label="X")
        assert item.placement is FieldPlacement.INSPECTOR


class TestBlockDefinition:
    """Block definitions validate field ids and expose defaults."""

    def test_duplicate_field_ids_rejected(self) -> None:
        item = FieldDescriptor(id="dup", kind=FieldKind.NUMBER, title="A", label="A")

        with pytest.raises(ValueError, match="Duplicate field id 'dup'"):
            BlockDefinition(
                name="test/block",
                title="Test",
                items=(item, item),
                render_callback=_noop,
            )

    def test_defaults_only_include_declared_values(self) -> None:
        block = BlockDefinition(
            name="test/block",
            title="Test",
            items=(
                FieldDescriptor(id="a", kind=FieldKind.NUMBER, title="A", label="A", default=1),
                FieldDescriptor(id="b", kind=FieldKind.ATTACHMENT, title="B", label="B"),
            ),
            render_callback=_noop,
        )

        assert block.defaults() == {"a": 1}
        assert block.field_ids == ("a", "b")

    def test_equality_ignores_render_callback(self) -> None:
        items = (FieldDescriptor(id="a", kind=FieldKind.NUMBER, title="A", label="A"),)
        b1 = BlockDefinition(name="n", title="T", items=items, render_callback=_noop)
        b2 = BlockDefinition(name="n", title="T", items=items, render_callback=lambda a: "x")

        assert b1 == b2


class TestHostEnvironment:
    def test_frozen(self) -> None:
        host = HostEnvironment(
            extension_loaded=True, extension_version="3.0.0", runtime_version="8.1"
        )
        with pytest.raises(AttributeError):
            host.extension_loaded = False  # type: ignore[misc]
