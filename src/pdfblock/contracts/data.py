"""Value records shared by the guard, the block renderer and the host layer.

All records are frozen: requirements and block schemas are defined once at
startup and never mutated afterwards.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pdfblock.contracts.enums import Component, FieldKind, FieldPlacement

RenderCallback = Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True)
class VersionRequirement:
    """Minimum version a component must report."""

    component: Component
    minimum_version: str
    display_name: str


@dataclass(frozen=True)
class HostEnvironment:
    """What the host reports about itself once all plugins have loaded.

    extension_version is None when the host extension is absent or does
    not expose its version.
    """

    extension_loaded: bool
    extension_version: str | None
    runtime_version: str


@dataclass(frozen=True)
class FieldDescriptor:
    """One editor input of a block.

    The id is used verbatim as the key in the attribute bag passed to the
    render callback.
    """

    id: str
    kind: FieldKind
    title: str
    label: str
    default: Any = None
    placement: FieldPlacement = FieldPlacement.INSPECTOR
    attachment_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the host framework's item format."""
        item: dict[str, Any] = {
            "type": self.kind.value,
            "title": self.title,
            "id": self.id,
            "label": self.label,
            "position": self.placement.value,
        }
        if self.default is not None:
            item["default"] = self.default
        if self.attachment_type is not None:
            item["attachment_type"] = self.attachment_type
        return item


@dataclass(frozen=True)
class BlockDefinition:
    """Declarative block registration: name, title, fields and renderer.

    Raises:
        ValueError: If two fields share an id
    """

    name: str
    title: str
    items: tuple[FieldDescriptor, ...]
    render_callback: RenderCallback = field(compare=False)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for item in self.items:
            if item.id in seen:
                raise ValueError(
                    f"Duplicate field id '{item.id}' in block '{self.name}'"
                )
            seen.add(item.id)

    @property
    def field_ids(self) -> tuple[str, ...]:
        return tuple(item.id for item in self.items)

    def defaults(self) -> dict[str, Any]:
        """Declared default values, keyed by field id."""
        return {
            item.id: item.default for item in self.items if item.default is not None
        }
