"""Shared contracts for cross-boundary data types.

Import pattern:
    from pdfblock.contracts import GuardResult, BlockDefinition
"""

from pdfblock.contracts.data import (
    BlockDefinition,
    FieldDescriptor,
    HostEnvironment,
    RenderCallback,
    VersionRequirement,
)
from pdfblock.contracts.enums import (
    Component,
    FieldKind,
    FieldPlacement,
    GuardResult,
    NoticeLevel,
)
from pdfblock.contracts.errors import BlockNotFoundError, BlockRenderError

__all__ = [
    # data
    "BlockDefinition",
    "FieldDescriptor",
    "HostEnvironment",
    "RenderCallback",
    "VersionRequirement",
    # errors
    "BlockNotFoundError",
    "BlockRenderError",
    # enums
    "Component",
    "FieldKind",
    "FieldPlacement",
    "GuardResult",
    "NoticeLevel",
]
