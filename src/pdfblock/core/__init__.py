"""Core infrastructure: configuration, logging, versions, guard, notices."""

from pdfblock.core.config import (
    BlockSettings,
    MediaSettings,
    PdfBlockSettings,
    PluginSettings,
    RequirementSettings,
    load_settings,
)
from pdfblock.core.guard import EnvironmentGuard
from pdfblock.core.logging import (
    configure_logging,
    get_logger,
)
from pdfblock.core.notices import AdminNotice, NoticeBoard
from pdfblock.core.versions import (
    InvalidVersionError,
    compare_versions,
    version_at_least,
)

__all__ = [
    "AdminNotice",
    "BlockSettings",
    "EnvironmentGuard",
    "InvalidVersionError",
    "MediaSettings",
    "NoticeBoard",
    "PdfBlockSettings",
    "PluginSettings",
    "RequirementSettings",
    "compare_versions",
    "configure_logging",
    "get_logger",
    "load_settings",
    "version_at_least",
]
