"""Process-wide initialization.

Nothing in pdfblock does work at import time. The host integration calls
initialize() once after all plugins have loaded; it runs the environment
guard and registers blocks according to the outcome.
"""

from dataclasses import dataclass

from pdfblock.contracts import GuardResult, HostEnvironment
from pdfblock.core.config import PdfBlockSettings
from pdfblock.core.guard import EnvironmentGuard
from pdfblock.core.logging import get_logger
from pdfblock.core.notices import NoticeBoard
from pdfblock.plugins.manager import BlockManager

logger = get_logger(__name__)


@dataclass(frozen=True)
class PluginRuntime:
    """Everything the host needs after initialization."""

    settings: PdfBlockSettings
    guard: EnvironmentGuard
    result: GuardResult
    notices: NoticeBoard
    blocks: BlockManager

    @property
    def active(self) -> bool:
        """Whether the guard passed and deep functionality is loaded."""
        return self.result.passed


def build_guard(settings: PdfBlockSettings) -> EnvironmentGuard:
    return EnvironmentGuard(
        extension=settings.requirements.extension,
        runtime=settings.requirements.runtime,
        plugin_name=settings.plugin.name,
    )


def initialize(settings: PdfBlockSettings, host: HostEnvironment) -> PluginRuntime:
    """Run the guard once and register blocks.

    Blocks are registered only when the guard passes, unless
    settings.blocks.register_when_guard_fails asks for the legacy behavior
    of registering them regardless.

    Args:
        settings: Validated settings
        host: Values reported by the host

    Returns:
        PluginRuntime holding guard result, notices and block manager
    """
    guard = build_guard(settings)
    notices = NoticeBoard()
    result = guard.on_plugins_loaded(host, notices)

    blocks = BlockManager(settings)
    if result.passed or settings.blocks.register_when_guard_fails:
        blocks.register_builtin_blocks()
    else:
        logger.info("blocks_not_registered", reason=result.value)

    return PluginRuntime(
        settings=settings,
        guard=guard,
        result=result,
        notices=notices,
        blocks=blocks,
    )
