"""Environment guard.

Validates, once per boot, that the host page-builder extension is loaded
and recent enough and that the runtime is recent enough. The first failing
check schedules one admin notice and stops initialization; the guard never
raises, since the host must keep serving other plugins and pages.
"""

from collections.abc import MutableMapping
from typing import Any

from markupsafe import Markup, escape

from pdfblock.contracts import GuardResult, HostEnvironment, VersionRequirement
from pdfblock.core.logging import get_logger
from pdfblock.core.notices import AdminNotice, NoticeBoard
from pdfblock.core.versions import InvalidVersionError, version_at_least

logger = get_logger(__name__)

# Query flag the host sets right after activation; shown notices clear it
# so the host does not also print its "Plugin activated" message.
ACTIVATE_QUERY_FLAG = "activate"


class EnvironmentGuard:
    """Runs the dependency checks and owns the resulting notice.

    Example:
        guard = EnvironmentGuard(extension_req, runtime_req, "PDF viewer")
        result = guard.on_plugins_loaded(host, notices)
        if result.passed:
            ...  # load deep functionality
    """

    def __init__(
        self,
        extension: VersionRequirement,
        runtime: VersionRequirement,
        plugin_name: str,
    ) -> None:
        self.extension = extension
        self.runtime = runtime
        self.plugin_name = plugin_name
        self._result: GuardResult | None = None

    @property
    def result(self) -> GuardResult | None:
        """Result of the boot-time evaluation, None before it ran."""
        return self._result

    def evaluate(self, host: HostEnvironment) -> GuardResult:
        """Run the checks in order, stopping at the first failure.

        Args:
            host: Values reported by the host after all plugins loaded

        Returns:
            GuardResult for this environment
        """
        if not host.extension_loaded:
            return GuardResult.MISSING_EXTENSION

        if not self._meets(host.extension_version, self.extension):
            return GuardResult.EXTENSION_VERSION_TOO_LOW

        if not self._meets(host.runtime_version, self.runtime):
            return GuardResult.RUNTIME_VERSION_TOO_LOW

        return GuardResult.PASSED

    def on_plugins_loaded(
        self, host: HostEnvironment, notices: NoticeBoard
    ) -> GuardResult:
        """Lifecycle callback fired once after the host loaded all plugins.

        Evaluates the environment and, on failure, registers exactly one
        notice callback. Repeat calls return the first result unchanged and
        register nothing.
        """
        if self._result is not None:
            return self._result

        result = self.evaluate(host)
        self._result = result

        if result.passed:
            logger.info("environment_guard_passed", plugin=self.plugin_name)
            return result

        logger.warning(
            "environment_guard_failed",
            plugin=self.plugin_name,
            result=result.value,
            extension_version=host.extension_version,
            runtime_version=host.runtime_version,
        )
        notices.add(lambda query_params: self.render_notice(result, query_params))
        return result

    def render_notice(
        self,
        result: GuardResult,
        query_params: MutableMapping[str, Any] | None = None,
    ) -> str:
        """Markup for the notice describing a failed result.

        Args:
            result: Failed guard result (PASSED renders nothing)
            query_params: Current request query parameters; the activation
                flag is removed from them when present

        Returns:
            Notice HTML, or "" for PASSED
        """
        if result.passed:
            return ""

        if query_params is not None:
            query_params.pop(ACTIVATE_QUERY_FLAG, None)

        return AdminNotice(message=self.notice_message(result)).render()

    def notice_message(self, result: GuardResult) -> Markup:
        """Escaped notice text with dependency names in <strong> tags."""
        plugin = _strong(self.plugin_name)

        if result is GuardResult.MISSING_EXTENSION:
            return Markup('"{}" requires "{}" to be installed and activated.').format(
                plugin, _strong(self.extension.display_name)
            )

        if result is GuardResult.EXTENSION_VERSION_TOO_LOW:
            requirement = self.extension
        elif result is GuardResult.RUNTIME_VERSION_TOO_LOW:
            requirement = self.runtime
        else:
            raise ValueError(f"No notice for guard result {result!r}")

        return Markup('"{}" requires "{}" version {} or greater.').format(
            plugin,
            _strong(requirement.display_name),
            requirement.minimum_version,
        )

    @staticmethod
    def _meets(version: str | None, requirement: VersionRequirement) -> bool:
        if version is None:
            return False
        try:
            return version_at_least(version, requirement.minimum_version)
        except InvalidVersionError:
            logger.warning(
                "unparseable_version",
                component=requirement.component.value,
                version=version,
            )
            return False


def _strong(text: str) -> Markup:
    return Markup("<strong>{}</strong>").format(escape(text))
