"""All status codes, kinds and placements used across subsystem boundaries.

Using (str, Enum) allows direct comparison with the strings the host
framework reports and keeps values JSON-serializable for CLI output.
"""

from enum import Enum


class Component(str, Enum):
    """What a version requirement constrains."""

    HOST_EXTENSION = "host_extension"
    RUNTIME = "runtime"


class GuardResult(str, Enum):
    """Outcome of the environment guard for one boot.

    Exactly one value is produced per boot. Anything other than PASSED
    means deep plugin functionality stays unloaded and one notice is shown.
    """

    PASSED = "passed"
    MISSING_EXTENSION = "missing_extension"
    EXTENSION_VERSION_TOO_LOW = "extension_version_too_low"
    RUNTIME_VERSION_TOO_LOW = "runtime_version_too_low"

    @property
    def passed(self) -> bool:
        """Whether initialization may proceed."""
        return self is GuardResult.PASSED


class FieldKind(str, Enum):
    """Input kinds a block field can declare.

    Values match the host block framework's field type names.
    """

    ATTACHMENT = "attachment"
    NUMBER = "number"


class FieldPlacement(str, Enum):
    """Where the editor shows a field."""

    INSPECTOR = "inspector"
    CONTENT = "content"


class NoticeLevel(str, Enum):
    """Admin notice severity, rendered as the notice-<level> CSS class."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
