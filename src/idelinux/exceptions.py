"""idelinux exception hierarchy.

All public exceptions inherit from IdeLinuxError, giving callers a single
base class to catch when they want to handle any idelinux-specific failure
without swallowing unrelated errors.

Most failures in this package are recovered where they happen and reported
as result values (an unknown version, a skipped patch, no installation).
Only the conditions below ever reach a caller as exceptions.
"""


class IdeLinuxError(Exception):
    """Base exception for all idelinux errors."""


class DiscoveryError(IdeLinuxError):
    """Raised when an editor family registry is misconfigured.

    Covers duplicate family keys and lookups of unregistered families.
    Filesystem probe failures are never raised as this error.
    """


class LaunchError(IdeLinuxError):
    """Raised when an editor process cannot be started.

    Wraps the underlying ``OSError`` from the process-spawn primitive.
    """
