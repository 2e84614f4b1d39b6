"""Error hierarchy for the API catalog provider.

Errors carry enough context to explain a failed run in one log line.
Check the .retryable attribute to decide whether a scheduler may retry.
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Base error for the API catalog provider.

    All provider-specific errors inherit from this.
    """

    retryable: bool = False


# =============================================================================
# Mirror Errors
# =============================================================================


class MirrorError(CatalogError):
    """Cloning a source tree failed.

    Attributes:
        remote_url: Repository that was being cloned
        local_root: Target directory of the clone
        reason: Human-readable error description (usually git's stderr)

    Retry: Retryable - network and remote hiccups are the common cause.
    The target directory is left in place, so remove it before retrying.
    """

    retryable = True

    def __init__(self, remote_url: str, local_root: Path, reason: str) -> None:
        self.remote_url = remote_url
        self.local_root = local_root
        self.reason = reason
        super().__init__(f"Failed to clone {remote_url} into {local_root}: {reason}")


# =============================================================================
# Descriptor Errors
# =============================================================================


class DescriptorError(CatalogError):
    """A file declares the service descriptor type but cannot be used.

    Attributes:
        path: The descriptor file
        reason: Human-readable error description

    Retry: Never retryable - fix the descriptor upstream. Discovery skips
    the directory and carries on.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid service descriptor {path}: {reason}")


# =============================================================================
# Provider Lifecycle Errors
# =============================================================================


class ProviderNotConnectedError(CatalogError):
    """run() was called before connect().

    Attributes:
        provider_name: Name of the provider

    Retry: Never retryable - connect the provider first.
    """

    def __init__(self, provider_name: str) -> None:
        self.provider_name = provider_name
        super().__init__(f"Provider {provider_name} is not connected")


class ProviderBusyError(CatalogError):
    """run() was called while another run is in progress.

    Attributes:
        provider_name: Name of the provider

    Retry: Retryable once the running sync finishes.
    """

    retryable = True

    def __init__(self, provider_name: str) -> None:
        self.provider_name = provider_name
        super().__init__(f"Provider {provider_name} is already running")
