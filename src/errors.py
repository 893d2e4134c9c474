"""Exception hierarchy for package metadata generation.

Every failure is surfaced to the caller; an unsupported ecosystem is not an
error and never raises (see ``metadata.generator.generate_metadata``).
"""
from __future__ import annotations

from typing import Any, Optional


class PurlMetadataError(Exception):
    """Base class for all metadata generation failures."""


class InvalidIdentifierError(PurlMetadataError, ValueError):
    """The package identifier is missing fields required for resolution."""


class FetchFailureError(PurlMetadataError):
    """The registry could not be reached or answered with a non-2xx status.

    ``status_code`` and ``reason`` are set for HTTP failures and left as None
    for transport-level failures (DNS, refused connection, TLS).
    """

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.reason = reason


class MaterializationError(PurlMetadataError):
    """Producing the local manifest file failed.

    Wraps the underlying failure (an ``InvalidIdentifierError``,
    ``FetchFailureError`` or ``OSError``) and names the identifier it was
    raised for. The original exception is also chained as ``__cause__``.
    """

    def __init__(self, identifier: Any, cause: BaseException) -> None:
        super().__init__(f"Failed to create POM file for {identifier}: {cause}")
        self.identifier = identifier
        self.cause = cause
