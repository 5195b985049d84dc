"""Domain exception hierarchy.

Adapters and the registry raise these; the gateway turns them into
:class:`CompletionResult` failures and the interface layer translates the
remaining ones into HTTP responses.
"""

from __future__ import annotations

from typing import Any

from proposal_gateway.domain.entities import FailureKind


class ProposalGatewayError(Exception):
    """Base exception for the entire application."""


# ── Configuration errors ────────────────────────────────────────────────────


class ConfigurationError(ProposalGatewayError):
    """Provider selection or credentials are invalid; never retried."""


class UnsupportedProviderError(ConfigurationError):
    """The requested provider identifier is not registered."""

    def __init__(self, identifier: str, known: tuple[str, ...] = ()) -> None:
        self.identifier = identifier
        message = f"Unsupported provider: {identifier!r}."
        if known:
            message += f" Supported: {', '.join(known)}"
        super().__init__(message)


class MissingCredentialError(ConfigurationError):
    """The provider is known but no API key was configured for it."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f"No API key configured for provider {identifier!r}. "
            f"Set the {identifier.upper()}_API_KEY environment variable."
        )


# ── Provider errors ─────────────────────────────────────────────────────────


class ProviderCallError(ProposalGatewayError):
    """Network failure, non-2xx status or malformed body from a vendor API."""

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        self.provider = provider
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"{provider}: {message}")


# ── Operation errors ────────────────────────────────────────────────────────


class OperationFailedError(ProposalGatewayError):
    """A gateway operation failed; carries only the caller-safe message."""

    def __init__(self, message: str, kind: FailureKind) -> None:
        self.kind = kind
        super().__init__(message)


# ── Upstream errors ─────────────────────────────────────────────────────────


class ProposalNotFoundError(ProposalGatewayError):
    """No proposal record exists for the requested identifier."""
