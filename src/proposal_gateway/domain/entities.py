"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class RequestShape(str, Enum):
    """Request-shape family a vendor API speaks."""

    CHAT = "chat"
    SINGLE_PROMPT = "single_prompt"


class FailureKind(str, Enum):
    """Why a completion did not produce text."""

    CONFIGURATION = "configuration_error"
    PROVIDER_CALL = "provider_call_error"


class ProposalStatus(str, Enum):
    """Lifecycle state of a stored proposal."""

    DRAFT = "draft"


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Immutable connection details for one vendor, built at process start."""

    identifier: str
    endpoint: str
    model: str
    shape: RequestShape
    api_key: str | None = None

    def __repr__(self) -> str:
        key = "***" if self.api_key else None
        return (
            f"ProviderConfig(identifier={self.identifier!r}, endpoint={self.endpoint!r}, "
            f"model={self.model!r}, shape={self.shape.value!r}, api_key={key!r})"
        )


@dataclass(frozen=True, slots=True)
class CompletionRequest:
    """Provider-agnostic completion request.

    ``provider=None`` selects the gateway's configured default.  The user
    prompt is empty only for document generation, where the system prompt
    carries all of the content.
    """

    user_prompt: str
    system_prompt: str | None = None
    provider: str | None = None


@dataclass(frozen=True, slots=True)
class CompletionResult:
    """Outcome of a gateway call: either ``text`` or a failure ``kind``."""

    text: str | None = None
    kind: FailureKind | None = None
    provider_message: str | None = None

    @classmethod
    def success(cls, text: str) -> CompletionResult:
        return cls(text=text)

    @classmethod
    def failure(
        cls, kind: FailureKind, provider_message: str | None = None
    ) -> CompletionResult:
        return cls(kind=kind, provider_message=provider_message)

    @property
    def ok(self) -> bool:
        return self.kind is None


@dataclass(frozen=True, slots=True)
class ProposalRecord:
    """A stored business proposal."""

    id: int
    title: str
    original_text: str
    enhanced_text: str
    created_at: datetime
    status: ProposalStatus = ProposalStatus.DRAFT
