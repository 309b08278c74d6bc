"""
Webhook vocabulary for the COELSA rail.

Defines:
    CoelsaWebhookAction: The closed set of actions COELSA reports
    CoelsaWebhookPayload: A webhook body normalised once at the boundary
    CoelsaWebhookConfig: Signature verification settings

COELSA sends the operation identifier as either "coelsaId" or
"operationId" depending on the event source. Both are folded into
CoelsaWebhookPayload.coelsa_id here so handlers never look at raw keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from django.conf import settings


class CoelsaWebhookAction(str, Enum):
    """Actions accepted on POST /coelsa/webhook/{action}."""

    TRANSFER_COMPLETED = "transfer_completed"
    TRANSFER_FAILED = "transfer_failed"
    TRANSFER_REVERSED = "transfer_reversed"

    @classmethod
    def parse(cls, value: str) -> CoelsaWebhookAction | None:
        """Return the matching action, or None for anything unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


def _identifier(value: Any) -> str | None:
    if not value:
        return None
    return str(value)


@dataclass(frozen=True)
class CoelsaWebhookPayload:
    """
    Normalised webhook body.

    Attributes:
        coelsa_id: Operation identifier ("coelsaId", falling back to "operationId")
        reverse_id: Identifier of the reversal operation ("reverseId")
    """

    coelsa_id: str | None = None
    reverse_id: str | None = None

    @classmethod
    def from_data(cls, data: Any) -> CoelsaWebhookPayload:
        """
        Build a payload from a parsed request body.

        Non-object bodies (lists, scalars, None) give an empty payload.
        """
        if not isinstance(data, Mapping):
            return cls()

        return cls(
            coelsa_id=_identifier(data.get("coelsaId")) or _identifier(data.get("operationId")),
            reverse_id=_identifier(data.get("reverseId")),
        )


@dataclass(frozen=True)
class CoelsaWebhookConfig:
    """
    Webhook signature settings.

    Attributes:
        secret: Shared HMAC secret. Empty disables verification.
        signature_header: Request header carrying the signature
        algorithm: "sha256" or "sha512"
    """

    secret: str = ""
    signature_header: str = "X-Signature"
    algorithm: str = "sha256"

    @property
    def verifies_signatures(self) -> bool:
        return bool(self.secret)

    @classmethod
    def from_settings(cls) -> CoelsaWebhookConfig:
        return cls(
            secret=getattr(settings, "COELSA_WEBHOOK_SECRET", ""),
            signature_header=getattr(settings, "COELSA_WEBHOOK_SIGNATURE_HEADER", "X-Signature"),
            algorithm=getattr(settings, "COELSA_WEBHOOK_SIGNATURE_ALGORITHM", "sha256"),
        )
