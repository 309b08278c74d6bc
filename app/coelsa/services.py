"""
COELSA service: webhook reconciliation and operator lookups.

Webhooks advance an existing Transaction, matched by its COELSA operation
id, through the django-fsm transitions on the model. They never create
transactions and never touch balances.

Webhook outcomes (always HTTP 200 at the view):
    applied:    {"message": "Transfer completed processed", "transactionId": id}
    no match:   {"message": "Transfer completed webhook received"}
    skipped:    {"message": "Transfer completed webhook received",
                 "transactionId": id, "processed": False}
    unknown:    {"message": "Unknown action: <action>", "processed": False}

"Skipped" covers redeliveries of an event already applied and events the
state machine rejects (e.g. transfer_completed after a reversal). Both are
logged and leave the row untouched.

Usage:
    from coelsa.services import CoelsaService

    result = CoelsaService().process_webhook("transfer_completed", {"coelsaId": "op-1"})
    result.data  # {"message": "Transfer completed processed", "transactionId": "..."}
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from django.db.models import Q
from django_fsm import TransitionNotAllowed

from core.exceptions import NotFoundError
from core.helpers import utc_now_iso, validate_uuid
from core.services import BaseService, ServiceResult
from transactions.models import Transaction
from transactions.states import TransactionStatus

from coelsa.webhooks import CoelsaWebhookAction, CoelsaWebhookPayload

MERCHANT_BANK_NAME = "Banco de la Nación Argentina"


@dataclass(frozen=True)
class WebhookRule:
    """
    How one webhook action moves a transaction.

    Attributes:
        verb: Word used in response messages ("completed", "failed", "reversed")
        target: Status the transition ends in
        apply: Calls the django-fsm transition on the transaction
        update_fields: Columns written after the transition
    """

    verb: str
    target: TransactionStatus
    apply: Callable[[Transaction, CoelsaWebhookPayload], None]
    update_fields: tuple[str, ...] = ("status", "updated_at")


WEBHOOK_RULES: dict[CoelsaWebhookAction, WebhookRule] = {
    CoelsaWebhookAction.TRANSFER_COMPLETED: WebhookRule(
        verb="completed",
        target=TransactionStatus.CONFIRMED,
        apply=lambda txn, payload: txn.confirm(),
    ),
    CoelsaWebhookAction.TRANSFER_FAILED: WebhookRule(
        verb="failed",
        target=TransactionStatus.ERROR,
        apply=lambda txn, payload: txn.fail(),
    ),
    CoelsaWebhookAction.TRANSFER_REVERSED: WebhookRule(
        verb="reversed",
        target=TransactionStatus.REVERSED,
        apply=lambda txn, payload: txn.reverse(reverse_coelsa_id=payload.reverse_id),
        update_fields=("status", "reverse_coelsa_id", "updated_at"),
    ),
}


class CoelsaService(BaseService):
    """
    Operations behind the /coelsa endpoints.

    Holds no per-request state; one instance can serve every request.
    """

    def __init__(self, rules: dict[CoelsaWebhookAction, WebhookRule] | None = None):
        self.rules = rules if rules is not None else WEBHOOK_RULES

    # ------------------------------------------------------------------
    # Webhooks
    # ------------------------------------------------------------------

    def process_webhook(self, action: str, data: Any) -> ServiceResult[dict[str, Any]]:
        """
        Route a webhook to the rule for its action.

        Args:
            action: Raw action path segment
            data: Parsed request body (anything; non-objects are treated as empty)

        Returns:
            ServiceResult whose data is the response body. Always a success:
            misses and rejections are reported in the body, not as errors.
        """
        logger = self.get_logger()
        logger.info(f"Received COELSA webhook: {action}", extra={"action": action})

        parsed = CoelsaWebhookAction.parse(action)
        rule = self.rules.get(parsed) if parsed is not None else None
        if rule is None:
            logger.warning(f"Unknown COELSA webhook action: {action}", extra={"action": action})
            return ServiceResult.success({"message": f"Unknown action: {action}", "processed": False})

        return ServiceResult.success(
            self._reconcile(rule, CoelsaWebhookPayload.from_data(data))
        )

    def _reconcile(self, rule: WebhookRule, payload: CoelsaWebhookPayload) -> dict[str, Any]:
        logger = self.get_logger()
        received = {"message": f"Transfer {rule.verb} webhook received"}

        if not payload.coelsa_id:
            logger.warning(
                f"Transfer {rule.verb} webhook without operation id",
                extra={"target_status": rule.target},
            )
            return received

        with self.atomic():
            txn = Transaction.all_objects.filter(coelsa_id=payload.coelsa_id).first()
            if txn is None:
                logger.warning(
                    f"No transaction for COELSA operation {payload.coelsa_id}",
                    extra={"coelsa_id": payload.coelsa_id},
                )
                return received

            skipped = {**received, "transactionId": str(txn.id), "processed": False}
            log_extra = {
                "transaction_id": str(txn.id),
                "coelsa_id": payload.coelsa_id,
                "current_status": txn.status,
                "target_status": rule.target,
            }

            if txn.status == rule.target:
                logger.info(
                    f"Duplicate transfer {rule.verb} webhook for transaction {txn.id}",
                    extra=log_extra,
                )
                return skipped

            try:
                rule.apply(txn, payload)
            except TransitionNotAllowed:
                state = "terminal state" if txn.is_terminal else "state"
                logger.warning(
                    f"Rejected transfer {rule.verb} webhook: transaction {txn.id} "
                    f"is in {state} {txn.status}",
                    extra={**log_extra, "terminal": txn.is_terminal},
                )
                return skipped

            txn.save(update_fields=list(rule.update_fields))

        logger.info(
            f"Transaction {txn.id} moved to {rule.target}",
            extra=log_extra,
        )
        return {"message": f"Transfer {rule.verb} processed", "transactionId": str(txn.id)}

    # ------------------------------------------------------------------
    # Operator lookups
    # ------------------------------------------------------------------

    def get_operation_status(self, operation_id: str) -> Transaction:
        """
        Fetch a transaction by COELSA operation id or by its own id.

        Raises:
            NotFoundError: Neither id matches
        """
        lookup = Q(coelsa_id=operation_id)
        if validate_uuid(operation_id):
            lookup |= Q(id=operation_id)

        txn = Transaction.all_objects.filter(lookup).first()
        if txn is None:
            raise NotFoundError(
                "Operation not found",
                error_code="OPERATION_NOT_FOUND",
                details={"operation_id": operation_id},
            )
        return txn

    def get_merchant_by_cuit(self, cuit: str) -> dict[str, Any]:
        """
        Merchant account details for a CUIT.

        The rail's merchant registry is not queried yet; the response is
        derived from the CUIT alone.
        """
        self.get_logger().info(f"Searching merchant by CUIT {cuit}", extra={"cuit": cuit})
        return {
            "cuit": cuit,
            "name": f"Merchant {cuit}",
            "cbu": f"0000000000000{cuit}00000",
            "alias": f"merchant.{cuit}",
            "bank": MERCHANT_BANK_NAME,
            "validated": True,
        }

    def proxy_request(self, api: str, data: Any = None) -> dict[str, Any]:
        self.get_logger().info(f"COELSA proxy request for {api}", extra={"api": api})
        return {"message": "Proxy request not implemented", "api": api}

    def echo(self, api: str, type_: str | None = None) -> dict[str, Any]:
        return {
            "api": api,
            "type": type_ or "default",
            "timestamp": utc_now_iso(),
            "message": "COELSA echo response",
        }
