# backend/services/approval_engine.py
"""Role-gated approve/reject decisions on expense claims.

Any manager or admin may decide any claim: there is no check that the actor
manages the claim owner, nor that both belong to the same company. The first
decision sets the status and a later decision simply appends its record and
overwrites the status again. Callers depend on that exact behaviour.
"""
import logging
from typing import Optional

from exceptions import Forbidden, InvalidAction, NotFound
from models.expense import DecisionRecord, ExpenseClaim, STATUS_APPROVED, STATUS_REJECTED
from services.expense_ledger import ExpenseLedger
from services.identity_store import IdentityStore

logger = logging.getLogger(__name__)

ACTION_APPROVE = "approve"
ACTION_REJECT = "reject"


class ApprovalEngine:
    def __init__(self, identity: IdentityStore, ledger: ExpenseLedger):
        self.identity = identity
        self.ledger = ledger

    def decide(self, claim_id: str, actor_id: str, action: str, comment: Optional[str] = None) -> ExpenseClaim:
        if action not in (ACTION_APPROVE, ACTION_REJECT):
            raise InvalidAction(action)

        if self.ledger.find_by_id(claim_id) is None:
            raise NotFound("Expense", claim_id)

        actor = self.identity.find_by_id(actor_id)
        if actor is None or not actor.is_approver:
            logger.warning("Decision on expense %s refused for user %s", claim_id, actor_id)
            raise Forbidden("Only managers and admins can approve or reject expenses")

        record = DecisionRecord(user_id=actor.id, user_name=actor.name, comment=comment or "")

        def _apply(claim: ExpenseClaim):
            if action == ACTION_APPROVE:
                claim.approvals.append(record)
                # A single approval is final
                claim.status = STATUS_APPROVED
            else:
                claim.rejections.append(record)
                claim.status = STATUS_REJECTED

        claim = self.ledger.mutate(claim_id, _apply)
        logger.info("Expense %s %s by %s", claim_id, claim.status, actor.id)
        return claim

    def approve(self, claim_id: str, actor_id: str, comment: Optional[str] = None) -> ExpenseClaim:
        return self.decide(claim_id, actor_id, ACTION_APPROVE, comment)

    def reject(self, claim_id: str, actor_id: str, comment: Optional[str] = None) -> ExpenseClaim:
        return self.decide(claim_id, actor_id, ACTION_REJECT, comment)
