# backend/services/expense_ledger.py
import copy
import logging
import math
import threading
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional

from exceptions import InvalidAmount, NotFound
from models.expense import ExpenseClaim, STATUS_PENDING
from services.identity_store import IdentityStore

logger = logging.getLogger(__name__)


# Pending claim joined with its owner's name and email
@dataclass(frozen=True)
class PendingClaim:
    claim: ExpenseClaim
    user_name: str
    user_email: str


def parse_amount(raw: Any) -> Decimal:
    # bool is an int subclass but never an amount
    if raw is None or isinstance(raw, bool):
        raise InvalidAmount(raw)
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmount(raw)
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount(raw)
    # Served as a JSON number, so it must survive float conversion
    as_float = float(amount)
    if not math.isfinite(as_float) or as_float <= 0:
        raise InvalidAmount(raw)
    return amount


class ExpenseLedger:
    """In-memory expense claims keyed by id, in submission order.

    Callers only ever get copies taken under the lock; the stored claims are
    changed through ``mutate`` alone.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._claims: Dict[str, ExpenseClaim] = {}

    def submit(self, user_id: str, amount, category: str, description: str, date: str) -> ExpenseClaim:
        claim = ExpenseClaim(
            user_id=user_id,
            amount=parse_amount(amount),
            category=category,
            description=description,
            date=date,
        )
        with self._lock:
            self._claims[claim.id] = claim
            snapshot = copy.deepcopy(claim)
        logger.info("Expense %s submitted by %s: %s %s", claim.id, user_id, claim.amount, category)
        return snapshot

    def list_by_user(self, user_id: str) -> List[ExpenseClaim]:
        with self._lock:
            return [copy.deepcopy(c) for c in self._claims.values() if c.user_id == user_id]

    def list_pending_for_company(self, company_id: str, identity: IdentityStore) -> List[PendingClaim]:
        owners = {u.id: u for u in identity.list_by_company(company_id)}
        with self._lock:
            pending = [
                copy.deepcopy(c) for c in self._claims.values()
                if c.status == STATUS_PENDING and c.user_id in owners
            ]
        return [
            PendingClaim(claim=c, user_name=owners[c.user_id].name, user_email=owners[c.user_id].email)
            for c in pending
        ]

    def find_by_id(self, claim_id: str) -> Optional[ExpenseClaim]:
        with self._lock:
            claim = self._claims.get(claim_id)
            return copy.deepcopy(claim) if claim is not None else None

    def mutate(self, claim_id: str, fn: Callable[[ExpenseClaim], None]) -> ExpenseClaim:
        """Apply ``fn`` to the stored claim in place and return a copy of the result."""
        with self._lock:
            claim = self._claims.get(claim_id)
            if claim is None:
                raise NotFound("Expense", claim_id)
            fn(claim)
            return copy.deepcopy(claim)

    def clear(self):
        with self._lock:
            self._claims.clear()
