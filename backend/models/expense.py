from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import List

from models.ids import new_id

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# A single approve/reject decision recorded on a claim
@dataclass(frozen=True)
class DecisionRecord:
    user_id: str
    user_name: str
    comment: str = ""
    timestamp: datetime = field(default_factory=_utcnow)


# Represents an expense claim submitted by a user; mutated only by the approval engine
@dataclass
class ExpenseClaim:
    user_id: str
    amount: Decimal
    category: str
    description: str
    date: str
    status: str = STATUS_PENDING
    approvals: List[DecisionRecord] = field(default_factory=list)
    rejections: List[DecisionRecord] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_utcnow)
