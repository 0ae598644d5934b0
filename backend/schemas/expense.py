from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import datetime

from models.expense import DecisionRecord, ExpenseClaim
from services.expense_ledger import PendingClaim


# Input schema for submitting a claim; amount is parsed by the ledger
class ExpenseCreate(BaseModel):
    amount: Any
    category: str
    description: str = ""
    date: str


# Input schema for approve/reject decisions
class ExpenseDecision(BaseModel):
    action: str
    comment: Optional[str] = None


# Output schema for one approval or rejection entry
class DecisionOut(BaseModel):
    user_id: str = Field(alias="userId")
    user_name: str = Field(alias="userName")
    timestamp: datetime
    comment: str = ""

    class Config:
        populate_by_name = True


# Output schema representing the full claim including both decision sequences
class ExpenseResponse(BaseModel):
    id: str
    user_id: str = Field(alias="userId")
    amount: float
    category: str
    description: str
    date: str
    status: str
    approvals: List[DecisionOut]
    rejections: List[DecisionOut]
    created_at: datetime = Field(alias="createdAt")

    class Config:
        populate_by_name = True


# Pending claim with the submitting user's details
class PendingExpenseResponse(ExpenseResponse):
    user_name: str = Field(alias="userName")
    user_email: str = Field(alias="userEmail")


def _decision_to_out(record: DecisionRecord) -> DecisionOut:
    return DecisionOut(
        user_id=record.user_id,
        user_name=record.user_name,
        timestamp=record.timestamp,
        comment=record.comment,
    )


def _claim_fields(claim: ExpenseClaim) -> dict:
    return dict(
        id=claim.id,
        user_id=claim.user_id,
        amount=float(claim.amount),
        category=claim.category,
        description=claim.description,
        date=claim.date,
        status=claim.status,
        approvals=[_decision_to_out(r) for r in claim.approvals],
        rejections=[_decision_to_out(r) for r in claim.rejections],
        created_at=claim.created_at,
    )


# Map an ExpenseClaim to its response schema
def expense_to_out(claim: ExpenseClaim) -> ExpenseResponse:
    return ExpenseResponse(**_claim_fields(claim))


def pending_to_out(pending: PendingClaim) -> PendingExpenseResponse:
    return PendingExpenseResponse(
        **_claim_fields(pending.claim),
        user_name=pending.user_name,
        user_email=pending.user_email,
    )
