# backend/routes/expenses.py
from typing import List

from fastapi import APIRouter, Depends, Request, status

from database import Database, get_db
from exceptions import ExpenseAppError
from models.users import User, APPROVER_ROLES
from schemas.expense import (
    ExpenseCreate, ExpenseDecision, ExpenseResponse, PendingExpenseResponse,
    expense_to_out, pending_to_out,
)
from utils.audit import client_ip, write_log
from utils.tokenJWT import get_current_user, role_required

router = APIRouter(prefix="/expenses", tags=["Expenses"])

approver_only = role_required(*APPROVER_ROLES, message="Only managers and admins can view approvals")


# Submit a new expense claim for the current user
@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def submit_expense(
    payload: ExpenseCreate,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    claim = db.ledger.submit(
        user_id=current_user.id,
        amount=payload.amount,
        category=payload.category,
        description=payload.description,
        date=payload.date,
    )
    write_log(db, user_id=current_user.id, action="EXPENSE_SUBMIT", resource="expenses",
              ip=client_ip(request), meta={"expense_id": claim.id, "amount": str(claim.amount)})
    return expense_to_out(claim)


# Retrieve all claims owned by the current user
@router.get("", response_model=List[ExpenseResponse])
def list_my_expenses(db: Database = Depends(get_db), current_user: User = Depends(get_current_user)):
    return [expense_to_out(c) for c in db.ledger.list_by_user(current_user.id)]


# Pending claims across the approver's company (Manager/Admin)
@router.get("/approvals", response_model=List[PendingExpenseResponse])
def list_pending_approvals(db: Database = Depends(get_db), current_user: User = Depends(approver_only)):
    pending = db.ledger.list_pending_for_company(current_user.company_id, db.identity)
    return [pending_to_out(p) for p in pending]


# Approve or reject a claim
@router.post("/{expense_id}/approve", response_model=ExpenseResponse)
def decide_expense(
    expense_id: str,
    payload: ExpenseDecision,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        claim = db.approvals.decide(expense_id, current_user.id, payload.action, payload.comment)
    except ExpenseAppError:
        write_log(db, user_id=current_user.id, action="EXPENSE_DECISION", resource="expenses", status="FAIL",
                  ip=client_ip(request), meta={"expense_id": expense_id, "action": payload.action})
        raise

    write_log(db, user_id=current_user.id, action="EXPENSE_DECISION", resource="expenses",
              ip=client_ip(request), meta={"expense_id": claim.id, "action": payload.action, "status": claim.status})
    return expense_to_out(claim)
