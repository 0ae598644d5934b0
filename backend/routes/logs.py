# backend/routes/logs.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional, Any
from datetime import datetime
from pydantic import BaseModel

from database import Database, get_db
from models.users import User, ROLE_ADMIN
from utils.tokenJWT import role_required

router = APIRouter(prefix="/logs", tags=["Logs"])

admin_only = role_required(ROLE_ADMIN, message="Only admin can view logs")

# --- SCHEMAS ---
class LogResponse(BaseModel):
    id: str
    user_id: Optional[str] = None
    action: str
    resource: str
    status: str
    ip: Optional[str] = None
    ts: datetime
    meta: Optional[Any] = None

    class Config:
        from_attributes = True

class LogPage(BaseModel):
    items: List[LogResponse]
    total: int
    page: int
    page_size: int

# --- ENDPOINT ---
@router.get("", response_model=LogPage)
def get_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    action: Optional[str] = Query(None, description="Filter by action"),
    status: Optional[str] = Query(None, description="Filter by status (SUCCESS/FAIL)"),
    db: Database = Depends(get_db),
    current_user: User = Depends(admin_only),
):
    # Scoped to entries produced by users of the admin's company
    company_user_ids = {u.id for u in db.identity.list_by_company(current_user.company_id)}
    logs = [entry for entry in db.logs() if entry.user_id in company_user_ids]

    if action:
        logs = [entry for entry in logs if action.upper() in entry.action]

    if status:
        logs = [entry for entry in logs if entry.status == status.upper()]

    # Newest first
    logs.reverse()

    total = len(logs)
    start = (page - 1) * page_size

    return {
        "items": [LogResponse.model_validate(entry) for entry in logs[start:start + page_size]],
        "total": total,
        "page": page,
        "page_size": page_size,
    }
