# backend/database.py
import threading
from typing import List

from fastapi import Request

from models.log import Log
from services.approval_engine import ApprovalEngine
from services.expense_ledger import ExpenseLedger
from services.identity_store import IdentityStore


# All process state; one instance per app, created at startup and dropped at shutdown
class Database:
    def __init__(self):
        self.identity = IdentityStore()
        self.ledger = ExpenseLedger()
        self.approvals = ApprovalEngine(self.identity, self.ledger)
        self._logs: List[Log] = []
        self._logs_lock = threading.Lock()

    def add_log(self, entry: Log):
        with self._logs_lock:
            self._logs.append(entry)

    def logs(self) -> List[Log]:
        with self._logs_lock:
            return list(self._logs)

    def close(self):
        self.identity.clear()
        self.ledger.clear()
        with self._logs_lock:
            self._logs.clear()


def init_db(app) -> Database:
    db = Database()
    app.state.db = db
    return db


def close_db(app):
    db = getattr(app.state, "db", None)
    if db is not None:
        db.close()
        app.state.db = None


def get_db(request: Request) -> Database:
    return request.app.state.db
