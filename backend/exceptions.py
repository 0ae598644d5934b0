"""
Typed errors raised by the stores, the approval engine and the token layer.

Every error carries a machine-readable ``code`` and the HTTP status the API
layer answers with. Routes let them propagate; ``main.py`` registers a single
handler that renders ``{"detail": ..., "code": ...}``.

    ExpenseAppError
    +-- DuplicateEmail
    +-- NotFound
    +-- InvalidCredentials
    +-- MissingToken
    +-- InvalidToken
    +-- Forbidden
    +-- InvalidAmount
    +-- InvalidAction
    +-- InternalFailure
"""
from typing import Optional


class ExpenseAppError(Exception):
    """Base class for all domain errors."""

    code: str = "EXPENSE_APP_ERROR"
    status_code: int = 500
    default_message: str = "Unexpected error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateEmail(ExpenseAppError):
    code = "DUPLICATE_EMAIL"
    status_code = 400
    default_message = "User already exists"

    def __init__(self, email: str):
        self.email = email
        super().__init__("User already exists")


class NotFound(ExpenseAppError):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "Not found"

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found")


class InvalidCredentials(ExpenseAppError):
    code = "INVALID_CREDENTIALS"
    status_code = 401
    default_message = "Invalid email or password"


class MissingToken(ExpenseAppError):
    code = "MISSING_TOKEN"
    status_code = 401
    default_message = "Access token required"


class InvalidToken(ExpenseAppError):
    code = "INVALID_TOKEN"
    status_code = 403
    default_message = "Invalid token"


class Forbidden(ExpenseAppError):
    code = "FORBIDDEN"
    status_code = 403
    default_message = "Forbidden"


class InvalidAmount(ExpenseAppError):
    code = "INVALID_AMOUNT"
    status_code = 400

    def __init__(self, amount):
        self.amount = amount
        super().__init__("Amount must be a positive number")


class InvalidAction(ExpenseAppError):
    code = "INVALID_ACTION"
    status_code = 400

    def __init__(self, action):
        self.action = action
        super().__init__(f"Unknown action '{action}', expected 'approve' or 'reject'")


class InternalFailure(ExpenseAppError):
    code = "INTERNAL_FAILURE"
    status_code = 500
    default_message = "Internal server error"
