# backend/services/identity_store.py
import logging
import threading
from typing import Dict, List, Optional, Tuple

from config import settings
from exceptions import DuplicateEmail, NotFound
from models.company import Company
from models.users import User, ROLE_ADMIN, ROLE_MANAGER

logger = logging.getLogger(__name__)


class IdentityStore:
    """In-memory users and companies.

    Emails are unique across every company (exact, case-sensitive match).
    Users keep insertion order so company listings are stable.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._companies: Dict[str, Company] = {}
        self._users: Dict[str, User] = {}
        self._ids_by_email: Dict[str, str] = {}

    # Create a company; always succeeds
    def create_company(self, name: str, country: Optional[str] = None) -> Company:
        company = Company(
            name=name,
            country=country or settings.DEFAULT_COUNTRY,
            currency=settings.DEFAULT_CURRENCY,
        )
        with self._lock:
            self._companies[company.id] = company
        logger.info("Company created: %s", company.id)
        return company

    def create_user(
        self,
        email: str,
        password_hash: str,
        name: str,
        role: str,
        company_id: str,
        manager_id: Optional[str] = None,
    ) -> User:
        return self._add_user(
            email=email,
            password_hash=password_hash,
            name=name,
            role=role,
            company_id=company_id,
            manager_id=manager_id,
            is_manager_approver=(role == ROLE_MANAGER),
        )

    def create_admin(self, email: str, password_hash: str, name: str, company_id: str) -> User:
        return self._add_user(
            email=email,
            password_hash=password_hash,
            name=name,
            role=ROLE_ADMIN,
            company_id=company_id,
            is_manager_approver=True,
        )

    def signup(
        self, email: str, password_hash: str, name: str, country: Optional[str] = None
    ) -> Tuple[Company, User]:
        """Create a company and its single admin, or nothing at all.

        Raises DuplicateEmail before the company is created.
        """
        with self._lock:
            if email in self._ids_by_email:
                raise DuplicateEmail(email)
            company = self.create_company(f"{name}'s Company", country)
            admin = self.create_admin(email, password_hash, name, company.id)
        return company, admin

    def _add_user(self, *, email: str, company_id: str, **fields) -> User:
        with self._lock:
            if email in self._ids_by_email:
                raise DuplicateEmail(email)
            if company_id not in self._companies:
                raise NotFound("Company", company_id)
            user = User(email=email, company_id=company_id, **fields)
            self._users[user.id] = user
            self._ids_by_email[email] = user.id
        logger.info("User created: %s (%s) in company %s", user.id, user.role, company_id)
        return user

    def email_exists(self, email: str) -> bool:
        with self._lock:
            return email in self._ids_by_email

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user_id = self._ids_by_email.get(email)
            return self._users.get(user_id) if user_id else None

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_company(self, company_id: str) -> Optional[Company]:
        with self._lock:
            return self._companies.get(company_id)

    def list_by_company(self, company_id: str) -> List[User]:
        with self._lock:
            return [u for u in self._users.values() if u.company_id == company_id]

    def clear(self):
        with self._lock:
            self._companies.clear()
            self._users.clear()
            self._ids_by_email.clear()
