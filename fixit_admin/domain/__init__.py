"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Only state owned by the dashboard itself lives here; marketplace records
(customers, vendors, ...) stay in the upstream backend.

  session.py  — Login sessions (also serves the login history view)
  audit.py    — Immutable audit trail (never updated or deleted)
  mixins.py   — Shared TimestampMixin
"""

from fixit_admin.domain.audit import AuditTrail
from fixit_admin.domain.session import AuthSession

__all__ = [
    "AuditTrail",
    "AuthSession",
]
