"""Audit trail repository (append-only)."""

from fixit_admin.domain.audit import AuditTrail
from fixit_admin.repositories.base import BaseRepository


class AuditRepository(BaseRepository[AuditTrail]):
    model = AuditTrail
    # Audit rows are immutable: only create() and the list/get reads are used.
