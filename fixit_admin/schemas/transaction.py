"""Payment transaction schemas."""

from fixit_admin.schemas.common import BackendRecord, CamelModel


class TransactionParty(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class TransactionPayment(CamelModel):
    method: str | None = None
    amount: float | None = None


class TransactionItem(CamelModel):
    purpose: str | None = None
    item_paid_for: str | None = None


class Transaction(BackendRecord):
    # list columns
    date_time: str | None = None
    payment_by: str | None = None
    purpose: str | None = None
    amount_paid: float | None = None
    status: str | None = None  # Successful | Pending

    # detail page extras
    date: str | None = None
    time: str | None = None
    # Either the embedded party or a bare user id reference
    user: TransactionParty | int | str | None = None
    payment: TransactionPayment | None = None
    item: TransactionItem | None = None
