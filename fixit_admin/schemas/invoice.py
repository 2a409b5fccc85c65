from fixit_admin.schemas.common import BackendRecord


class Invoice(BackendRecord):
    invoice_number: str = ""
    customer_name: str = ""
    amount: float | None = None
    status: str | None = None
    issue_date: str | None = None
    due_date: str | None = None
