"""E-repair schemas: bookings, repairs, discovery findings and reports."""

from pydantic import Field

from fixit_admin.schemas.common import BackendRecord, CamelModel


class Booking(BackendRecord):
    repair_id: str = ""
    customer_id: int | str | None = None
    customer_name: str = ""
    category: str | None = None
    booking_date: str | None = None
    service_type: str | None = None  # Home Service | Walk-in | Pickup
    technician: str | None = None
    technician_id: int | str | None = None
    booking_status: str | None = None  # Pending | In Progress | Completed | Cancelled
    initial_cost: float | None = None
    payment_status: str | None = None
    customer_phone: str | None = None
    customer_address: str | None = None
    device_type: str | None = None
    brand: str | None = None
    model: str | None = None
    issue_description: str | None = None
    scheduled_time: str | None = None
    priority: str | None = None
    request_type: str | None = None
    third_party_name: str | None = None
    third_party_number: str | None = None
    reason_for_cancellation: str | None = None


class BookingRepairer(BackendRecord):
    """Repairer that can be assigned to a booking."""

    name: str = ""
    email: str | None = None
    phone: str | None = None
    status: str | None = None
    repair_category: str | None = None
    repair_skills: list[str] = Field(default_factory=list)


class RepairerAssignment(CamelModel):
    repairer_id: int | str


class Repair(BackendRecord):
    repair_id: str = ""
    technician: str | None = None
    repair_status: str | None = None
    start_date: str | None = None
    completion_date: str | None = None
    total_cost: float | None = None
    payment_status: str | None = None
    repair_confirmation: str | None = None
    parts_used: list[str] = Field(default_factory=list)
    labor_hours: float | None = None
    warranty: str | None = None
    notes: str | None = None


class Discovery(BackendRecord):
    repair_id: str = ""
    discovery: str = ""
    description: str | None = None
    discovery_date: str | None = None
    invoice_amount: float | None = None
    payment_status: str | None = None
    technician: str | None = None
    images: list[str] = Field(default_factory=list)
    priority: str | None = None
    customer_approval: str | None = None


class RepairReport(BackendRecord):
    report_name: str = ""
    type: str | None = None
    period: str | None = None
    generated_date: str | None = None
    total_revenue: float | None = None
    status: str | None = None
    downloads: int | None = None
    repairs_completed: int | None = None
    average_completion_time: str | None = None
    customer_satisfaction: float | None = None
