from fixit_admin.schemas.common import CamelModel


class DashboardStats(CamelModel):
    total_customers: int = 0
    total_repairers: int = 0
    total_bookings: int = 0
    total_revenue: float = 0
    active_repairs: int = 0
    completed_repairs: int = 0
    pending_orders: int = 0
    monthly_growth: float = 0
