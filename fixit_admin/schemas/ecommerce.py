"""E-commerce schemas: orders, stores, products, sales reports."""

from fixit_admin.schemas.common import BackendRecord


class Order(BackendRecord):
    customer_name: str = ""
    order_date: str | None = None
    total_amount: float | None = None
    order_status: str | None = None  # Pending | Completed
    payment_status: str | None = None
    shipping_status: str | None = None
    store: str | None = None
    vendor: str | None = None
    product_name: str | None = None
    quantity: int | None = None
    shipping_date: str | None = None
    delivery_date: str | None = None
    customer_address: str | None = None


class Store(BackendRecord):
    store_name: str = ""
    total_products: int | None = None
    rating: float | None = None
    last_order_date: str | None = None
    status: str | None = None
    location: str | None = None


class Product(BackendRecord):
    product_name: str = ""
    category: str | None = None
    quantity: int | None = None
    price: float | None = None
    status: str | None = None
    store_id: int | str | None = None
    date_added: str | None = None


class Report(BackendRecord):
    report_name: str = ""
    type: str | None = None
    period: str | None = None
    generated_date: str | None = None
    total_revenue: float | None = None
    status: str | None = None
    downloads: int | None = None
