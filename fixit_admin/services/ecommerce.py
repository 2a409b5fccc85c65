"""E-commerce tabs: orders, stores, products and sales reports.

Each tab searches its name column case-insensitively and its id verbatim.
Orders can also be narrowed by status and by the day they were placed.
"""

from fixit_admin.core.listing import ListView
from fixit_admin.services.collection import CollectionService


class OrderService(CollectionService):
    resource = "orders"
    view = ListView(
        search_fields=("customerName",),
        id_fields=("id",),
        filter_fields=("orderStatus",),
        date_field="orderDate",
    )


class StoreService(CollectionService):
    resource = "stores"
    view = ListView(search_fields=("storeName",), id_fields=("id",))


class ProductService(CollectionService):
    resource = "products"
    view = ListView(
        search_fields=("productName",),
        id_fields=("id",),
        filter_fields=("category", "status"),
    )


class ReportService(CollectionService):
    resource = "reports"
    view = ListView(search_fields=("reportName",), id_fields=("id",))
