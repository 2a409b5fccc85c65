from fixit_admin.core.listing import ListView
from fixit_admin.services.collection import CollectionService


class InvoiceService(CollectionService):
    resource = "invoices"
    view = ListView(
        search_fields=("customerName", "invoiceNumber"),
        filter_fields=("status",),
    )
