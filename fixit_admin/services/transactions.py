from fixit_admin.core.listing import ListView, everything, status_in
from fixit_admin.services.collection import CollectionService


class TransactionService(CollectionService):
    resource = "transactions"
    view = ListView(
        search_fields=("paymentBy", "purpose"),
        id_fields=("id",),
        tabs={
            "all": everything,
            "successful": status_in("Successful"),
            "pending": status_in("Pending"),
        },
    )
