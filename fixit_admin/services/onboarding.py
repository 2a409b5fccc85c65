from fixit_admin.core.listing import ListView, everything, status_in
from fixit_admin.services.collection import CollectionService


def _account_type(name: str):
    return status_in(name, field_name="accountType")


class OnboardingService(CollectionService):
    resource = "onboarding"
    view = ListView(
        search_fields=("surname", "otherNames", "email", "phone"),
        tabs={
            "all": everything,
            "customer": _account_type("Customer"),
            "repairer": _account_type("Repairer"),
            "repair-company": _account_type("Repair Company"),
            "vendor": _account_type("Vendor"),
        },
        filter_fields=("status",),
    )
