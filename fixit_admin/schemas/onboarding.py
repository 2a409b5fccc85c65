"""Onboarding application schemas."""

from fixit_admin.schemas.common import BackendRecord


class OnboardingApplication(BackendRecord):
    date_time: str | None = None
    surname: str = ""
    other_names: str = ""
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    account_type: str | None = None  # Customer | Repairer | Repair Company | Vendor
    status: str | None = None

    # identity
    profile_picture: str | None = None
    gov_id_type: str | None = None
    gov_id_front: str | None = None
    gov_id_back: str | None = None
    dob: str | None = None
    occupation: str | None = None
    vin: str | None = None

    # business applicants
    business_name: str | None = None
    business_phone: str | None = None
    repair_category: str | None = None
    repair_skills: list[str] | None = None
    years_experience: int | None = None
    number_of_repairers: int | None = None
    registered_business_name: str | None = None
    type_of_business: str | None = None
    cac_registration_number: str | None = None
    date_of_registration: str | None = None
