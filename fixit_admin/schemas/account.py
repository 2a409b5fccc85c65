"""Account-holder schemas: customers, vendors, repairers, repair companies.

All four share the same record shape in the backend; each adds the field
its list view searches on.
"""

from typing import Literal

from pydantic import EmailStr, Field

from fixit_admin.schemas.common import BackendRecord, CamelModel

AccountStatus = Literal["Active", "Inactive", "Online", "Offline"]


class GovernmentId(CamelModel):
    type: str | None = None
    front_image: str | None = None
    back_image: str | None = None


class VerificationDocuments(CamelModel):
    government_id: GovernmentId | None = None


class Account(BackendRecord):
    name: str | None = ""
    email: str | None = ""
    phone: str | None = ""
    status: str | None = ""
    last_login: str | None = None
    address: str | None = None
    home_name: str | None = None
    verification_documents: VerificationDocuments | None = None


class Customer(Account):
    pass


class Vendor(Account):
    category: str | None = None


class Repairer(Account):
    specialization: str | None = None


class RepairCompany(Account):
    specializations: list[str] = Field(default_factory=list)


class AccountUpdate(CamelModel):
    """Edit-dialog form. Every field of the edit dialog is required."""

    name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    status: AccountStatus
