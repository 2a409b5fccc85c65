"""SOS (emergency help) request schemas."""

from typing import Literal

from fixit_admin.schemas.common import BackendRecord, CamelModel

SosStatus = Literal["Pending", "In Progress", "Resolved", "Closed"]


class SosRequest(BackendRecord):
    username: str = ""
    location: str | None = None
    time: str | None = None
    status: str | None = None
    issue_description: str | None = None
    attached_file: str | None = None


class SosStatusUpdate(CamelModel):
    status: SosStatus
