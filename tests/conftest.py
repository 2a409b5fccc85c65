"""Shared fixtures: a fake JSON-store backend and an isolated local database."""

import copy
import json
import os
import tempfile

# Must be set before fixit_admin is imported: settings are read at import time.
_DB_DIR = tempfile.mkdtemp(prefix="fixit-admin-tests-")
_DB_PATH = os.path.join(_DB_DIR, "test.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ.pop("BACKEND_API_TOKEN", None)

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from fixit_admin.main import app  # noqa: E402
from fixit_admin.services.backend_client import BackendClient, get_backend  # noqa: E402

ADMIN_EMAIL = "admin@fixit.com"
ADMIN_PASSWORD = "admin123"

_STATUSES = ("Active", "Inactive", "Online", "Offline")


def _accounts(prefix: str, count: int, **extra) -> list[dict]:
    return [
        {
            "id": i,
            "name": f"{prefix} {i}",
            "email": f"{prefix.lower()}{i}@example.com",
            "phone": f"+23480000000{i:02d}",
            "status": _STATUSES[(i - 1) % len(_STATUSES)],
            "lastLogin": "2024-03-01T09:00:00Z",
            **extra,
        }
        for i in range(1, count + 1)
    ]


def seed_data() -> dict:
    return {
        "users": [
            {
                "id": 1,
                "name": "Ada Admin",
                "email": ADMIN_EMAIL,
                "password": ADMIN_PASSWORD,
                "role": "admin",
                "createdAt": "2024-01-01T00:00:00.000Z",
                "lastLogin": None,
                "isActive": True,
            },
            {
                "id": 2,
                "name": "Dora Disabled",
                "email": "disabled@fixit.com",
                "password": "secret99",
                "role": "admin",
                "isActive": False,
            },
        ],
        "customers": _accounts("Customer", 12),
        "vendors": _accounts("Vendor", 4, category="Spare parts"),
        "repairers": _accounts("Repairer", 4, specialization="Plumbing"),
        "repair-companies": _accounts(
            "Company", 3, specializations=["Electrical", "Carpentry"]
        ),
        "transactions": [
            {"id": "TX-001", "paymentBy": "Jane Doe", "purpose": "Booking fee", "amountPaid": 5000, "status": "Successful"},
            {"id": "TX-002", "paymentBy": "John Smith", "purpose": "Spare parts", "amountPaid": 12000, "status": "Pending"},
            {"id": "TX-003", "paymentBy": "Jane Roe", "purpose": "Booking fee", "amountPaid": 7000, "status": "Successful"},
        ],
        "invoices": [
            {"id": 1, "invoiceNumber": "INV-1001", "customerName": "Jane Doe", "amount": 5000, "status": "Paid"},
            {"id": 2, "invoiceNumber": "INV-1002", "customerName": "John Smith", "amount": 800, "status": "Overdue"},
        ],
        "onboarding": [
            {"id": 1, "surname": "Okafor", "otherNames": "Chidi", "email": "chidi@example.com", "accountType": "Repairer", "status": "Pending"},
            {"id": 2, "surname": "Bello", "otherNames": "Amina", "email": "amina@example.com", "accountType": "Vendor", "status": "Approved"},
            {"id": 3, "surname": "Adeyemi", "otherNames": "Tunde", "email": "tunde@example.com", "accountType": "Repair Company", "status": "Pending"},
        ],
        "content": [
            {"id": 1, "name": "Leaky faucet tips", "status": "pending", "contentText": "Tighten the packing nut"},
            {"id": 2, "name": "Fridge repair", "status": "approved", "contentText": "Check the thermostat"},
            {"id": 3, "name": "Spam post", "status": "rejected", "contentText": "Buy now", "reason": "Spam"},
            {"id": 4, "name": "Phone screen", "status": "pending", "contentText": "Use a heat gun"},
        ],
        "orders": [
            {"id": "ORD-1001", "customerName": "Jane Doe", "orderDate": "2024-03-01T10:00:00Z", "orderStatus": "Pending", "totalAmount": 150.0},
            {"id": "ORD-1002", "customerName": "John Smith", "orderDate": "2024-03-02T11:30:00Z", "orderStatus": "Completed", "totalAmount": 80.5},
            {"id": "ORD-1003", "customerName": "Jane Roe", "orderDate": "2024-03-01T16:45:00Z", "orderStatus": "Completed", "totalAmount": 42.0},
        ],
        "stores": [
            {"id": "ST-01", "storeName": "Volt Spares", "status": "Active"},
            {"id": "ST-02", "storeName": "Pipe Hub", "status": "Inactive"},
        ],
        "products": [
            {"id": "P-1", "productName": "Copper pipe", "category": "Plumbing", "status": "In Stock"},
            {"id": "P-2", "productName": "Circuit breaker", "category": "Electrical", "status": "In Stock"},
            {"id": "P-3", "productName": "PVC elbow", "category": "Plumbing", "status": "Out of Stock"},
        ],
        "reports": [
            {"id": "R-1", "reportName": "March sales", "type": "Sales", "totalRevenue": 272.5},
        ],
        "notifications": [
            {"id": 1, "type": "message", "message": "New message from Jane", "createdAt": "2024-03-02T08:00:00Z"},
            {"id": 2, "type": "user", "message": "New customer signed up", "createdAt": "2024-03-01T15:00:00Z"},
            {"id": 3, "type": "message", "message": "New message from John", "createdAt": "2024-03-02T12:00:00Z"},
            {"id": 4, "type": "content", "message": "Content awaiting review", "createdAt": "2024-02-20T12:00:00Z"},
        ],
        "e-repairBookings": [
            {"id": 1, "repairId": "REP-001", "customerName": "Jane Doe", "category": "Phones", "bookingDate": "2024-03-01T09:00:00Z", "serviceType": "Home Service", "technician": "", "bookingStatus": "Pending", "initialCost": 5000},
            {"id": 2, "repairId": "REP-002", "customerName": "John Smith", "category": "Laptops", "bookingDate": "2024-03-02T10:00:00Z", "serviceType": "Walk-in", "technician": "Musa Bello", "bookingStatus": "In Progress", "initialCost": 12000},
            {"id": 3, "repairId": "REP-003", "customerName": "Jane Roe", "category": "Phones", "bookingDate": "2024-03-01T15:00:00Z", "serviceType": "Pickup", "technician": "", "bookingStatus": "Cancelled", "initialCost": 3000},
        ],
        "booking-repairers": [
            {"id": 7, "name": "Musa Bello", "email": "musa@example.com", "status": "Active", "repairCategory": "Phones", "repairSkills": ["Screens", "Batteries"]},
            {"id": 8, "name": "Ife Ojo", "email": "ife@example.com", "status": "Active", "repairCategory": "Laptops", "repairSkills": ["Keyboards"]},
        ],
        "e-repairRepairs": [
            {"id": 1, "repairId": "REP-002", "technician": "Musa Bello", "repairStatus": "In Progress", "startDate": "2024-03-02", "partsUsed": ["Battery"]},
            {"id": 2, "repairId": "REP-004", "technician": "Ife Ojo", "repairStatus": "Completed", "startDate": "2024-02-20", "partsUsed": []},
        ],
        "e-repairDiscovery": [
            {"id": 1, "repairId": "REP-002", "discovery": "Swollen battery", "discoveryDate": "2024-03-02", "invoiceAmount": 8000, "paymentStatus": "Unpaid"},
            {"id": 2, "repairId": "REP-004", "discovery": "Cracked hinge", "discoveryDate": "2024-02-21", "invoiceAmount": 4500, "paymentStatus": "Paid"},
        ],
        "e-repairReports": [
            {"id": "ER-1", "reportName": "February repairs", "type": "Monthly", "generatedDate": "2024-03-01", "repairsCompleted": 18},
        ],
        "sosRequests": [
            {"id": 1, "username": "jane_d", "location": "Ikeja, Lagos", "time": "2024-03-01T08:00:00Z", "status": "Pending", "issueDescription": "Burst pipe in kitchen"},
            {"id": 2, "username": "john_s", "location": "Wuse, Abuja", "time": "2024-03-01T09:30:00Z", "status": "In Progress", "issueDescription": "Sparking socket"},
            {"id": 3, "username": "mark_p", "location": "Yaba, Lagos", "time": "2024-02-28T18:00:00Z", "status": "Resolved", "issueDescription": "Gas smell"},
        ],
        "superAdmins": [
            {"id": 1, "name": "Sam Root", "email": "sam@fixit.com", "role": "Super Admin", "status": "Active", "lastLogin": "2024-03-01T08:00:00Z", "activities": [{"date": "2024-03-01", "time": "08:05", "activity": "Approved vendor", "status": "Success"}]},
            {"id": 2, "name": "Kemi Ade", "email": "kemi@fixit.com", "role": "Admin", "status": "Inactive", "lastLogin": "2024-02-10T12:00:00Z", "activities": []},
        ],
        "reviews": [
            {"id": 1, "name": "Jane Doe", "email": "jane@example.com", "rating": 5, "comment": "Quick and tidy repair", "response": "Thank you!", "status": "Published", "date": "2024-03-01"},
            {"id": 2, "name": "John Smith", "email": "john@example.com", "rating": 2, "comment": "Technician arrived late", "response": "", "status": "Published", "date": "2024-03-02"},
            {"id": 3, "name": "Jane Roe", "email": "roe@example.com", "rating": 4, "comment": "Fair price", "status": "Hidden", "date": "2024-03-03"},
        ],
        "adverts": [
            {"id": 1, "dateTime": "2024-03-01T09:00:00Z", "advertiser": "Volt Spares", "category": "Electrical", "amountPaid": 25000, "status": "Pending"},
            {"id": 2, "dateTime": "2024-03-03T23:30:00Z", "advertiser": "Pipe Hub", "category": "Plumbing", "amountPaid": 15000, "status": "Approved"},
            {"id": 3, "dateTime": "2024-03-05T12:00:00Z", "advertiser": "Tile World", "category": "Tiling", "amountPaid": 9000, "status": "Rejected"},
        ],
        "news": [
            {"id": 1, "title": "New repairer onboarding flow", "postedBy": "Sam Root", "dateTime": "2024-03-01T10:00:00Z", "body": "Applications now take five minutes."},
            {"id": 2, "title": "Holiday support hours", "postedBy": "Kemi Ade", "dateTime": "2024-03-04T10:00:00Z", "body": "Support closes at 4pm on public holidays."},
        ],
        "dashboardStats": {
            "totalCustomers": 12,
            "totalRepairers": 4,
            "totalBookings": 31,
            "totalRevenue": 272.5,
        },
    }


class FakeBackend:
    """In-memory json-server: ``/<resource>`` collections plus singleton documents.

    ``failing`` holds resources that answer 500; ``unreachable`` holds
    resources whose requests raise a connection error.
    """

    def __init__(self, data: dict | None = None):
        self.data = data if data is not None else seed_data()
        self.failing: set[str] = set()
        self.unreachable: set[str] = set()
        self.requests: list[httpx.Request] = []

    def _find(self, resource: str, entity_id: str) -> tuple[int, dict] | None:
        for index, item in enumerate(self.data.get(resource, [])):
            if str(item.get("id")) == entity_id:
                return index, item
        return None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = [p for p in request.url.path.split("/") if p]
        resource = parts[0] if parts else ""
        entity_id = parts[1] if len(parts) > 1 else None

        if resource in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if resource in self.failing:
            return httpx.Response(500, json={"error": "boom"})
        if resource not in self.data:
            return httpx.Response(404, json={})

        collection = self.data[resource]
        body = json.loads(request.content) if request.content else None

        if entity_id is None:
            if request.method == "GET":
                return httpx.Response(200, json=collection)
            if request.method == "POST":
                if "id" not in body:
                    ids = [i["id"] for i in collection if isinstance(i.get("id"), int)]
                    body["id"] = max(ids, default=0) + 1
                collection.append(body)
                return httpx.Response(201, json=body)
            return httpx.Response(405, json={})

        found = self._find(resource, entity_id)
        if found is None:
            return httpx.Response(404, json={})
        index, item = found
        if request.method == "GET":
            return httpx.Response(200, json=item)
        if request.method == "PUT":
            collection[index] = {**body, "id": item["id"]}
            return httpx.Response(200, json=collection[index])
        if request.method == "PATCH":
            item.update(body)
            return httpx.Response(200, json=item)
        if request.method == "DELETE":
            del collection[index]
            return httpx.Response(200, json={})
        return httpx.Response(405, json={})

    def client(self) -> BackendClient:
        return BackendClient(
            base_url="http://backend", transport=httpx.MockTransport(self.handler)
        )


@pytest.fixture
def fake_backend():
    return FakeBackend(copy.deepcopy(seed_data()))


@pytest.fixture
def client(fake_backend):
    if os.path.exists(_DB_PATH):
        os.remove(_DB_PATH)

    async def _override():
        async with fake_backend.client() as backend:
            yield backend

    app.dependency_overrides[get_backend] = _override
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def login(client: TestClient, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> str:
    response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["data"]["token"]


@pytest.fixture
def auth_headers(client):
    return {"Authorization": f"Bearer {login(client)}"}
