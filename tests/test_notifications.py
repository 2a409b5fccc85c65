from datetime import datetime, timezone

import pytest

from conftest import FakeBackend, seed_data
from fixit_admin.core.exceptions import BackendUnavailableError
from fixit_admin.services.notifications import NotificationService


@pytest.mark.asyncio
async def test_feed_buckets_today_and_yesterday():
    fake = FakeBackend(seed_data())
    reference = datetime(2024, 3, 2, 18, 0, tzinfo=timezone.utc)

    async with fake.client() as backend:
        feed = await NotificationService(backend).feed(reference)

    assert [n.id for n in feed.today] == [3, 1]
    assert [n.id for n in feed.yesterday] == [2]


@pytest.mark.asyncio
async def test_malformed_payload_is_a_backend_error():
    data = seed_data()
    data["notifications"] = [{"id": "not-a-number", "message": "hi"}]
    fake = FakeBackend(data)

    async with fake.client() as backend:
        with pytest.raises(BackendUnavailableError):
            await NotificationService(backend).list_notifications(1, 10)


def test_list_is_newest_first(client, auth_headers):
    response = client.get("/api/v1/notifications", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert [n["id"] for n in body["data"]] == [3, 1, 2, 4]
    assert body["meta"]["total"] == 4


def test_list_filters_by_type(client, auth_headers):
    response = client.get("/api/v1/notifications?type=message", headers=auth_headers)

    assert [n["id"] for n in response.json()["data"]] == [3, 1]


def test_feed_endpoint_shape(client, auth_headers):
    response = client.get("/api/v1/notifications/feed", headers=auth_headers)

    assert response.status_code == 200
    assert set(response.json()["data"]) == {"today", "yesterday"}


def test_malformed_notifications_answer_502(client, auth_headers, fake_backend):
    fake_backend.data["notifications"] = [{"id": 1, "type": "message"}]

    response = client.get("/api/v1/notifications", headers=auth_headers)

    assert response.status_code == 502
    assert response.json()["error"]["code"] == "BACKEND_UNAVAILABLE"
