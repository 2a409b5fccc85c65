def test_tabs_and_display_status(client, auth_headers):
    response = client.get("/api/v1/content", headers=auth_headers)

    body = response.json()
    assert body["tabs"] == {"all": 4, "pending": 2, "approved": 1, "disapproved": 1}
    labels = {c["id"]: c["displayStatus"] for c in body["data"]}
    assert labels == {1: "Pending", 2: "Approved", 3: "Disapproved", 4: "Pending"}


def test_disapproved_tab_lists_rejected_items(client, auth_headers):
    response = client.get("/api/v1/content?tab=disapproved", headers=auth_headers)

    assert [c["id"] for c in response.json()["data"]] == [3]


def test_search_covers_content_text(client, auth_headers):
    response = client.get("/api/v1/content?search=thermostat", headers=auth_headers)

    assert [c["id"] for c in response.json()["data"]] == [2]


def test_approve_pending_item(client, auth_headers, fake_backend):
    response = client.post(
        "/api/v1/content/1/review", json={"decision": "approve"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["data"]["displayStatus"] == "Approved"
    assert fake_backend.data["content"][0]["status"] == "approved"


def test_reject_requires_a_reason(client, auth_headers, fake_backend):
    response = client.post(
        "/api/v1/content/4/review",
        json={"decision": "reject", "reason": "   "},
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert "reason" in response.json()["error"]["fields"]
    assert fake_backend.data["content"][3]["status"] == "pending"


def test_reject_with_reason(client, auth_headers, fake_backend):
    response = client.post(
        "/api/v1/content/4/review",
        json={"decision": "reject", "reason": "Unsafe advice"},
        headers=auth_headers,
    )

    data = response.json()["data"]
    assert data["displayStatus"] == "Disapproved"
    assert data["reason"] == "Unsafe advice"
    assert fake_backend.data["content"][3]["status"] == "rejected"


def test_reviewed_item_cannot_be_reviewed_again(client, auth_headers):
    response = client.post(
        "/api/v1/content/3/review", json={"decision": "approve"}, headers=auth_headers
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


def test_unknown_decision_is_422(client, auth_headers):
    response = client.post(
        "/api/v1/content/1/review", json={"decision": "maybe"}, headers=auth_headers
    )

    assert response.status_code == 422
    assert "decision" in response.json()["error"]["fields"]
