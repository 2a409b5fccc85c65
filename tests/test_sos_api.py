def test_sos_tabs_and_search(client, auth_headers):
    response = client.get("/api/v1/sos-requests?search=lagos", headers=auth_headers)

    body = response.json()
    assert body["tabs"] == {"all": 3, "pending": 1, "in-progress": 1, "resolved": 1, "closed": 0}
    assert [r["id"] for r in body["data"]] == [1, 3]


def test_in_progress_tab(client, auth_headers):
    response = client.get("/api/v1/sos-requests?tab=in-progress", headers=auth_headers)

    assert [r["username"] for r in response.json()["data"]] == ["john_s"]


def test_update_status(client, auth_headers, fake_backend):
    response = client.patch(
        "/api/v1/sos-requests/1", json={"status": "Resolved"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "Resolved"
    assert fake_backend.data["sosRequests"][0]["status"] == "Resolved"


def test_unknown_status_is_422(client, auth_headers, fake_backend):
    response = client.patch(
        "/api/v1/sos-requests/1", json={"status": "Done"}, headers=auth_headers
    )

    assert response.status_code == 422
    assert "status" in response.json()["error"]["fields"]
    assert fake_backend.data["sosRequests"][0]["status"] == "Pending"
