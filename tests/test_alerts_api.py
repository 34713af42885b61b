"""HTTP contract of the alert endpoints."""


class TestAlertEndpoints:

    def test_list_without_regenerate_serves_snapshot(self, client):
        response = client.get("/api/v1/alerts")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_with_regenerate(self, client):
        response = client.get("/api/v1/alerts", params={"regenerate": "true"})

        assert response.status_code == 200
        body = response.json()
        assert [a["stockStatus"] for a in body] == ["critical", "low", "overstocked"]
        assert body[1]["recommendedReorderQuantity"] == 110
        assert body[1]["warehouses"] == [
            {"warehouseId": 1, "warehouseName": "Main Distribution Center", "warehouseCode": "MDC", "quantity": 40}
        ]

    def test_post_regenerate_keeps_ids(self, client):
        first = client.post("/api/v1/alerts/regenerate").json()
        second = client.post("/api/v1/alerts/regenerate").json()
        assert [a["id"] for a in first] == [a["id"] for a in second]

    def test_list_filters(self, client):
        client.post("/api/v1/alerts/regenerate")

        response = client.get("/api/v1/alerts", params={"stockStatus": "low", "status": "active"})

        assert [a["productId"] for a in response.json()] == [2]

    def test_non_numeric_product_filter_matches_nothing(self, client):
        client.post("/api/v1/alerts/regenerate")
        response = client.get("/api/v1/alerts", params={"productId": "abc"})
        assert response.status_code == 200
        assert response.json() == []

    def test_invalid_status_filter(self, client):
        response = client.get("/api/v1/alerts", params={"status": "snoozed"})
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "status"

    def test_acknowledge_then_read(self, client):
        alert_id = client.post("/api/v1/alerts/regenerate").json()[0]["id"]

        response = client.put(f"/api/v1/alerts/{alert_id}", json={"status": "acknowledged", "notes": "On it"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "acknowledged"
        assert body["notes"] == "On it"
        assert body["acknowledgedAt"] is not None
        assert client.get(f"/api/v1/alerts/{alert_id}").json() == body

    def test_put_null_notes_clears(self, client):
        alert_id = client.post("/api/v1/alerts/regenerate").json()[0]["id"]
        client.put(f"/api/v1/alerts/{alert_id}", json={"notes": "temporary"})

        response = client.put(f"/api/v1/alerts/{alert_id}", json={"notes": None})

        assert response.json()["notes"] is None

    def test_delete_dismisses(self, client):
        alert_id = client.post("/api/v1/alerts/regenerate").json()[0]["id"]

        response = client.delete(f"/api/v1/alerts/{alert_id}")

        assert response.status_code == 200
        assert response.json()["status"] == "dismissed"
        assert client.get(f"/api/v1/alerts/{alert_id}").json()["status"] == "dismissed"

    def test_unknown_alert(self, client):
        assert client.get("/api/v1/alerts/nope").status_code == 404
        assert client.put("/api/v1/alerts/nope", json={"status": "resolved"}).json() == {"message": "Alert not found"}
        assert client.delete("/api/v1/alerts/nope").status_code == 404
