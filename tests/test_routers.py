"""API tests through FastAPI's TestClient."""

from sqlalchemy.exc import SQLAlchemyError

from services.tenant_store import TenantStore


def _seed_building(client):
    response = client.post("/api/buildings", json={
        "id": "B1",
        "name": "Lakeview Residency",
        "building_code": "A",
        "address": "12 MG Road",
    })
    assert response.status_code == 201
    response = client.post("/api/buildings/B1/apartments", json={
        "id": "A12",
        "door_number": "12",
        "bedroom_count": 2,
        "rent_amount": 15000,
    })
    assert response.status_code == 201


def _tenant_form(**overrides):
    data = {
        "full_name": "Ravi Kumar",
        "phone": "9876543210",
        "occupation": "Engineer",
        "agreement_number": "AGR-001",
        "start_date": "2026-01-01",
        "end_date": "2026-12-31",
    }
    data.update(overrides)
    return data


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}


def test_missing_record_keeps_route_detail(client):
    response = client.get("/api/tenants/tenant_missing")

    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_building_and_apartment_crud(client):
    _seed_building(client)

    building = client.get("/api/buildings/B1").json()
    assert [a["id"] for a in building["apartments"]] == ["A12"]

    response = client.put("/api/apartments/A12", json={"rent_amount": 16000})
    assert response.status_code == 200
    assert float(response.json()["rent_amount"]) == 16000

    assert client.delete("/api/apartments/A12").status_code == 204
    assert client.get("/api/apartments/A12").status_code == 404


def test_schema_and_store_validation_return_422(client):
    assert client.post("/api/flats", json={"name": "No Address", "door_number": "1"}).status_code == 422

    client.post("/api/flats", json={"id": "F1", "name": "Green Park Flat", "door_number": "4B", "address": "4 Park Street"})
    response = client.put("/api/flats/F1", json={"name": ""})
    assert response.status_code == 422
    assert response.json()["detail"] == "Flat must have name, address, and door number"


def test_tenant_form_flow_updates_occupancy(client):
    _seed_building(client)

    response = client.post("/api/tenants", json=_tenant_form(property_type="building", building_id="B1", apartment_id="A12"))

    assert response.status_code == 201
    body = response.json()
    tenant = body["tenant"]
    assert tenant["property_id"] == "A12"
    assert float(tenant["rental_agreement"]["rent_amount"]) == 15000
    assert float(tenant["rental_agreement"]["security_deposit"]) == 30000
    assert [n["level"] for n in body["notifications"]] == ["success"]

    apartment = client.get("/api/apartments/A12").json()
    assert apartment["is_occupied"] is True
    assert apartment["current_tenant_id"] == tenant["id"]

    response = client.delete(f"/api/tenants/{tenant['id']}")
    assert response.status_code == 200
    assert response.json()["tenant_id"] == tenant["id"]

    apartment = client.get("/api/apartments/A12").json()
    assert apartment["is_occupied"] is False
    assert apartment["current_tenant_id"] is None


def test_tenant_form_requires_fields(client):
    form = _tenant_form()
    del form["occupation"]

    assert client.post("/api/tenants", json=form).status_code == 422


def test_update_tenant_keeps_id(client):
    created = client.post("/api/tenants", json=_tenant_form()).json()["tenant"]

    response = client.put(f"/api/tenants/{created['id']}", json=_tenant_form(phone="9000000001"))

    assert response.status_code == 200
    updated = response.json()["tenant"]
    assert updated["id"] == created["id"]
    assert updated["created_at"] == created["created_at"]
    assert updated["contact_info"]["phone"] == "9000000001"
    assert client.get("/api/tenants").json()["total"] == 1


def test_move_in_deposit_and_statistics(client):
    client.post("/api/flats", json={"id": "F1", "name": "Green Park Flat", "door_number": "4B", "address": "4 Park Street", "rent_amount": 12000})
    tenant = client.post("/api/tenants", json=_tenant_form(monthly_rent=12000)).json()["tenant"]

    response = client.post(f"/api/tenants/{tenant['id']}/move-in", json={"property_type": "flat", "property_id": "F1"})
    assert response.status_code == 200
    assert client.get("/api/flats/F1").json()["is_occupied"] is True

    deposit = client.get(f"/api/tenants/{tenant['id']}/security-deposit").json()
    assert float(deposit["amount"]) == 24000
    assert deposit["status"] == "held"

    response = client.post(
        f"/api/tenants/{tenant['id']}/security-deposit/deductions",
        json={"description": "Broken window", "amount": 2000, "category": "damage"},
    )
    assert response.status_code == 200
    assert response.json()["deductions"][0]["category"] == "damage"

    stats = client.get("/api/properties/statistics").json()
    assert stats["total_units"] == 1
    assert stats["occupancy_rate"] == 100.0

    response = client.post(f"/api/tenants/{tenant['id']}/move-out", json={"move_out_date": "2026-06-30"})
    assert response.json()["tenant"]["is_active"] is False
    assert client.get("/api/flats/F1").json()["is_occupied"] is False


def test_reconcile_endpoint(client):
    client.post("/api/flats", json={"id": "F1", "name": "Green Park Flat", "door_number": "4B", "address": "4 Park Street"})
    client.put("/api/flats/F1", json={"is_occupied": True})

    response = client.post("/api/occupancy/reconcile")

    assert response.status_code == 200
    body = response.json()
    assert body["checked"] == 1
    assert body["corrections"] == [
        {"property_type": "flat", "property_id": "F1", "occupied": False, "current_tenant_id": None}
    ]


def test_dashboard_and_search(client):
    _seed_building(client)
    client.post("/api/tenants", json=_tenant_form(property_type="building", building_id="B1", apartment_id="A12"))

    dashboard = client.get("/api/dashboard").json()
    assert dashboard["total_properties"] == 1
    assert dashboard["active_tenants"] == 1

    results = client.get("/api/properties/search", params={"q": "lakeview"}).json()
    assert results["total"] == 1

    tenants = client.get("/api/tenants/search", params={"q": "ravi"}).json()
    assert tenants["total"] == 1


def _flat_tenant(client):
    client.post("/api/flats", json={"id": "F1", "name": "Green Park Flat", "door_number": "4B", "address": "4 Park Street", "rent_amount": 12000})
    return client.post("/api/tenants", json=_tenant_form(property_type="flat", flat_id="F1")).json()["tenant"]


def test_rent_payment_endpoints(client):
    tenant = _flat_tenant(client)

    response = client.post(f"/api/tenants/{tenant['id']}/payments", json={"amount": 12000, "due_date": "2026-02-05"})
    assert response.status_code == 201
    payment = response.json()
    assert payment["property_id"] == "F1"
    assert payment["status"] == "pending"

    response = client.post(f"/api/rent-payments/{payment['id']}/mark-paid", json={"paid_date": "2026-02-04", "payment_method": "upi"})
    assert response.status_code == 200
    paid = response.json()
    assert paid["status"] == "paid"
    assert paid["receipt_number"].startswith("RCP-20260204-")

    assert client.post(f"/api/rent-payments/{payment['id']}/mark-paid").status_code == 422

    history = client.get(f"/api/tenants/{tenant['id']}/payments").json()
    assert history["total"] == 1
    assert client.get("/api/rent-payments", params={"status": "paid"}).json()["total"] == 1

    analytics = client.get(f"/api/tenants/{tenant['id']}/analytics").json()
    assert float(analytics["total_rent_paid"]) == 12000
    assert analytics["payment_count"] == 1

    assert client.delete(f"/api/rent-payments/{payment['id']}").status_code == 204
    assert client.get(f"/api/rent-payments/{payment['id']}").status_code == 404


def test_generate_monthly_payments_endpoint(client):
    _flat_tenant(client)

    response = client.post("/api/rent-payments/generate", json={"month": 2, "year": 2026})

    assert response.status_code == 201
    assert response.json()["total"] == 1
    assert response.json()["payments"][0]["due_date"] == "2026-02-05"
    again = client.post("/api/rent-payments/generate", json={"month": 2, "year": 2026})
    assert again.json()["total"] == 0


def test_overdue_rent_route_is_not_a_tenant_id(client):
    response = client.get("/api/tenants/overdue-rent")

    assert response.status_code == 200
    assert response.json() == {"tenants": [], "total": 0}


def test_payment_for_unknown_tenant_is_404(client):
    response = client.post("/api/tenants/tenant_missing/payments", json={"amount": 100, "due_date": "2026-02-05"})

    assert response.status_code == 404


def test_removed_tenant_has_no_security_deposit(client):
    client.post("/api/flats", json={"id": "F1", "name": "Green Park Flat", "door_number": "4B", "address": "4 Park Street", "rent_amount": 12000})
    tenant = client.post("/api/tenants", json=_tenant_form(monthly_rent=12000)).json()["tenant"]
    client.post(f"/api/tenants/{tenant['id']}/move-in", json={"property_type": "flat", "property_id": "F1"})
    assert client.get(f"/api/tenants/{tenant['id']}/security-deposit").status_code == 200

    assert client.delete(f"/api/tenants/{tenant['id']}").status_code == 200

    assert client.get(f"/api/tenants/{tenant['id']}/security-deposit").status_code == 404


def test_move_out_database_failure_is_reported(client, monkeypatch):
    tenant = _flat_tenant(client)

    def failing_update(self, tenant_id, patch):
        raise SQLAlchemyError("database unavailable")

    monkeypatch.setattr(TenantStore, "update_tenant", failing_update)

    response = client.post(f"/api/tenants/{tenant['id']}/move-out", json={})

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Tenant could not be saved")
