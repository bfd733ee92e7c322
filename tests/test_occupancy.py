"""Tests for the occupancy synchronizer and the reconciliation sweep."""

from models import Apartment, Flat, Land
from services.occupancy_service import OccupancySynchronizer
from services.tenant_service import TenantService


def test_mark_occupied_and_release_land(seeded):
    sync = OccupancySynchronizer(seeded)

    sync.mark_occupied("land", "L1", "tenant_x")
    land = seeded.get(Land, "L1")
    assert land.is_leased is True
    assert land.current_tenant_id == "tenant_x"

    sync.release("land", "L1")
    assert land.is_leased is False
    assert land.current_tenant_id is None


def test_current_tenant_is_looked_up_from_tenants(seeded, make_form):
    record = TenantService(seeded).submit_tenant(make_form(property_type="flat", flat_id="F1"))
    flat = seeded.get(Flat, "F1")
    flat.current_tenant_id = "stale"
    seeded.commit()

    current = OccupancySynchronizer(seeded).current_tenant_for("flat", "F1")

    assert current.id == record.id


def test_reconcile_fixes_drifted_flags(seeded, make_form):
    record = TenantService(seeded).submit_tenant(make_form(property_type="flat", flat_id="F1"))
    # Drift: flat lost its flag, an empty apartment claims to be occupied
    flat = seeded.get(Flat, "F1")
    flat.is_occupied = False
    flat.current_tenant_id = None
    apartment = seeded.get(Apartment, "A13")
    apartment.is_occupied = True
    apartment.current_tenant_id = "tenant_gone"
    seeded.commit()

    checked, corrections = OccupancySynchronizer(seeded).reconcile_all()

    assert checked == 4
    by_id = {c["property_id"]: c for c in corrections}
    assert set(by_id) == {"F1", "A13"}
    assert by_id["F1"] == {"property_type": "flat", "property_id": "F1", "occupied": True, "current_tenant_id": record.id}
    assert by_id["A13"]["occupied"] is False
    assert seeded.get(Flat, "F1").is_occupied is True
    assert seeded.get(Apartment, "A13").current_tenant_id is None


def test_reconcile_ignores_inactive_tenants(seeded, make_form):
    service = TenantService(seeded)
    record = service.submit_tenant(make_form(property_type="building", building_id="B1", apartment_id="A12"))
    service.tenants.update_tenant(record.id, {"is_active": False})
    seeded.commit()

    _, corrections = OccupancySynchronizer(seeded).reconcile_all()

    assert corrections == [
        {"property_type": "apartment", "property_id": "A12", "occupied": False, "current_tenant_id": None}
    ]


def test_reconcile_on_consistent_data_changes_nothing(seeded):
    checked, corrections = OccupancySynchronizer(seeded).reconcile_all()

    assert checked == 4
    assert corrections == []
