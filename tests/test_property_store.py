"""Tests for the property store: CRUD, validation, detaching tenants and search."""

from decimal import Decimal

import pytest

from models import Apartment, Building, Tenant
from services.errors import NotFoundError, RecordValidationError
from services.property_store import PropertyStore
from services.tenant_service import TenantService


def test_create_building_generates_id(db):
    store = PropertyStore(db)

    building = store.create_building({"name": "Hill View", "building_code": "H", "address": "1 Hill Road"})

    assert len(building.id) == 32
    assert store.get_building_by_id(building.id) is building


def test_create_building_requires_name(db):
    with pytest.raises(RecordValidationError, match="Building must have name"):
        PropertyStore(db).create_building({"name": " ", "building_code": "H", "address": "1 Hill Road"})


def test_duplicate_id_is_rejected(seeded):
    with pytest.raises(RecordValidationError, match="already exists"):
        PropertyStore(seeded).create_flat({"id": "F1", "name": "Copy", "door_number": "1", "address": "x"})


def test_create_apartment_in_unknown_building(db):
    with pytest.raises(NotFoundError):
        PropertyStore(db).create_apartment("B404", {"door_number": "1"})


def test_apartment_validation(seeded):
    store = PropertyStore(seeded)

    with pytest.raises(RecordValidationError, match="non-negative bedroom count"):
        store.update_apartment("A12", {"bedroom_count": -1})
    with pytest.raises(RecordValidationError, match="door number"):
        store.update_apartment("A12", {"door_number": ""})
    assert store.get_apartment("A12").bedroom_count == 2


def test_flat_and_land_validation(seeded):
    store = PropertyStore(seeded)

    with pytest.raises(RecordValidationError, match="Flat must have name, address, and door number"):
        store.update_flat("F1", {"address": ""})
    with pytest.raises(RecordValidationError, match="positive area"):
        store.update_land("L1", {"area": Decimal("0")})


def test_patch_rejects_unknown_fields_and_id_change(seeded):
    store = PropertyStore(seeded)

    with pytest.raises(RecordValidationError, match="Unknown field"):
        store.update_flat("F1", {"colour": "blue"})
    with pytest.raises(RecordValidationError, match="id cannot be changed"):
        store.update_flat("F1", {"id": "F2"})


def test_update_missing_unit_raises(seeded):
    with pytest.raises(NotFoundError):
        PropertyStore(seeded).update_unit("flat", "F404", {"is_occupied": True})


def test_update_unit_dispatches_by_type(seeded):
    store = PropertyStore(seeded)

    land = store.update_unit("land", "L1", {"is_leased": True})

    assert land.is_leased is True
    with pytest.raises(RecordValidationError, match="Unknown property type"):
        store.update_unit("castle", "C1", {})


def test_delete_building_cascades_and_detaches_tenants(seeded, make_form):
    record = TenantService(seeded).submit_tenant(
        make_form(property_type="building", building_id="B1", apartment_id="A12")
    )
    store = PropertyStore(seeded)

    store.delete_building("B1")
    seeded.commit()

    assert seeded.get(Building, "B1") is None
    assert seeded.query(Apartment).count() == 0
    tenant = seeded.get(Tenant, record.id)
    assert tenant is not None
    assert tenant.property_id is None
    assert tenant.building_id is None


def test_search(seeded):
    store = PropertyStore(seeded)

    assert [b.id for b in store.search("lakeview")["buildings"]] == ["B1"]
    assert [f.id for f in store.search("4b")["flats"]] == ["F1"]
    assert [land.id for land in store.search("42/1")["lands"]] == ["L1"]
    results = store.search("park", kind="land")
    assert results["flats"] == []
    assert results["lands"] == []
