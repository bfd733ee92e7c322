"""Tests for property statistics, the dashboard summary and data import."""

from datetime import date, datetime
from decimal import Decimal

from models import Flat, Tenant
from schemas.property import FlatResponse
from schemas.statistics import DataImport
from services.statistics_service import (
    get_property_statistics,
    dashboard_summary,
    export_data,
    import_data,
)
from services.tenant_service import TenantService


def test_statistics_on_empty_database(db):
    stats = get_property_statistics(db)

    assert stats.total_units == 0
    assert stats.occupancy_rate == 0


def test_statistics_count_units(seeded, make_form):
    service = TenantService(seeded)
    service.submit_tenant(make_form(property_type="building", building_id="B1", apartment_id="A12"))
    service.submit_tenant(make_form(full_name="Meena Iyer", phone="9111111111", property_type="flat", flat_id="F1"))

    stats = get_property_statistics(seeded)

    assert stats.total_units == 4
    assert stats.total_occupied == 2
    assert stats.occupancy_rate == 50.0
    assert (stats.buildings.total, stats.buildings.occupied, stats.buildings.vacant) == (1, 1, 0)
    assert (stats.flats.total, stats.flats.occupied, stats.flats.vacant) == (1, 1, 0)
    assert (stats.lands.total, stats.lands.leased, stats.lands.vacant) == (1, 0, 1)


def test_occupancy_rate_is_rounded(seeded, make_form):
    TenantService(seeded).submit_tenant(make_form(property_type="flat", flat_id="F1"))
    seeded.add(Flat(id="F2", name="Second Flat", door_number="2", address="2 Park Street"))
    seeded.commit()

    # 1 of 5 units
    assert get_property_statistics(seeded).occupancy_rate == 20.0


def test_dashboard_summary(seeded, make_form):
    service = TenantService(seeded)
    service.submit_tenant(make_form(property_type="building", building_id="B1", apartment_id="A12"))
    moved_out = service.submit_tenant(
        make_form(full_name="Meena Iyer", phone="9111111111", property_type="flat", flat_id="F1", end_date=date(2027, 6, 30))
    )
    service.tenants.update_tenant(moved_out.id, {"is_active": False})
    seeded.commit()

    summary = dashboard_summary(seeded, today=date(2026, 12, 20))

    assert summary.total_properties == 3
    assert summary.total_tenants == 2
    assert summary.active_tenants == 1
    assert summary.expected_monthly_rent == Decimal("15000")
    assert summary.expiring_agreements == 1


def test_export_contains_everything(seeded, make_form):
    TenantService(seeded).submit_tenant(make_form(property_type="flat", flat_id="F1"))

    exported = export_data(seeded)

    assert [b.id for b in exported.buildings] == ["B1"]
    assert [a.id for a in exported.buildings[0].apartments] == ["A12", "A13"]
    assert [f.id for f in exported.flats] == ["F1"]
    assert [land.id for land in exported.lands] == ["L1"]
    assert len(exported.tenants) == 1
    assert isinstance(exported.export_date, datetime)


def test_import_replaces_only_given_collections(seeded, make_form):
    TenantService(seeded).submit_tenant(make_form())
    exported = export_data(seeded)
    new_flat = exported.flats[0].model_copy(update={"id": "F9", "name": "Imported Flat"})

    result = import_data(seeded, DataImport(flats=[FlatResponse.model_validate(new_flat)]))
    seeded.commit()

    assert result.flats == 1
    assert result.buildings == 0
    assert [f.id for f in seeded.query(Flat).all()] == ["F9"]
    assert seeded.query(Tenant).count() == 1
